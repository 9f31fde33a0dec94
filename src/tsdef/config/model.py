# topmark:header:start
#
#   project      : TsDef
#   file         : model.py
#   file_relpath : src/tsdef/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot used for one emission run.
    - `MutableConfig`: a mutable builder used while merging layers; it can be
      frozen into `Config` and thawed back for edits.

Layers, lowest to highest precedence:
    1. Built-in defaults (`load_defaults_dict`)
    2. ``pyproject.toml`` ``[tool.tsdef]`` in the working directory
    3. ``tsdef.toml`` in the working directory
    4. Extra files passed with ``--config`` (in order)
    5. CLI options

Path semantics:
    - ``output`` declared in a config file is resolved against that file's
      directory; CLI paths are resolved against the invocation CWD.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tsdef.config.io import (
    discover_config_files,
    extract_tsdef_table,
    load_defaults_dict,
    load_toml_dict,
)
from tsdef.config.keys import Toml
from tsdef.config.logging import get_logger
from tsdef.core.errors import ConfigError
from tsdef.rendering.definition_file import DEFAULT_ROOT_NAMESPACE, DefinitionFileOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tsdef.config.io import TomlTable
    from tsdef.config.logging import TsdefLogger

logger: TsdefLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration of one ``tsdef emit`` run.

    Attributes:
        root (str | None): ``module:attr`` reference of the root `TypeDef`.
        output (Path | None): Output file; ``None`` writes to stdout.
        header (str | None): Effective header text; ``None`` omits the header.
        root_namespace (str): Root namespace of the emitted module.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    root: str | None
    output: Path | None
    header: str | None
    root_namespace: str
    config_files: tuple[Path, ...] = ()

    def definition_options(self) -> DefinitionFileOptions:
        """Return the emission options for this config.

        Raises:
            OptionsError: If ``root_namespace`` is not a valid identifier.
        """
        return DefinitionFileOptions(header=self.header, root_namespace=self.root_namespace)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            root=self.root,
            output=self.output,
            header=self.header,
            no_header=self.header is None,
            root_namespace=self.root_namespace,
            config_files=list(self.config_files),
        )

    def to_dict(self) -> TomlTable:
        """Return the config as a TOML-compatible dict (unset values omitted)."""
        data: TomlTable = {
            Toml.KEY_ROOT: self.root,
            Toml.KEY_OUTPUT: str(self.output) if self.output is not None else None,
            Toml.KEY_HEADER: self.header,
            Toml.KEY_NO_HEADER: self.header is None,
            Toml.KEY_ROOT_NAMESPACE: self.root_namespace,
        }
        return {k: v for k, v in data.items() if v is not None}


# ------------------ Mutable builder ------------------


def _expect(value: Any, kind: type, key: str, source: str) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(
            f"{source}: '{key}' must be of type {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``None`` means "not set by this layer"; `merge_with` only copies values the
    higher-precedence layer actually sets.
    """

    root: str | None = None
    output: Path | None = None
    header: str | None = None
    no_header: bool | None = None
    root_namespace: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed TsDef table.

        Unknown keys are logged and ignored. Values of the wrong type are errors.

        Args:
            data (TomlTable): The TsDef settings table.
            config_file (Path | None): Source file, used to resolve ``output`` and
                in error messages.

        Returns:
            MutableConfig: The builder for this layer.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        source: str = str(config_file) if config_file else "<defaults>"
        for key in data:
            if key not in Toml.ALL_KEYS:
                logger.warning("%s: ignoring unknown config key '%s'", source, key)

        m = cls()
        if config_file is not None:
            m.config_files.append(config_file)

        if Toml.KEY_ROOT in data:
            m.root = _expect(data[Toml.KEY_ROOT], str, Toml.KEY_ROOT, source)
        if Toml.KEY_OUTPUT in data:
            raw: str = _expect(data[Toml.KEY_OUTPUT], str, Toml.KEY_OUTPUT, source)
            out = Path(raw)
            if config_file is not None and not out.is_absolute():
                out = config_file.parent / out
            m.output = out
        if Toml.KEY_HEADER in data:
            m.header = _expect(data[Toml.KEY_HEADER], str, Toml.KEY_HEADER, source)
        if Toml.KEY_NO_HEADER in data:
            m.no_header = _expect(data[Toml.KEY_NO_HEADER], bool, Toml.KEY_NO_HEADER, source)
        if Toml.KEY_ROOT_NAMESPACE in data:
            m.root_namespace = _expect(
                data[Toml.KEY_ROOT_NAMESPACE], str, Toml.KEY_ROOT_NAMESPACE, source
            )
        logger.trace("Config layer from %s: %s", source, m)
        return m

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load one config file.

        Returns:
            MutableConfig | None: The layer, or ``None`` when a ``pyproject.toml``
            has no ``[tool.tsdef]`` table.
        """
        data: TomlTable = load_toml_dict(path, strict=strict)
        table: TomlTable | None = extract_tsdef_table(data, path)
        if table is None:
            logger.debug("No [tool.tsdef] table in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit files into one builder.

        Args:
            cwd (Path | None): Directory searched for ``pyproject.toml`` and
                ``tsdef.toml``; defaults to the current directory.
            extra_config_files (Iterable[Path]): Files passed with ``--config``.
                These are loaded strictly.
            no_config (bool): Skip discovery (explicit files are still loaded).

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).
        """
        merged: MutableConfig = cls.from_defaults()
        if not no_config:
            for path in discover_config_files(cwd or Path.cwd()):
                layer = cls.from_toml_file(path)
                if layer is not None:
                    merged = merged.merge_with(layer)
        for path in extra_config_files:
            layer = cls.from_toml_file(path, strict=True)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` win."""
        return MutableConfig(
            root=other.root if other.root is not None else self.root,
            output=other.output if other.output is not None else self.output,
            header=other.header if other.header is not None else self.header,
            no_header=other.no_header if other.no_header is not None else self.no_header,
            root_namespace=(
                other.root_namespace if other.root_namespace is not None else self.root_namespace
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Freeze into an immutable `Config`."""
        return Config(
            root=self.root,
            output=self.output,
            header=None if self.no_header else self.header,
            root_namespace=(
                self.root_namespace if self.root_namespace is not None else DEFAULT_ROOT_NAMESPACE
            ),
            config_files=tuple(self.config_files),
        )

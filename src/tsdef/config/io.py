# topmark:header:start
#
#   project      : TsDef
#   file         : io.py
#   file_relpath : src/tsdef/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering use `tomlkit`; parsed documents are returned as plain
`dict` structures so the config model never handles tomlkit containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tsdef.config.keys import Toml
from tsdef.config.logging import get_logger
from tsdef.core.errors import ConfigError
from tsdef.rendering.definition_file import DEFAULT_HEADER, DEFAULT_ROOT_NAMESPACE

if TYPE_CHECKING:
    from pathlib import Path

    from tsdef.config.logging import TsdefLogger

TomlTable: TypeAlias = dict[str, Any]

logger: TsdefLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-compatible dict.

    ``root`` and ``output`` have no default: a missing root is a usage error and
    a missing output means stdout.
    """
    return {
        Toml.KEY_HEADER: DEFAULT_HEADER,
        Toml.KEY_NO_HEADER: False,
        Toml.KEY_ROOT_NAMESPACE: DEFAULT_ROOT_NAMESPACE,
    }


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.
        strict (bool): Raise instead of logging when the file cannot be read or
            parsed. Used for files the user named explicitly.

    Returns:
        TomlTable: The parsed content, or an empty dict on a non-strict failure.

    Raises:
        ConfigError: In strict mode, when reading or parsing fails.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as exc:
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        logger.error("Error loading TOML from %s: %s", path, exc)
        return {}
    except TomlkitParseError as exc:
        if strict:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
        logger.error("Error decoding TOML from %s: %s", path, exc)
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tsdef_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the TsDef settings held by a parsed config document.

    For ``pyproject.toml`` this is ``[tool.tsdef]`` (``None`` when absent); any
    other file is a TsDef file and its top level is returned.
    """
    if path.name != Toml.PYPROJECT_FILE:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(Toml.SECTION_TSDEF)
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def discover_config_files(directory: Path) -> list[Path]:
    """Return the config files present in ``directory``, lowest precedence first."""
    found: list[Path] = []
    for name in (Toml.PYPROJECT_FILE, Toml.TOOL_FILE):
        candidate: Path = directory / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", directory, found)
    return found


def to_toml(table: TomlTable) -> str:
    """Render a dict as a TOML document (``None`` values are dropped)."""
    clean: TomlTable = {k: v for k, v in table.items() if v is not None}
    return tomlkit.dumps(clean)

# topmark:header:start
#
#   project      : TsDef
#   file         : emit.py
#   file_relpath : src/tsdef/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef `emit` command.

Loads a root `TypeDef` from a ``module:attr`` reference and writes the
TypeScript definition module for it.

Output routing:
    - Without ``--output`` the module is streamed to stdout as it is emitted;
      the run summary (verbose mode) goes to stderr.
    - With ``--output`` the module is rendered in memory and written atomically;
      the summary goes to stdout.
    - ``--check`` never writes: it exits with ``WOULD_CHANGE`` when the output
      file is missing or out of date.

Examples:
    ```bash
    tsdef emit myapp.api_types:API --output web/src/api.d.ts
    tsdef emit --check            # root/output from [tool.tsdef]
    ```
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tsdef.cli.errors import (
    TsdefConfigError,
    TsdefFileNotFoundError,
    TsdefIOError,
    TsdefLoaderError,
    TsdefUsageError,
)
from tsdef.cli.io import read_text_or_none, write_text_atomic
from tsdef.cli.loader import load_root
from tsdef.cli.options import get_effective_verbosity, output_format_option
from tsdef.config.logging import get_logger
from tsdef.config.model import MutableConfig
from tsdef.core.errors import ConfigError, LoaderError, OptionsError, TypeDefError
from tsdef.core.exit_codes import ExitCode
from tsdef.core.formats import OutputFormat
from tsdef.rendering.definition_file import render_definition_file, write_definition_file

if TYPE_CHECKING:
    from tsdef.cli.console import ConsoleLike
    from tsdef.config.logging import TsdefLogger
    from tsdef.config.model import Config
    from tsdef.core.typedef import TypeDef
    from tsdef.rendering.definition_file import DefinitionFileOptions
    from tsdef.rendering.stats import Stats

logger: TsdefLogger = get_logger(__name__)


def resolve_emit_config(
    *,
    root: str | None,
    output: Path | None,
    header: str | None,
    no_header: bool,
    root_namespace: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> Config:
    """Merge config files and CLI options into the effective `Config`.

    Raises:
        TsdefUsageError: For conflicting header options.
        TsdefFileNotFoundError: If a ``--config`` file does not exist.
        TsdefConfigError: If a config file is unreadable or invalid.
    """
    if header is not None and no_header:
        raise TsdefUsageError("The '--header' and '--no-header' options are mutually exclusive.")
    for path in config_files:
        if not path.is_file():
            raise TsdefFileNotFoundError(f"Config file not found: {path}")

    try:
        merged: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise TsdefConfigError(str(exc)) from exc

    cli_layer = MutableConfig(
        root=root,
        output=output,
        header=header,
        no_header=True if no_header else (False if header is not None else None),
        root_namespace=root_namespace,
    )
    return merged.merge_with(cli_layer).freeze()


def _emit_summary(
    console: ConsoleLike,
    *,
    fmt: OutputFormat,
    config: Config,
    stats: Stats,
    status: str,
    to_stderr: bool,
) -> None:
    target: str = str(config.output) if config.output is not None else "<stdout>"
    echo = console.note if to_stderr else console.print
    if fmt == OutputFormat.JSON:
        payload = {"output": target, "status": status, **stats.to_dict()}
        echo(json.dumps(payload))
    elif fmt == OutputFormat.MARKDOWN:
        echo("# TsDef emit\n")
        echo(f"- **Output:** `{target}`")
        echo(f"- **Status:** {status}")
        echo(f"- **Type definitions:** {stats.type_definitions}")
    else:
        echo(
            f"{target}: {console.styled(status, bold=True)} "
            f"({stats.type_definitions} type definitions)"
        )


@click.command(
    name="emit",
    help="Write the TypeScript definition module for a root type (ROOT is 'module:attr').",
)
@click.argument("root", required=False)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file. Defaults to stdout.",
)
@click.option("--header", type=str, default=None, help="Header comment text.")
@click.option("--no-header", is_flag=True, default=False, help="Omit the header comment.")
@click.option(
    "--root-namespace",
    type=str,
    default=None,
    help="Namespace wrapping all declarations (default: 'types').",
)
@click.option(
    "--config",
    "config_files",
    type=click.Path(dir_okay=False, path_type=Path),
    multiple=True,
    help="Extra config file(s), applied after discovered ones.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore pyproject.toml and tsdef.toml in the working directory.",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with code 2 if the output file would change.",
)
@output_format_option
def emit_command(
    *,
    root: str | None,
    output: Path | None,
    header: str | None,
    no_header: bool,
    root_namespace: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    check: bool,
    output_format: OutputFormat | None,
) -> None:
    """Emit the definition module for the configured root type."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    config: Config = resolve_emit_config(
        root=root,
        output=output,
        header=header,
        no_header=no_header,
        root_namespace=root_namespace,
        config_files=config_files,
        no_config=no_config,
    )
    logger.debug("Effective config: %s", config)

    if config.root is None:
        raise TsdefUsageError(
            "No root type given: pass ROOT as 'module:attr' or set 'root' in [tool.tsdef]."
        )
    if check and config.output is None:
        raise TsdefUsageError("'--check' requires an output file ('--output' or 'output').")

    try:
        options: DefinitionFileOptions = config.definition_options()
    except OptionsError as exc:
        raise TsdefConfigError(str(exc)) from exc

    try:
        handle: TypeDef = load_root(config.root)
    except LoaderError as exc:
        raise TsdefLoaderError(str(exc)) from exc

    try:
        if config.output is None:
            stats: Stats = write_definition_file(console.out, handle, options)
            if vlevel > 0 or output_format is not None:
                _emit_summary(
                    console, fmt=fmt, config=config, stats=stats, status="written", to_stderr=True
                )
            return

        rendered = render_definition_file(handle, options)
    except TypeDefError as exc:
        raise TsdefLoaderError(f"Invalid type descriptors: {exc}") from exc
    except OSError as exc:
        raise TsdefIOError(f"Cannot write definition file: {exc}") from exc

    try:
        existing: str | None = read_text_or_none(config.output)
        changed: bool = existing != rendered.text
        if check:
            status = "would change" if changed else "up to date"
        elif changed:
            write_text_atomic(config.output, rendered.text)
            status = "written"
        else:
            status = "unchanged"
    except (OSError, UnicodeDecodeError) as exc:
        raise TsdefIOError(f"Cannot access {config.output}: {exc}") from exc

    if vlevel >= 0:
        _emit_summary(
            console, fmt=fmt, config=config, stats=rendered.stats, status=status, to_stderr=False
        )
    if check and changed:
        ctx.exit(ExitCode.WOULD_CHANGE)

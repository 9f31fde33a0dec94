# topmark:header:start
#
#   project      : TsDef
#   file         : dump_config.py
#   file_relpath : src/tsdef/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef `dump-config` command.

Prints the effective configuration (defaults, discovered files and explicit
``--config`` files merged) as TOML, ready to paste into ``tsdef.toml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tsdef.cli.commands.emit import resolve_emit_config
from tsdef.cli.options import get_effective_verbosity
from tsdef.config.io import to_toml

if TYPE_CHECKING:
    from tsdef.cli.console import ConsoleLike
    from tsdef.config.model import Config


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
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
def dump_config_command(*, config_files: tuple[Path, ...], no_config: bool) -> None:
    """Print the merged configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = resolve_emit_config(
        root=None,
        output=None,
        header=None,
        no_header=False,
        root_namespace=None,
        config_files=config_files,
        no_config=no_config,
    )

    if get_effective_verbosity(ctx) > 0:
        sources = ", ".join(str(p) for p in config.config_files) or "<defaults only>"
        console.print(f"# Sources: {sources}")
    console.print(to_toml(config.to_dict()), nl=False)

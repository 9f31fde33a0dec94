# topmark:header:start
#
#   project      : TsDef
#   file         : main.py
#   file_relpath : src/tsdef/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Click entry point for the TsDef CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the shared console; subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsdef.cli.commands.dump_config import dump_config_command
from tsdef.cli.commands.emit import emit_command
from tsdef.cli.commands.version import version_command
from tsdef.cli.console import ClickConsole
from tsdef.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tsdef.config.logging import get_logger, resolve_env_log_level, setup_logging
from tsdef.core.formats import ColorMode

if TYPE_CHECKING:
    from tsdef.cli.console import ConsoleLike
    from tsdef.config.logging import TsdefLogger

logger: TsdefLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TsDef: emit TypeScript type definitions from type descriptors.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TsDef CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tsdef emit module:ROOT' to write a definition file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(emit_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : TsDef
#   file         : version.py
#   file_relpath : src/tsdef/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef `version` command.

Prints the TsDef version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tsdef.cli.options import get_effective_verbosity, output_format_option
from tsdef.constants import TSDEF_VERSION
from tsdef.core.formats import OutputFormat

if TYPE_CHECKING:
    from tsdef.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TsDef.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TsDef.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": TSDEF_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# TsDef Version\n")
        console.print(f"**TsDef version: {TSDEF_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(f"TsDef version {console.styled(TSDEF_VERSION, bold=True)}")
    else:
        console.print(TSDEF_VERSION)

# topmark:header:start
#
#   project      : TsDef
#   file         : errors.py
#   file_relpath : src/tsdef/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Exceptions for the TsDef CLI.

Usage:
    Raise these from commands to abort with a standardized message and exit
    code. Library errors from [`tsdef.core.errors`][tsdef.core.errors] are
    translated into these at the command boundary.

Styling:
    Errors are printed through the project console when one is present in the
    Click context; otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tsdef.core.exit_codes import ExitCode


class TsdefCliError(click.ClickException):
    """Base class for all TsDef CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TsdefUsageError(TsdefCliError):
    """Invalid or missing command-line arguments."""

    exit_code = ExitCode.USAGE_ERROR


class TsdefConfigError(TsdefCliError):
    """Missing, malformed or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class TsdefFileNotFoundError(TsdefCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TsdefLoaderError(TsdefCliError):
    """The root type could not be loaded, or its descriptors are malformed."""

    exit_code = ExitCode.SOFTWARE_ERROR


class TsdefIOError(TsdefCliError):
    """Reading or writing the output failed."""

    exit_code = ExitCode.IO_ERROR

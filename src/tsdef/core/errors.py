# topmark:header:start
#
#   project      : TsDef
#   file         : errors.py
#   file_relpath : src/tsdef/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Library-level exceptions for TsDef.

These exceptions are raised by the descriptor model and the emission API. They are
independent of Click; the CLI translates them into
[`tsdef.cli.errors`][tsdef.cli.errors] exceptions with proper exit codes.

Sink failures (``OSError`` and friends raised by the output stream) are never
wrapped: they propagate unchanged to the caller of the emission run.
"""

from __future__ import annotations


class TsdefError(Exception):
    """Base class for all TsDef library errors."""


class TypeDefError(TsdefError):
    """A type descriptor was authored incorrectly.

    Raised for undefined forward declarations, double definitions, malformed
    dependency lists and registry misuse.
    """


class OptionsError(TsdefError):
    """Invalid definition-file options (e.g. an empty root namespace)."""


class LoaderError(TsdefError):
    """A ``module:attr`` reference could not be resolved to a `TypeDef`."""


class ConfigError(TsdefError):
    """A configuration file is unreadable, malformed or holds invalid values."""

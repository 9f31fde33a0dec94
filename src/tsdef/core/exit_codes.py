# topmark:header:start
#
#   project      : TsDef
#   file         : exit_codes.py
#   file_relpath : src/tsdef/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Exit codes for the TsDef CLI.

TsDef aligns with the BSD `sysexits` convention where practical. The one
divergence is `WOULD_CHANGE=2`, returned by ``tsdef emit --check`` when the
output file is out of date. Click's own parameter errors also exit with 2, so
scripts should check the message on stderr when both are possible.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TsDef CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code.
        WOULD_CHANGE: ``--check``: the output file would be rewritten.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: The root type could not be loaded or its descriptors are
            malformed. Mirrors ``EX_SOFTWARE (70)``.
        IO_ERROR: Writing or reading a file failed. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid configuration. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

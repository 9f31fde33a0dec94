# topmark:header:start
#
#   project      : TsDef
#   file         : __main__.py
#   file_relpath : src/tsdef/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Module entry point for running TsDef via ``python -m tsdef``.

Delegates to `tsdef.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Emit a definition module to stdout::

        python -m tsdef emit myapp.api_types:API
"""

from __future__ import annotations

from tsdef.cli.main import cli

if __name__ == "__main__":
    cli()

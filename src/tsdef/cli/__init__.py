# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Command-line interface for TsDef.

The CLI is a thin collaborator of the emission engine: it resolves
configuration, loads the root type from a ``module:attr`` reference and routes
the generated module to stdout or a file.

Entry point: [`tsdef.cli.main.cli`][tsdef.cli.main.cli].
"""

from __future__ import annotations

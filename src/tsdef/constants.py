# topmark:header:start
#
#   project      : TsDef
#   file         : constants.py
#   file_relpath : src/tsdef/constants.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TSDEF_VERSION: str = get_version("tsdef")

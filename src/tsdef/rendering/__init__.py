# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TypeScript rendering for TsDef.

Public modules:
    - tsdef.rendering.emitters
    - tsdef.rendering.closure
    - tsdef.rendering.definition_file
    - tsdef.rendering.stats
"""

from __future__ import annotations

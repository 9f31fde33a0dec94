# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Core, UI-agnostic primitives of TsDef.

Included modules:

- ``type_expr``
  The inert type descriptor model (names, docs and structural expressions).

- ``typedef``
  `TypeDef` handles (descriptor plus dependency list) and the start-up registry.

- ``builtins``
  The closed catalogue of native handles and generic constructors.

- ``errors`` / ``exit_codes`` / ``formats``
  Library exceptions, CLI exit codes and output format enums, kept free of Click.
"""

from __future__ import annotations

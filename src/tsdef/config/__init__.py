# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Configuration and logging for TsDef.

This package is imported by every layer (through ``tsdef.config.logging``), so
its ``__init__`` stays import-free to avoid cycles. Import from the submodules:

    - tsdef.config.logging
    - tsdef.config.keys
    - tsdef.config.io
    - tsdef.config.model
"""

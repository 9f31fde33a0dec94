# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef CLI subcommands (``emit``, ``dump-config``, ``version``)."""

# topmark:header:start
#
#   project      : TsDef
#   file         : keys.py
#   file_relpath : src/tsdef/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Canonical TOML file names, section names and keys for TsDef configuration.

Keys defined here are the *external configuration API*; renaming or removing
one is a breaking change. CLI option spellings live in the commands themselves.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML names used by TsDef configuration.

    The same keys are accepted at the top level of ``tsdef.toml`` and inside
    ``[tool.tsdef]`` of ``pyproject.toml``.
    """

    # Files discovered in the working directory, lowest precedence first
    PYPROJECT_FILE: Final[str] = "pyproject.toml"
    TOOL_FILE: Final[str] = "tsdef.toml"

    # [tool.tsdef] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TSDEF: Final[str] = "tsdef"

    # Keys
    KEY_ROOT: Final[str] = "root"
    KEY_OUTPUT: Final[str] = "output"
    KEY_HEADER: Final[str] = "header"
    KEY_NO_HEADER: Final[str] = "no_header"
    KEY_ROOT_NAMESPACE: Final[str] = "root_namespace"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, KEY_OUTPUT, KEY_HEADER, KEY_NO_HEADER, KEY_ROOT_NAMESPACE}
    )

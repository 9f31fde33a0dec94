# topmark:header:start
#
#   project      : TsDef
#   file         : formats.py
#   file_relpath : src/tsdef/core/formats.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Output format vocabulary shared by CLI commands.

Kept free of Click so the API and tests can use it without the CLI stack.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Format of the run summary printed by CLI commands.

    Attributes:
        TEXT: Human-friendly text; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Color only when stdout is a TTY.
        ALWAYS: Force color on.
        NEVER: Disable color.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

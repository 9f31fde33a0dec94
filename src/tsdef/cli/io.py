# topmark:header:start
#
#   project      : TsDef
#   file         : io.py
#   file_relpath : src/tsdef/cli/io.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""File I/O helpers for CLI commands."""

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING

from tsdef.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tsdef.config.logging import TsdefLogger

logger: TsdefLogger = get_logger(__name__)


def read_text_or_none(path: Path) -> str | None:
    """Return the UTF-8 content of ``path``, or None if it does not exist.

    Raises:
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_text_atomic(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` via a temporary file and `os.replace`.

    Readers never observe a half-written file. The parent directory is created
    if needed.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        OSError: If the file cannot be written; the temporary file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data: bytes = text.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)

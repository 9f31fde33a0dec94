# topmark:header:start
#
#   project      : TsDef
#   file         : test_project_metadata.py
#   file_relpath : tests/test_project_metadata.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Checks on the package metadata and the per-file license headers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent
COPYRIGHT_LINE = "#   copyright    : (c) 2026 TsDef contributors"


def test_pyproject_names_project_authors() -> None:
    data: Any = tomlkit.parse((PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    assert data.unwrap()["project"]["authors"] == [{"name": "TsDef contributors"}]


def test_source_headers_carry_project_copyright() -> None:
    sources = sorted((PROJECT_ROOT / "src" / "tsdef").rglob("*.py"))
    assert sources
    for path in sources:
        header = path.read_text(encoding="utf-8").splitlines()[:9]
        assert COPYRIGHT_LINE in header, path
        assert f"#   file_relpath : {path.relative_to(PROJECT_ROOT).as_posix()}" in header, path

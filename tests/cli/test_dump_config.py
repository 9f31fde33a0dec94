# topmark:header:start
#
#   project      : TsDef
#   file         : test_dump_config.py
#   file_relpath : tests/cli/test_dump_config.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Tests for the `dump-config` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_dump_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["dump-config"])
    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data == {
        "header": "AUTO-GENERATED by tsdef",
        "no_header": False,
        "root_namespace": "types",
    }


@mark_cli
def test_dump_merged_config_with_sources(tmp_path: Path) -> None:
    (tmp_path / "tsdef.toml").write_text(
        'root = "pkg.types:ROOT"\nno_header = true\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["-v", "dump-config"])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert lines[0].startswith("# Sources: ") and "tsdef.toml" in lines[0]
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["root"] == "pkg.types:ROOT"
    assert data["no_header"] is True
    assert "header" not in data


@mark_cli
def test_dump_no_config(tmp_path: Path) -> None:
    (tmp_path / "tsdef.toml").write_text('root = "pkg.types:ROOT"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["dump-config", "--no-config"])
    assert_SUCCESS(result)
    assert "root =" not in result.stdout

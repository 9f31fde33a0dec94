# topmark:header:start
#
#   project      : TsDef
#   file         : test_loader.py
#   file_relpath : tests/cli/test_loader.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Tests for ``module:attr`` root loading and the atomic file writer."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from tests.fixtures_types import SAMPLE_ROOT
from tsdef.cli.io import read_text_or_none, write_text_atomic
from tsdef.cli.loader import load_root, parse_reference
from tsdef.core.errors import LoaderError
from tsdef.core.type_expr import DefinedTypeInfo

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_reference() -> None:
    assert parse_reference("pkg.mod:Types.ROOT") == ("pkg.mod", ["Types", "ROOT"])


@parametrize("reference", ["pkg.mod", ":ROOT", "pkg.mod:", "pkg.mod:A..B"])
def test_parse_reference_rejects_malformed(reference: str) -> None:
    with pytest.raises(LoaderError):
        parse_reference(reference)


def test_load_root_from_existing_module() -> None:
    assert load_root("tests.fixtures_types:SAMPLE_ROOT") is SAMPLE_ROOT


def test_load_root_from_search_path(tmp_path: Path) -> None:
    module_name = f"tsdef_user_types_{uuid.uuid4().hex}"
    (tmp_path / f"{module_name}.py").write_text(
        "from tsdef import STRING, Ref, TypeDef\n"
        "\n"
        "class Types:\n"
        "    USER_ID = TypeDef.defined('UserId', Ref(STRING))\n",
        encoding="utf-8",
    )
    handle = load_root(f"{module_name}:Types.USER_ID", search_path=tmp_path)
    assert isinstance(handle.info, DefinedTypeInfo)
    assert handle.label == "UserId"


def test_load_root_errors() -> None:
    with pytest.raises(LoaderError, match="Cannot import"):
        load_root("tsdef_no_such_module_abc:ROOT")
    with pytest.raises(LoaderError, match="no attribute"):
        load_root("tests.fixtures_types:NOPE")
    with pytest.raises(LoaderError, match="expected a tsdef TypeDef"):
        load_root("tests.fixtures_types:NOT_A_TYPE")


def test_load_root_wraps_import_and_factory_failures(tmp_path: Path) -> None:
    sources = {
        "double_define": (
            "from tsdef import STRING, NativeTypeInfo, Ref, TypeDef\n"
            "\n"
            "ROOT = TypeDef.defined('Name', Ref(STRING))\n"
            "ROOT.define(NativeTypeInfo(Ref(STRING)))\n"
        ),
        "broken": "1 / 0\n",
        "factory": "def make():\n    raise RuntimeError('boom')\n",
    }
    names: dict[str, str] = {}
    for key, source in sources.items():
        names[key] = f"tsdef_user_types_{uuid.uuid4().hex}"
        (tmp_path / f"{names[key]}.py").write_text(source, encoding="utf-8")

    with pytest.raises(LoaderError, match="Invalid type descriptors"):
        load_root(f"{names['double_define']}:ROOT", search_path=tmp_path)
    with pytest.raises(LoaderError, match="ZeroDivisionError"):
        load_root(f"{names['broken']}:ROOT", search_path=tmp_path)
    with pytest.raises(LoaderError, match="factory raised RuntimeError: boom"):
        load_root(f"{names['factory']}:make", search_path=tmp_path)


def test_write_text_atomic(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.d.ts"
    assert read_text_or_none(target) is None
    written = write_text_atomic(target, "export default types;\n")
    assert written == len("export default types;\n")
    assert read_text_or_none(target) == "export default types;\n"
    assert [p.name for p in target.parent.iterdir()] == ["out.d.ts"]


def test_read_text_or_none_rejects_undecodable_bytes(tmp_path: Path) -> None:
    target = tmp_path / "out.d.ts"
    target.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(UnicodeDecodeError):
        read_text_or_none(target)

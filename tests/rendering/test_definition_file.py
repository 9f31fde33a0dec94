# topmark:header:start
#
#   project      : TsDef
#   file         : test_definition_file.py
#   file_relpath : tests/rendering/test_definition_file.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Tests for writing complete definition modules."""

from __future__ import annotations

import io

import pytest

from tests.conftest import FailingSink, parametrize
from tests.fixtures_types import (
    SAMPLE_BODY,
    SAMPLE_MODULE,
    build_cycle,
    build_same_name_in_namespaces,
    build_sample,
)
from tsdef.core.builtins import STRING, array_of
from tsdef.core.errors import OptionsError
from tsdef.core.type_expr import Intersection, Union
from tsdef.core.typedef import TypeDef
from tsdef.rendering.definition_file import (
    DefinitionFileOptions,
    render_definition_file,
    write_definition_file,
)


def test_sample_module_exact_text() -> None:
    buf = io.StringIO()
    stats = write_definition_file(buf, build_sample())
    assert buf.getvalue() == SAMPLE_MODULE
    assert stats.type_definitions == 2


def test_render_matches_streaming_write() -> None:
    root = build_sample()
    rendered = render_definition_file(root)
    assert rendered.text == SAMPLE_MODULE
    assert rendered.stats.type_definitions == 2


def test_without_header() -> None:
    rendered = render_definition_file(build_sample(), DefinitionFileOptions(header=None))
    assert rendered.text == "export default types;\nexport namespace types{\n" + SAMPLE_BODY + "}\n"


def test_multi_line_header() -> None:
    options = DefinitionFileOptions(header="Generated file.\nDo not edit.\n")
    text = render_definition_file(build_sample(), options).text
    assert text.startswith("// Generated file.\n// Do not edit.\n\nexport default types;\n")


def test_custom_root_namespace_is_used_everywhere() -> None:
    options = DefinitionFileOptions(header=None, root_namespace="api")
    text = render_definition_file(build_sample(), options).text
    assert text.startswith("export default api;\nexport namespace api{\n")
    assert "id:api.Name;" in text
    assert "types." not in text


@parametrize("namespace", ["", "1abc", "a.b", "has space"])
def test_invalid_root_namespace(namespace: str) -> None:
    with pytest.raises(OptionsError):
        DefinitionFileOptions(root_namespace=namespace)


def test_native_root_produces_empty_namespace() -> None:
    rendered = render_definition_file(array_of(STRING), DefinitionFileOptions(header=None))
    assert rendered.text == "export default types;\nexport namespace types{\n}\n"
    assert rendered.stats.type_definitions == 0


def test_empty_union_and_intersection() -> None:
    never = TypeDef.defined("Never", Union())
    anything = TypeDef.defined("Anything", Intersection())
    text = render_definition_file(never, DefinitionFileOptions(header=None)).text
    assert "export type Never=never;\n" in text
    text = render_definition_file(anything, DefinitionFileOptions(header=None)).text
    assert "export type Anything=any;\n" in text


def test_same_name_in_different_namespaces() -> None:
    text = render_definition_file(build_same_name_in_namespaces()).text
    assert "export namespace user{export type Id=string;}\n" in text
    assert "export namespace post{export type Id=number;}\n" in text
    assert "export type Ids={user:types.user.Id;post:types.post.Id;};\n" in text


def test_cycle_module() -> None:
    a, _ = build_cycle()
    rendered = render_definition_file(a, DefinitionFileOptions(header=None))
    assert rendered.text == (
        "export default types;\n"
        "export namespace types{\n"
        "export type B={a?:types.A;};\n"
        "export type A={b:types.B;};\n"
        "}\n"
    )


def test_each_run_starts_with_a_fresh_visited_set() -> None:
    root = build_sample()
    first = render_definition_file(root)
    second = render_definition_file(root)
    assert first.text == second.text
    assert second.stats.type_definitions == 2


def test_sink_failure_propagates_and_keeps_partial_output() -> None:
    sink = FailingSink(fail_after=4)
    with pytest.raises(OSError, match="sink closed"):
        write_definition_file(sink, build_sample())
    assert sink.getvalue() == "// AUTO-GENERATED by tsdef\n\nexport default types;\nexport namespace types{\n"

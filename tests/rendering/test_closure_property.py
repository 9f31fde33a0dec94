# topmark:header:start
#
#   project      : TsDef
#   file         : test_closure_property.py
#   file_relpath : tests/rendering/test_closure_property.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Property tests: random dependency graphs (cycles included) are emitted correctly.

For every generated graph the definition file must declare each reachable
defined type exactly once, and a declaration must come after the declarations
of its dependencies unless they sit on a cycle through it.
"""

from __future__ import annotations

import re

from hypothesis import given
from hypothesis import strategies as st

from tests.conftest import mark_property
from tsdef.core.builtins import STRING
from tsdef.core.type_expr import DefinedTypeInfo, Object, ObjectField, Ref, TypeName
from tsdef.core.typedef import TypeDef
from tsdef.rendering.definition_file import DefinitionFileOptions, render_definition_file

_DECL_RE = re.compile(r"^export type (T\d+)=", re.MULTILINE)


@st.composite
def graphs(draw: st.DrawFn) -> list[list[int]]:
    """Adjacency lists over nodes ``0..n-1``; edges may point anywhere."""
    n = draw(st.integers(min_value=1, max_value=12))
    return [
        draw(st.lists(st.integers(min_value=0, max_value=n - 1), max_size=4)) for _ in range(n)
    ]


def build(adjacency: list[list[int]]) -> list[TypeDef]:
    handles = [TypeDef.declare(f"T{i}") for i in range(len(adjacency))]
    for i, edges in enumerate(adjacency):
        fields = [ObjectField.of(f"f{k}", Ref(handles[j])) for k, j in enumerate(edges)]
        fields.append(ObjectField.of("s", Ref(STRING)))
        handles[i].define(
            DefinedTypeInfo(name=TypeName.ident(f"T{i}"), definition=Object(tuple(fields)))
        )
    return handles


def reachable(adjacency: list[list[int]], start: int) -> set[int]:
    seen: set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        stack.extend(adjacency[node])
    return seen


@mark_property
@given(graphs())
def test_each_reachable_type_declared_once(adjacency: list[list[int]]) -> None:
    handles = build(adjacency)
    rendered = render_definition_file(handles[0], DefinitionFileOptions(header=None))
    declared = _DECL_RE.findall(rendered.text)

    expected = {f"T{i}" for i in reachable(adjacency, 0)}
    assert sorted(declared) == sorted(expected)
    assert len(declared) == len(set(declared))
    assert rendered.stats.type_definitions == len(expected)


@mark_property
@given(graphs())
def test_acyclic_dependencies_are_declared_first(adjacency: list[list[int]]) -> None:
    handles = build(adjacency)
    text = render_definition_file(handles[0], DefinitionFileOptions(header=None)).text
    position = {name: idx for idx, name in enumerate(_DECL_RE.findall(text))}

    for node, edges in enumerate(adjacency):
        if f"T{node}" not in position:
            continue
        for dep in edges:
            if node in reachable(adjacency, dep):
                continue  # dep lies on a cycle through node
            assert position[f"T{dep}"] < position[f"T{node}"]

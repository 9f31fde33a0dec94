# topmark:header:start
#
#   project      : TsDef
#   file         : test_type_expr.py
#   file_relpath : tests/core/test_type_expr.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Tests for the type descriptor model and reference scanning."""

from __future__ import annotations

import dataclasses

import pytest

from tsdef.core.builtins import NUMBER, STRING
from tsdef.core.type_expr import (
    Array,
    DefinedTypeInfo,
    Docs,
    Ident,
    Intersection,
    NativeTypeInfo,
    Object,
    ObjectField,
    Ref,
    Tuple,
    TypeName,
    TypeString,
    Union,
    info_refs,
    iter_refs,
)
from tsdef.core.typedef import TypeDef


def test_type_name_ident_builds_path_and_generics() -> None:
    name = TypeName.ident("Page", "api", "v1", generics=(Ref(STRING),), docs="A page")
    assert name.name == Ident("Page")
    assert name.path == (Ident("api"), Ident("v1"))
    assert name.generics == (Ref(STRING),)
    assert name.docs == Docs("A page")
    assert name.qualified == "api.v1.Page"


def test_docs_coerce() -> None:
    assert Docs.coerce(None) is None
    assert Docs.coerce("text") == Docs("text")
    docs = Docs("x")
    assert Docs.coerce(docs) is docs


def test_descriptors_are_frozen() -> None:
    field = ObjectField.of("a", Ref(STRING))
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.optional = True  # type: ignore[misc]


def test_ref_equality_is_handle_identity() -> None:
    a = TypeDef.defined("Same", Ref(STRING))
    b = TypeDef.defined("Same", Ref(STRING))
    assert Ref(a) == Ref(a)
    assert Ref(a) != Ref(b)


def test_iter_refs_walks_every_variant_in_order() -> None:
    a = TypeDef.defined("A", Ref(STRING))
    b = TypeDef.defined("B", Ref(STRING))
    c = TypeDef.defined("C", Ref(STRING))
    expr = Object(
        (
            ObjectField.of("x", Tuple((Ref(a), TypeString("lit")))),
            ObjectField.of("y", Array(Union((Ref(b), Intersection((Ref(a),)))))),
            ObjectField.of("z", TypeName.ident("Map", generics=(Ref(c),))),
        )
    )
    assert list(iter_refs(expr)) == [a, b, a, c]


def test_iter_refs_does_not_follow_handles() -> None:
    inner = TypeDef.defined("Inner", Ref(NUMBER))
    outer = TypeDef.defined("Outer", Ref(inner))
    assert list(iter_refs(Ref(outer))) == [outer]


def test_iter_refs_rejects_non_expressions() -> None:
    with pytest.raises(TypeError):
        list(iter_refs("string"))  # type: ignore[arg-type]


def test_info_refs_distinct_generics_first() -> None:
    g = TypeDef.defined("G", Ref(STRING))
    body = TypeDef.defined("Body", Ref(STRING))
    info = DefinedTypeInfo(
        name=TypeName.ident("Wrapper", generics=(Ref(g),)),
        definition=Tuple((Ref(body), Ref(g), Ref(body))),
    )
    assert info_refs(info) == (g, body)


def test_info_refs_native() -> None:
    assert info_refs(NativeTypeInfo(Array(Ref(STRING)))) == (STRING,)
    assert info_refs(NativeTypeInfo(TypeName.ident("boolean"))) == ()

# topmark:header:start
#
#   project      : TsDef
#   file         : type_expr.py
#   file_relpath : src/tsdef/core/type_expr.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Type descriptor model.

This module defines the inert data that describes the *shape* of a type:
identifiers, documentation, type names and the structural type expressions
(tuples, objects, arrays, unions, intersections and literal strings).

The model has no behavior beyond being read: emitters in
[`tsdef.rendering.emitters`][tsdef.rendering.emitters] pattern-match on these
classes to produce TypeScript text.

Notes:
    - All classes are frozen dataclasses; descriptors never change once built.
    - `Ref` is the only expression that points at another `TypeDef` handle and
      therefore the only one that introduces a dependency edge.
    - Sequences are stored as tuples so declaration order is preserved and the
      values stay hashable.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from tsdef.core.typedef import TypeDef


@dataclass(frozen=True, slots=True)
class Ident:
    """A TypeScript identifier, rendered verbatim."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Docs:
    """A block of free documentation text.

    Rendered as a JSDoc comment immediately before its owner. The text is not
    escaped: a ``*/`` sequence inside the text ends the comment early.
    """

    text: str

    @classmethod
    def coerce(cls, value: str | Docs | None) -> Docs | None:
        """Return ``value`` as `Docs` (strings are wrapped, ``None`` passes through).

        Args:
            value (str | Docs | None): Documentation text or an existing `Docs`.

        Returns:
            Docs | None: The wrapped documentation, or ``None``.
        """
        if value is None or isinstance(value, Docs):
            return value
        return cls(value)


@dataclass(frozen=True, slots=True)
class TypeName:
    """A (possibly generic) type name, optionally nested in namespaces.

    Attributes:
        name (Ident): The bare type name.
        path (tuple[Ident, ...]): Namespace segments, outermost first.
        generics (tuple[TypeExpr, ...]): Generic arguments rendered as ``<A,B>``.
        docs (Docs | None): Optional documentation for the name itself.
    """

    name: Ident
    path: tuple[Ident, ...] = ()
    generics: tuple[TypeExpr, ...] = ()
    docs: Docs | None = None

    @classmethod
    def ident(
        cls,
        name: str,
        *path: str,
        generics: Iterable[TypeExpr] = (),
        docs: str | Docs | None = None,
    ) -> TypeName:
        """Build a `TypeName` from plain strings.

        Args:
            name (str): The bare type name.
            *path (str): Namespace segments, outermost first.
            generics (Iterable[TypeExpr]): Generic arguments.
            docs (str | Docs | None): Optional documentation.

        Returns:
            TypeName: The assembled name.
        """
        return cls(
            name=Ident(name),
            path=tuple(Ident(p) for p in path),
            generics=tuple(generics),
            docs=Docs.coerce(docs),
        )

    @property
    def qualified(self) -> str:
        """Dotted ``path.name`` form (without generics), useful for logging."""
        return ".".join([*(p.name for p in self.path), self.name.name])


@dataclass(frozen=True, slots=True)
class Ref:
    """A reference to another type by its `TypeDef` handle."""

    target: TypeDef


@dataclass(frozen=True, slots=True)
class TypeString:
    """A literal string type (exactly one string value)."""

    value: str
    docs: Docs | None = None


@dataclass(frozen=True, slots=True)
class Tuple:
    """A fixed-length tuple type ``[A,B,C]``."""

    elements: tuple[TypeExpr, ...] = ()
    docs: Docs | None = None


@dataclass(frozen=True, slots=True)
class ObjectField:
    """One field of an `Object` type.

    Attributes:
        name (Ident): Field name.
        type (TypeExpr): Field type.
        optional (bool): Whether the field is rendered with a ``?`` marker.
        docs (Docs | None): Optional field documentation.
    """

    name: Ident
    type: TypeExpr
    optional: bool = False
    docs: Docs | None = None

    @classmethod
    def of(
        cls,
        name: str,
        type_: TypeExpr,
        *,
        optional: bool = False,
        docs: str | Docs | None = None,
    ) -> ObjectField:
        """Build a field from a plain string name."""
        return cls(name=Ident(name), type=type_, optional=optional, docs=Docs.coerce(docs))


@dataclass(frozen=True, slots=True)
class Object:
    """An object type; fields keep their declaration order."""

    fields: tuple[ObjectField, ...] = ()
    docs: Docs | None = None


@dataclass(frozen=True, slots=True)
class Array:
    """A homogeneous array type ``(T)[]``."""

    item: TypeExpr
    docs: Docs | None = None


@dataclass(frozen=True, slots=True)
class Union:
    """A union type; with no members it is the bottom type ``never``."""

    members: tuple[TypeExpr, ...] = ()
    docs: Docs | None = None


@dataclass(frozen=True, slots=True)
class Intersection:
    """An intersection type; with no members it is the top type ``any``."""

    members: tuple[TypeExpr, ...] = ()
    docs: Docs | None = None


TypeExpr: TypeAlias = Ref | TypeName | TypeString | Tuple | Object | Array | Union | Intersection


@dataclass(frozen=True, slots=True)
class NativeTypeInfo:
    """Descriptor of a type that renders itself inline and is never declared."""

    definition: TypeExpr


@dataclass(frozen=True, slots=True)
class DefinedTypeInfo:
    """Descriptor of a type emitted as a standalone ``export type`` declaration.

    Attributes:
        name (TypeName): Declared name (its ``path`` selects the nested namespace).
        definition (TypeExpr): The right-hand side of the declaration.
        docs (Docs | None): Optional documentation placed before the declaration.
    """

    name: TypeName
    definition: TypeExpr
    docs: Docs | None = None


TypeInfo: TypeAlias = NativeTypeInfo | DefinedTypeInfo


def iter_refs(expr: TypeExpr) -> Iterator[TypeDef]:
    """Yield every `Ref` target reachable inside ``expr`` in rendering order.

    Nested refs are not followed into the referenced handle; only the
    expression tree itself is walked. Duplicates are yielded as encountered.

    Args:
        expr (TypeExpr): The expression to scan.

    Yields:
        TypeDef: Each referenced handle.
    """
    match expr:
        case Ref(target=target):
            yield target
        case TypeName(generics=generics):
            for generic in generics:
                yield from iter_refs(generic)
        case TypeString():
            return
        case Tuple(elements=children) | Union(members=children) | Intersection(
            members=children
        ):
            for child in children:
                yield from iter_refs(child)
        case Object(fields=fields):
            for field in fields:
                yield from iter_refs(field.type)
        case Array(item=item):
            yield from iter_refs(item)
        case _:
            raise TypeError(f"Not a type expression: {expr!r}")


def info_refs(info: TypeInfo) -> tuple[TypeDef, ...]:
    """Return the distinct handles referenced by a descriptor, first occurrence first.

    For defined types the generic arguments of the declared name are scanned
    before the definition body.
    """
    exprs: list[TypeExpr] = []
    if isinstance(info, DefinedTypeInfo):
        exprs.extend(info.name.generics)
    exprs.append(info.definition)

    seen: set[int] = set()
    out: list[TypeDef] = []
    for expr in exprs:
        for target in iter_refs(expr):
            if id(target) not in seen:
                seen.add(id(target))
                out.append(target)
    return tuple(out)

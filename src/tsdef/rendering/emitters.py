# topmark:header:start
#
#   project      : TsDef
#   file         : emitters.py
#   file_relpath : src/tsdef/rendering/emitters.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Structural emitters: one TypeScript rendering rule per type expression.

The `Emitter` writes compact TypeScript (no insignificant whitespace) straight
into a text sink. Run a formatter such as Prettier on the result if it is meant
for humans.

Rendering rules:

| Expression | Output |
|---|---|
| `Ref` to a native type | the native definition, inline |
| `Ref` to a defined type | ``<root>.<path>.<Name><G>`` |
| `TypeName` | ``a.b.Name<G1,G2>`` |
| `TypeString` | ``"value"`` |
| `Tuple` | ``[A,B]`` |
| `Object` | ``{a?:A;b:B;}`` |
| `Array` | ``(T)[]`` |
| `Union` | ``(A|B)``, or ``never`` when empty |
| `Intersection` | ``(A&B)``, or ``any`` when empty |

Docs attached to any node are written as a JSDoc block right before it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Final, Protocol

from tsdef.core.type_expr import (
    Array,
    DefinedTypeInfo,
    Docs,
    Intersection,
    NativeTypeInfo,
    Object,
    ObjectField,
    Ref,
    Tuple,
    TypeName,
    TypeString,
    Union,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tsdef.core.type_expr import Ident, TypeExpr

NEVER_TOKEN: Final[str] = "never"
ANY_TOKEN: Final[str] = "any"


class TextSink(Protocol):
    """Anything with a text ``write`` method (files, ``io.StringIO``, ``sys.stdout``)."""

    def write(self, s: str, /) -> object: ...


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines the way headers and docs are rendered.

    A trailing newline does not produce an extra empty line, ``\\r\\n`` endings
    are accepted, and an empty string yields no lines at all.
    """
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def quote_string(value: str) -> str:
    """Return ``value`` as a double-quoted TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


class Emitter:
    """Render type expressions into a text sink.

    Args:
        writer (TextSink): Destination stream. Write errors propagate unchanged.
        root_namespace (str): Namespace through which every defined type is
            referenced.
    """

    def __init__(self, writer: TextSink, root_namespace: str) -> None:
        self._writer: TextSink = writer
        self.root_namespace: str = root_namespace

    def write(self, text: str) -> None:
        self._writer.write(text)

    def emit_expr(self, expr: TypeExpr) -> None:
        """Dispatch ``expr`` to the rendering rule for its variant.

        Raises:
            TypeError: If ``expr`` is not a type expression.
        """
        match expr:
            case Ref():
                self.emit_ref(expr)
            case TypeName():
                self.emit_type_name(expr)
            case TypeString():
                self.emit_string(expr)
            case Tuple():
                self.emit_tuple(expr)
            case Object():
                self.emit_object(expr)
            case Array():
                self.emit_array(expr)
            case Union():
                self.emit_union(expr)
            case Intersection():
                self.emit_intersection(expr)
            case _:
                raise TypeError(f"Not a type expression: {expr!r}")

    def emit_ref(self, ref: Ref) -> None:
        """Render a reference.

        Native types render their own definition. Defined types are always
        referenced by qualified name through the root namespace, which is what
        makes recursive types representable.
        """
        info = ref.target.info
        if isinstance(info, NativeTypeInfo):
            self.emit_expr(info.definition)
        elif isinstance(info, DefinedTypeInfo):
            self.write(f"{self.root_namespace}.")
            self.emit_type_name(info.name)

    def emit_type_name(self, name: TypeName) -> None:
        self.emit_docs(name.docs)
        for segment in name.path:
            self.emit_ident(segment)
            self.write(".")
        self.emit_ident(name.name)
        if name.generics:
            self.write("<")
            self._emit_separated(name.generics, ",")
            self.write(">")

    def emit_string(self, string: TypeString) -> None:
        self.emit_docs(string.docs)
        self.write(quote_string(string.value))

    def emit_tuple(self, tuple_: Tuple) -> None:
        self.emit_docs(tuple_.docs)
        self.write("[")
        self._emit_separated(tuple_.elements, ",")
        self.write("]")

    def emit_object(self, obj: Object) -> None:
        """Render ``{name?:Type;...}`` with fields in declaration order."""
        self.emit_docs(obj.docs)
        self.write("{")
        for field in obj.fields:
            self.emit_field(field)
        self.write("}")

    def emit_field(self, field: ObjectField) -> None:
        self.emit_docs(field.docs)
        self.emit_ident(field.name)
        if field.optional:
            self.write("?")
        self.write(":")
        self.emit_expr(field.type)
        self.write(";")

    def emit_array(self, array: Array) -> None:
        # Parenthesize unconditionally so `(A|B)[]` keeps its precedence.
        self.emit_docs(array.docs)
        self.write("(")
        self.emit_expr(array.item)
        self.write(")[]")

    def emit_union(self, union: Union) -> None:
        self.emit_docs(union.docs)
        if not union.members:
            self.write(NEVER_TOKEN)
            return
        self.write("(")
        self._emit_separated(union.members, "|")
        self.write(")")

    def emit_intersection(self, intersection: Intersection) -> None:
        self.emit_docs(intersection.docs)
        if not intersection.members:
            self.write(ANY_TOKEN)
            return
        self.write("(")
        self._emit_separated(intersection.members, "&")
        self.write(")")

    def emit_ident(self, ident: Ident) -> None:
        self.write(ident.name)

    def emit_docs(self, docs: Docs | None) -> None:
        """Write ``docs`` as a JSDoc block; no-op for ``None``.

        The text is copied verbatim: a ``*/`` inside it is not escaped.
        """
        if docs is None:
            return
        self.write("\n/**\n")
        for line in split_lines(docs.text):
            self.write(f" * {line}\n")
        self.write(" */\n")

    def _emit_separated(self, exprs: Iterable[TypeExpr], separator: str) -> None:
        first = True
        for expr in exprs:
            if not first:
                self.write(separator)
            self.emit_expr(expr)
            first = False

# topmark:header:start
#
#   project      : TsDef
#   file         : builtins.py
#   file_relpath : src/tsdef/core/builtins.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Built-in type handles.

Primitive-like types are a closed catalogue of *native* handles that render
inline and are never declared:

| Handle | TypeScript |
|---|---|
| `BOOLEAN` | `boolean` |
| `STRING` | `string` |
| `NUMBER` | `number` |
| `NULL` | `null` |
| `ANY` | `any` |
| `UNKNOWN` | `unknown` |
| `optional(T)` | `(T\\|null)` |
| `array_of(T)` | `(T)[]` |
| `tuple_of(A, B)` | `[A,B]` |
| `fixed_array(T, 3)` | `[T,T,T]` |
| `record(K, V)` | `Record<K,V>` |
| `transparent(T)` | `T` |

Sized numeric types are *defined* aliases of ``number`` named in PascalCase
(``U8``, ``Usize``, ``F64``, ``NonZeroI32``...). They enforce nothing in
TypeScript but document the intended range of a value.

Generic constructors memoize their results in `DEFAULT_REGISTRY` for as long as
the returned handle is referenced; dropped instantiations are released.
"""

from __future__ import annotations

from tsdef.core.type_expr import Array, Ref, Tuple, TypeName, Union
from tsdef.core.typedef import TypeDef, TypeRegistry

#: Process-wide registry holding the built-in handles.
DEFAULT_REGISTRY: TypeRegistry = TypeRegistry()


def _native(name: str) -> TypeDef:
    return DEFAULT_REGISTRY.register(TypeDef.native(name, TypeName.ident(name)))


BOOLEAN: TypeDef = _native("boolean")
STRING: TypeDef = _native("string")
NUMBER: TypeDef = _native("number")
NULL: TypeDef = _native("null")
ANY: TypeDef = _native("any")
UNKNOWN: TypeDef = _native("unknown")


def _number_alias(name: str) -> TypeDef:
    return DEFAULT_REGISTRY.register(TypeDef.defined(name, Ref(NUMBER)))


U8: TypeDef = _number_alias("U8")
U16: TypeDef = _number_alias("U16")
U32: TypeDef = _number_alias("U32")
U64: TypeDef = _number_alias("U64")
U128: TypeDef = _number_alias("U128")
USIZE: TypeDef = _number_alias("Usize")
I8: TypeDef = _number_alias("I8")
I16: TypeDef = _number_alias("I16")
I32: TypeDef = _number_alias("I32")
I64: TypeDef = _number_alias("I64")
I128: TypeDef = _number_alias("I128")
ISIZE: TypeDef = _number_alias("Isize")
F32: TypeDef = _number_alias("F32")
F64: TypeDef = _number_alias("F64")

#: Non-zero integer aliases keyed by their TypeScript name (``NonZeroU8``...).
NON_ZERO: dict[str, TypeDef] = {
    alias: _number_alias(alias)
    for alias in (
        f"NonZero{suffix}"
        for suffix in (
            "U8",
            "U16",
            "U32",
            "U64",
            "U128",
            "Usize",
            "I8",
            "I16",
            "I32",
            "I64",
            "I128",
            "Isize",
        )
    )
}

NUMERIC_ALIASES: tuple[TypeDef, ...] = (
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    F32,
    F64,
    *NON_ZERO.values(),
)


# --- generic constructors ---


def optional(item: TypeDef) -> TypeDef:
    """``T | null``: an optional value."""
    return DEFAULT_REGISTRY.intern(
        ("optional", item),
        lambda: TypeDef.native(f"Optional<{item.label}>", Union((Ref(item), Ref(NULL)))),
    )


def array_of(item: TypeDef) -> TypeDef:
    """``T[]``: lists, sequences and sets."""
    return DEFAULT_REGISTRY.intern(
        ("array", item),
        lambda: TypeDef.native(f"Array<{item.label}>", Array(Ref(item))),
    )


def tuple_of(*elements: TypeDef) -> TypeDef:
    """``[A,B,...]``: a fixed-shape tuple; no elements is the unit tuple ``[]``."""
    return DEFAULT_REGISTRY.intern(
        ("tuple", elements),
        lambda: TypeDef.native(
            f"Tuple<{','.join(e.label for e in elements)}>",
            Tuple(tuple(Ref(e) for e in elements)),
        ),
    )


def fixed_array(item: TypeDef, length: int) -> TypeDef:
    """``[T,T,...]``: an array of statically known ``length``, rendered as a tuple."""
    if length < 0:
        raise ValueError(f"fixed_array length must be >= 0, got {length}")
    return DEFAULT_REGISTRY.intern(
        ("fixed_array", item, length),
        lambda: TypeDef.native(
            f"FixedArray<{item.label};{length}>",
            Tuple(tuple(Ref(item) for _ in range(length))),
            deps=(item,),
        ),
    )


def record(key: TypeDef, value: TypeDef) -> TypeDef:
    """``Record<K,V>``: maps and dictionaries."""
    return DEFAULT_REGISTRY.intern(
        ("record", key, value),
        lambda: TypeDef.native(
            f"Record<{key.label},{value.label}>",
            TypeName.ident("Record", generics=(Ref(key), Ref(value))),
        ),
    )


def transparent(inner: TypeDef) -> TypeDef:
    """A wrapper that serializes exactly like ``inner`` (boxes, references)."""
    return DEFAULT_REGISTRY.intern(
        ("transparent", inner),
        lambda: TypeDef.native(inner.label, Ref(inner)),
    )

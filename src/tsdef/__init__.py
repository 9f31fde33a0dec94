# topmark:header:start
#
#   project      : TsDef
#   file         : __init__.py
#   file_relpath : src/tsdef/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""TsDef package.

TsDef generates a TypeScript definition module from a graph of type
descriptors. Each source type is described once by a `TypeDef` handle; writing
the definition file for a root handle emits the root and its whole dependency
closure, each named type exactly once, inside a single exported namespace.

Example:
    ```python
    from tsdef import STRING, Object, ObjectField, TypeDef, render_definition_file

    user = TypeDef.defined("User", Object((ObjectField.of("name", STRING.ref()),)))
    print(render_definition_file(user).text)
    ```
"""

from __future__ import annotations

from tsdef.core.builtins import (
    ANY,
    BOOLEAN,
    DEFAULT_REGISTRY,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    NON_ZERO,
    NULL,
    NUMBER,
    STRING,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNKNOWN,
    USIZE,
    array_of,
    fixed_array,
    optional,
    record,
    transparent,
    tuple_of,
)
from tsdef.core.errors import (
    ConfigError,
    LoaderError,
    OptionsError,
    TsdefError,
    TypeDefError,
)
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
    TypeExpr,
    TypeInfo,
    TypeName,
    TypeString,
    Union,
)
from tsdef.core.typedef import TypeDef, TypeRegistry
from tsdef.rendering.definition_file import (
    DefinitionFile,
    DefinitionFileOptions,
    render_definition_file,
    write_definition_file,
)
from tsdef.rendering.stats import Stats

__all__ = [
    "ANY",
    "BOOLEAN",
    "DEFAULT_REGISTRY",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "NON_ZERO",
    "NULL",
    "NUMBER",
    "STRING",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "UNKNOWN",
    "USIZE",
    "Array",
    "ConfigError",
    "DefinedTypeInfo",
    "DefinitionFile",
    "DefinitionFileOptions",
    "Docs",
    "Ident",
    "Intersection",
    "LoaderError",
    "NativeTypeInfo",
    "Object",
    "ObjectField",
    "OptionsError",
    "Ref",
    "Stats",
    "TsdefError",
    "Tuple",
    "TypeDef",
    "TypeDefError",
    "TypeExpr",
    "TypeInfo",
    "TypeName",
    "TypeRegistry",
    "TypeString",
    "Union",
    "array_of",
    "fixed_array",
    "optional",
    "record",
    "render_definition_file",
    "transparent",
    "tuple_of",
    "write_definition_file",
]

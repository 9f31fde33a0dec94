# topmark:header:start
#
#   project      : TsDef
#   file         : typedef.py
#   file_relpath : src/tsdef/core/typedef.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Type definition handles and the static registry.

A `TypeDef` is the unit the emission engine walks: it pairs a descriptor
(`NativeTypeInfo` or `DefinedTypeInfo`) with the ordered list of types it
depends on. Handles are compared by *identity*, never by content, so two
distinct source types stay distinct even when they would render the same text.

Cyclic graphs are authored with forward declarations:

```python
node = TypeDef.declare("Node")
node.define(
    DefinedTypeInfo(
        name=TypeName.ident("Node"),
        definition=Object((ObjectField.of("next", Ref(node), optional=True),)),
    )
)
```

Immutability:
    - A handle is defined exactly once; `TypeDef.define` refuses a second call.
    - `TypeRegistry.freeze` closes a registry for further registration once
      program start-up is complete.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TYPE_CHECKING
from weakref import WeakValueDictionary

from tsdef.config.logging import get_logger
from tsdef.core.errors import TypeDefError
from tsdef.core.type_expr import (
    DefinedTypeInfo,
    Docs,
    NativeTypeInfo,
    Ref,
    TypeName,
    info_refs,
)

if TYPE_CHECKING:
    from tsdef.config.logging import TsdefLogger
    from tsdef.core.type_expr import TypeExpr, TypeInfo

logger: TsdefLogger = get_logger(__name__)


class TypeDef:
    """Handle for one source type: its descriptor plus its direct dependencies.

    Attributes:
        label (str): Human-readable label used in logs and registry lookups.
            It plays no part in identity.
    """

    __slots__ = ("label", "_info", "_deps", "__weakref__")

    label: str

    def __init__(self, label: str) -> None:
        self.label = label
        self._info: TypeInfo | None = None
        self._deps: tuple[TypeDef, ...] = ()

    def __repr__(self) -> str:
        state = "undefined"
        if isinstance(self._info, NativeTypeInfo):
            state = "native"
        elif isinstance(self._info, DefinedTypeInfo):
            state = "defined"
        return f"TypeDef({self.label!r}, {state})"

    # --- construction ---

    @classmethod
    def declare(cls, label: str) -> TypeDef:
        """Create an undefined handle to be completed later with `define`."""
        return cls(label)

    @classmethod
    def native(
        cls,
        label: str,
        definition: TypeExpr,
        deps: Iterable[TypeDef] | None = None,
    ) -> TypeDef:
        """Create a native handle: rendered inline, never declared.

        Args:
            label (str): Handle label.
            definition (TypeExpr): The inline rendering of the type.
            deps (Iterable[TypeDef] | None): Dependencies; inferred from the
                `Ref`s in ``definition`` when ``None``.

        Returns:
            TypeDef: The defined handle.
        """
        return cls(label).define(NativeTypeInfo(definition), deps)

    @classmethod
    def defined(
        cls,
        name: str | TypeName,
        definition: TypeExpr,
        *,
        docs: str | Docs | None = None,
        deps: Iterable[TypeDef] | None = None,
        label: str | None = None,
    ) -> TypeDef:
        """Create a handle that is emitted as a named declaration.

        Args:
            name (str | TypeName): Declared name; a plain string is a name without
                namespace path or generics.
            definition (TypeExpr): Right-hand side of the declaration.
            docs (str | Docs | None): Optional declaration documentation.
            deps (Iterable[TypeDef] | None): Dependencies; inferred from the `Ref`s
                in the descriptor when ``None``.
            label (str | None): Handle label; defaults to the qualified name.

        Returns:
            TypeDef: The defined handle.
        """
        type_name = TypeName.ident(name) if isinstance(name, str) else name
        info = DefinedTypeInfo(name=type_name, definition=definition, docs=Docs.coerce(docs))
        return cls(label or type_name.qualified).define(info, deps)

    def define(self, info: TypeInfo, deps: Iterable[TypeDef] | None = None) -> TypeDef:
        """Attach the descriptor and dependency list to this handle.

        Args:
            info (TypeInfo): The type descriptor.
            deps (Iterable[TypeDef] | None): Ordered direct dependencies. When
                ``None`` they are the distinct `Ref` targets of ``info`` in
                rendering order.

        Returns:
            TypeDef: ``self``, to allow chaining.

        Raises:
            TypeDefError: If the handle is already defined, ``info`` is not a
                descriptor, or a dependency is not a `TypeDef`.
        """
        if self._info is not None:
            raise TypeDefError(f"Type {self.label!r} is already defined")
        if not isinstance(info, (NativeTypeInfo, DefinedTypeInfo)):
            raise TypeDefError(f"Type {self.label!r}: expected a type descriptor, got {info!r}")

        resolved: tuple[TypeDef, ...] = info_refs(info) if deps is None else tuple(deps)
        for dep in resolved:
            if not isinstance(dep, TypeDef):
                raise TypeDefError(f"Type {self.label!r}: dependency {dep!r} is not a TypeDef")

        self._info = info
        self._deps = resolved
        logger.trace("Defined %s with %d dependencies", self.label, len(resolved))
        return self

    # --- accessors ---

    @property
    def is_defined(self) -> bool:
        """Whether `define` has been called."""
        return self._info is not None

    @property
    def info(self) -> TypeInfo:
        """The descriptor; raises `TypeDefError` for a never-defined handle."""
        if self._info is None:
            raise TypeDefError(f"Type {self.label!r} was declared but never defined")
        return self._info

    @property
    def deps(self) -> tuple[TypeDef, ...]:
        """Ordered direct dependencies; raises `TypeDefError` if undefined."""
        if self._info is None:
            raise TypeDefError(f"Type {self.label!r} was declared but never defined")
        return self._deps

    @property
    def is_native(self) -> bool:
        return isinstance(self.info, NativeTypeInfo)

    def ref(self) -> Ref:
        """Return a `Ref` expression pointing at this handle."""
        return Ref(self)


class TypeRegistry:
    """Start-up registry of type handles, looked up by label.

    The registry is filled once while modules are imported and then frozen.
    Generic instantiations (``array_of(X)`` and friends) go through `intern` so
    identical arguments always yield the identical handle, which keeps the
    closure walker's identity-based deduplication meaningful.
    """

    def __init__(self) -> None:
        self._by_label: dict[str, TypeDef] = {}
        self._interned: WeakValueDictionary[Hashable, TypeDef] = WeakValueDictionary()
        self._frozen: bool = False

    def __len__(self) -> int:
        return len(self._by_label)

    def __iter__(self) -> Iterator[TypeDef]:
        return iter(self._by_label.values())

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, handle: TypeDef) -> TypeDef:
        """Register ``handle`` under its label.

        Raises:
            TypeDefError: When the registry is frozen or the label is taken by
                a different handle.
        """
        if self._frozen:
            raise TypeDefError(f"Cannot register {handle.label!r}: registry is frozen")
        existing: TypeDef | None = self._by_label.get(handle.label)
        if existing is not None and existing is not handle:
            raise TypeDefError(f"Duplicate type label {handle.label!r}")
        self._by_label[handle.label] = handle
        return handle

    def get(self, label: str) -> TypeDef | None:
        return self._by_label.get(label)

    def intern(self, key: Hashable, factory: Callable[[], TypeDef]) -> TypeDef:
        """Return the handle memoized under ``key``, building it on first use.

        Interning is memoization of derived handles, not registration, so it
        remains available after `freeze`. Entries are held weakly: once nothing
        references the derived handle any more, its entry (and the strong
        references its key holds to the argument handles) is dropped, and the
        next call builds a fresh handle.
        """
        handle: TypeDef | None = self._interned.get(key)
        if handle is None:
            handle = factory()
            self._interned[key] = handle
            logger.trace("Interned %s", handle.label)
        return handle

    def freeze(self) -> None:
        """Close the registry for further `register` calls."""
        self._frozen = True
        logger.debug("Type registry frozen with %d entries", len(self._by_label))

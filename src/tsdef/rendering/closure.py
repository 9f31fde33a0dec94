# topmark:header:start
#
#   project      : TsDef
#   file         : closure.py
#   file_relpath : src/tsdef/rendering/closure.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Dependency closure walker.

Starting from a root `TypeDef`, the walker visits every handle reachable through
dependency lists exactly once and writes one declaration per *defined* type.

Algorithm:
    - A per-run set of visited handle identities starts empty.
    - A handle is marked visited *before* its dependencies are walked, so a cycle
      back to it stops immediately instead of recursing forever.
    - Dependencies are visited in declared order, then the handle's own
      declaration is written (post-order): a declaration never precedes the
      declarations of the defined types it depends on.
    - Native handles write nothing themselves; only their dependencies are walked.

The traversal uses an explicit stack, so long dependency chains are not bounded
by the interpreter's recursion limit. The visiting order is identical to the
recursive formulation.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from tsdef.config.logging import get_logger
from tsdef.core.type_expr import NativeTypeInfo

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tsdef.config.logging import TsdefLogger
    from tsdef.core.typedef import TypeDef
    from tsdef.rendering.emitters import Emitter
    from tsdef.rendering.stats import Stats

logger: TsdefLogger = get_logger(__name__)


class ClosureWalker:
    """Emit the dependency closure of type handles, each declaration once.

    One walker corresponds to one emission run; its visited set is never shared.

    Args:
        emitter (Emitter): Structural emitter bound to the output sink.
        stats (Stats): Counter updated for every declaration written.
    """

    def __init__(self, emitter: Emitter, stats: Stats) -> None:
        self._emitter: Emitter = emitter
        self._stats: Stats = stats
        self._visited: set[int] = set()

    @property
    def visited_count(self) -> int:
        """Number of distinct handles (native and defined) visited so far."""
        return len(self._visited)

    def _mark(self, handle: TypeDef) -> bool:
        key = id(handle)
        if key in self._visited:
            return False
        self._visited.add(key)
        return True

    def visit(self, root: TypeDef) -> None:
        """Emit ``root`` and everything it transitively depends on.

        Handles already visited by this walker (including earlier roots) are
        skipped.

        Raises:
            TypeDefError: If an undefined forward declaration is reachable.
        """
        if not self._mark(root):
            return
        stack: list[tuple[TypeDef, Iterator[TypeDef]]] = [(root, iter(root.deps))]
        while stack:
            handle, pending = stack[-1]
            for dep in pending:
                if self._mark(dep):
                    stack.append((dep, iter(dep.deps)))
                    break
            else:
                stack.pop()
                self.emit_declaration(handle)

    def emit_declaration(self, handle: TypeDef) -> None:
        """Write the declaration of one handle (no-op for native handles).

        Output form: ``export type Name<G>=<definition>;`` on its own line,
        wrapped in ``export namespace a.b{...}`` when the name has a path.
        """
        info = handle.info
        if isinstance(info, NativeTypeInfo):
            logger.trace("Skipping native type %r", handle)
            return

        self._stats.record_definition()
        logger.trace("Emitting declaration for %s", info.name.qualified)

        em = self._emitter
        em.emit_docs(info.docs)
        path = info.name.path
        if path:
            em.write("export namespace ")
            em.write(".".join(segment.name for segment in path))
            em.write("{")
        em.write("export type ")
        em.emit_type_name(replace(info.name, path=()))
        em.write("=")
        em.emit_expr(info.definition)
        em.write(";")
        if path:
            em.write("}")
        em.write("\n")

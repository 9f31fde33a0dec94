# topmark:header:start
#
#   project      : TsDef
#   file         : definition_file.py
#   file_relpath : src/tsdef/rendering/definition_file.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Write a complete TypeScript definition module for a root type.

The module has this layout:

```typescript
// AUTO-GENERATED by tsdef

export default types;
export namespace types{
export type Name=string;
export namespace api.v1{export type User={id:types.Name;};}
}
```

All declarations live under one root namespace and every reference to a
defined type is qualified through it, so a name declared inside a nested
namespace can never shadow another one. The root namespace is also the default
export of the module.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from tsdef.config.logging import get_logger
from tsdef.core.errors import OptionsError
from tsdef.rendering.closure import ClosureWalker
from tsdef.rendering.emitters import Emitter, split_lines
from tsdef.rendering.stats import Stats

if TYPE_CHECKING:
    from tsdef.config.logging import TsdefLogger
    from tsdef.core.typedef import TypeDef
    from tsdef.rendering.emitters import TextSink

logger: TsdefLogger = get_logger(__name__)

DEFAULT_HEADER: Final[str] = "AUTO-GENERATED by tsdef"
DEFAULT_ROOT_NAMESPACE: Final[str] = "types"

_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True, slots=True)
class DefinitionFileOptions:
    """Options for `write_definition_file`.

    Attributes:
        header (str | None): Content of the leading comment, without ``//`` and
            with lines separated by newlines. ``None`` omits the header.
        root_namespace (str): Name of the namespace wrapping every declaration.
            Must be a non-empty TypeScript identifier.

    Raises:
        OptionsError: If ``root_namespace`` is empty or not an identifier.
    """

    header: str | None = DEFAULT_HEADER
    root_namespace: str = DEFAULT_ROOT_NAMESPACE

    def __post_init__(self) -> None:
        if not self.root_namespace:
            raise OptionsError("The root namespace must not be empty")
        if not _IDENTIFIER_RE.match(self.root_namespace):
            raise OptionsError(
                f"The root namespace must be a TypeScript identifier, got {self.root_namespace!r}"
            )


@dataclass(frozen=True, slots=True)
class DefinitionFile:
    """A rendered definition module together with its run statistics."""

    text: str
    stats: Stats


def write_header(writer: TextSink, header: str | None) -> None:
    """Write ``header`` as ``//`` line comments followed by a blank line."""
    if header is None:
        return
    for line in split_lines(header):
        writer.write(f"// {line}\n")
    writer.write("\n")


def write_definition_file(
    writer: TextSink,
    root: TypeDef,
    options: DefinitionFileOptions | None = None,
) -> Stats:
    """Write a TypeScript module defining ``root`` and all of its dependencies.

    Writes go to ``writer`` strictly in traversal order. A failing write aborts
    the run and the exception propagates; output written so far is left as is.

    Args:
        writer (TextSink): Destination text stream.
        root (TypeDef): The root type handle.
        options (DefinitionFileOptions | None): Header and root namespace;
            defaults to `DefinitionFileOptions()`.

    Returns:
        Stats: Statistics of the run (number of declarations emitted).

    Raises:
        TypeDefError: If an undefined forward declaration is reachable from ``root``.
    """
    opts: DefinitionFileOptions = options or DefinitionFileOptions()
    root_ns: str = opts.root_namespace
    logger.debug("Writing definition file for %r under namespace %r", root, root_ns)

    write_header(writer, opts.header)
    writer.write(f"export default {root_ns};\n")
    writer.write(f"export namespace {root_ns}{{\n")

    stats = Stats()
    walker = ClosureWalker(Emitter(writer, root_ns), stats)
    walker.visit(root)

    writer.write("}\n")
    logger.debug(
        "Definition file done: %d declarations, %d types visited",
        stats.type_definitions,
        walker.visited_count,
    )
    return stats


def render_definition_file(
    root: TypeDef,
    options: DefinitionFileOptions | None = None,
) -> DefinitionFile:
    """Render the definition module for ``root`` into a string.

    Args:
        root (TypeDef): The root type handle.
        options (DefinitionFileOptions | None): Header and root namespace.

    Returns:
        DefinitionFile: The module text and run statistics.
    """
    buffer = io.StringIO()
    stats: Stats = write_definition_file(buffer, root, options)
    return DefinitionFile(text=buffer.getvalue(), stats=stats)

# topmark:header:start
#
#   project      : TsDef
#   file         : loader.py
#   file_relpath : src/tsdef/cli/loader.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Resolve ``module:attr`` references to root `TypeDef` handles.

The reference names an importable module and a (possibly dotted) attribute:
``myapp.api_types:USER`` or ``myapp.schema:Types.ROOT``. The attribute may be a
`TypeDef` or a zero-argument callable returning one, which lets descriptor
modules build their graph lazily.

The current working directory is put on ``sys.path`` (when missing) so that
project-local modules resolve the same way ``python -m`` would find them.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tsdef.config.logging import get_logger
from tsdef.core.errors import LoaderError, TypeDefError
from tsdef.core.typedef import TypeDef

if TYPE_CHECKING:
    from tsdef.config.logging import TsdefLogger

logger: TsdefLogger = get_logger(__name__)


def parse_reference(reference: str) -> tuple[str, list[str]]:
    """Split ``module:attr.path`` into the module name and attribute path.

    Raises:
        LoaderError: If the reference is not of the form ``module:attr``.
    """
    module_name, sep, attr_path = reference.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise LoaderError(f"Invalid root reference {reference!r}: expected 'module:attribute'")
    parts: list[str] = attr_path.split(".")
    if any(not part for part in parts):
        raise LoaderError(f"Invalid attribute path in root reference {reference!r}")
    return module_name, parts


def load_root(reference: str, *, search_path: Path | None = None) -> TypeDef:
    """Import the module named by ``reference`` and return its root `TypeDef`.

    Args:
        reference (str): ``module:attr`` reference.
        search_path (Path | None): Directory prepended to ``sys.path`` if absent;
            defaults to the current working directory.

    Returns:
        TypeDef: The root handle.

    Raises:
        LoaderError: If the module cannot be imported or raises while importing,
            the attribute is missing, a factory raises, or the result is not a
            `TypeDef`.
    """
    module_name, parts = parse_reference(reference)

    directory = str((search_path or Path.cwd()).resolve())
    if directory not in sys.path:
        sys.path.insert(0, directory)
    # Modules may have been written after the path finder cached the directory
    importlib.invalidate_caches()

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise LoaderError(f"Cannot import module {module_name!r}: {exc}") from exc
    except TypeDefError as exc:
        raise LoaderError(f"Invalid type descriptors in module {module_name!r}: {exc}") from exc
    except Exception as exc:
        raise LoaderError(
            f"Importing module {module_name!r} failed: {type(exc).__name__}: {exc}"
        ) from exc

    for part in parts:
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise LoaderError(f"{reference!r}: no attribute {part!r}") from exc

    if callable(obj) and not isinstance(obj, TypeDef):
        logger.debug("Calling factory %r for root reference %r", obj, reference)
        try:
            obj = obj()
        except TypeDefError as exc:
            raise LoaderError(f"{reference!r}: invalid type descriptors: {exc}") from exc
        except Exception as exc:
            raise LoaderError(
                f"{reference!r}: factory raised {type(exc).__name__}: {exc}"
            ) from exc

    if not isinstance(obj, TypeDef):
        raise LoaderError(
            f"{reference!r} resolved to {type(obj).__name__}, expected a tsdef TypeDef"
        )
    logger.debug("Loaded root %r from %r", obj, reference)
    return obj

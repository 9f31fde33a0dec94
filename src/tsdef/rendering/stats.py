# topmark:header:start
#
#   project      : TsDef
#   file         : stats.py
#   file_relpath : src/tsdef/rendering/stats.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Statistics about one emission run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Counters collected while a definition file is written.

    Attributes:
        type_definitions (int): Number of unique type declarations emitted.
            Native types are never counted.
    """

    type_definitions: int = 0

    def record_definition(self) -> None:
        self.type_definitions += 1

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of the counters."""
        return {"type_definitions": self.type_definitions}

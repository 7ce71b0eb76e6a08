from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Violation:
    """
    One data-quality finding.

    ``field`` is a path into the record (``names[0].type``,
    ``unions[1].spouse_id``) or, for graph-level checks, into the node
    (``rels.parents``). Violations are returned, never raised.
    """
    field: str
    message: str
    person_id: str | None = None

    def __str__(self) -> str:
        prefix = f"{self.person_id}: " if self.person_id else ""
        return f"{prefix}{self.field}: {self.message}"


__all__ = ["Violation"]

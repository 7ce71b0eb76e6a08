from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# -----------------------------
# Sub-records
# -----------------------------

@dataclass(slots=True)
class NameVariant:
    """
    One entry of a person's ``names`` list.

    Exactly one variant per person carries ``is_current=True``; display
    logic reads that one.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    type: Optional[str] = None
    is_current: bool = False
    display_name: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class LifeEvent:
    """
    Dated life event. ``union_id`` links marriage events to a union.
    """
    type: Optional[str] = None
    date: Optional[str] = None
    date_precision: Optional[str] = None
    date_qualifier: Optional[str] = None
    place: Optional[str] = None
    place_latitude: Any = None
    place_longitude: Any = None
    certainty: Optional[str] = None
    union_id: Optional[str] = None
    description: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class UnionRecord:
    union_id: Optional[str] = None
    spouse_id: Optional[str] = None
    union_type: Optional[str] = None
    order: Any = None
    status: Optional[str] = None
    end_reason: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class VitalRecord:
    """Legacy ``birth`` / ``death`` sub-record (pre-events schema)."""
    date: Optional[str] = None
    place: Optional[str] = None


# -----------------------------
# Person
# -----------------------------

@dataclass(slots=True)
class PersonRecord:
    id: str

    # Modeled
    names: List[NameVariant] = field(default_factory=list)
    gender: Optional[str] = None
    vital_status: Optional[str] = None
    # None means the record has no events array at all (legacy shape).
    events: Optional[List[LifeEvent]] = None

    # References by id; None means "unknown"
    father_id: Optional[str] = None
    mother_id: Optional[str] = None
    unions: List[UnionRecord] = field(default_factory=list)

    sibling_order: Any = None
    biography: str = ""

    # Legacy flat schema
    display_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    other_first_names: List[str] = field(default_factory=list)
    nicknames: List[str] = field(default_factory=list)
    birth: Optional[VitalRecord] = None
    death: Optional[VitalRecord] = None
    original_code: Optional[str] = None

    # Unmodeled document fields, preserved for write-back
    extra: Dict[str, Any] = field(default_factory=dict)

    def current_name(self) -> Optional[NameVariant]:
        for name in self.names:
            if name.is_current:
                return name
        return None

    def primary_name(self) -> Optional[NameVariant]:
        """Current name variant, else the first one."""
        current = self.current_name()
        if current is not None:
            return current
        return self.names[0] if self.names else None

    def first_event(self, event_type: str) -> Optional[LifeEvent]:
        for event in self.events or []:
            if event.type == event_type:
                return event
        return None


__all__ = [
    "NameVariant",
    "LifeEvent",
    "UnionRecord",
    "VitalRecord",
    "PersonRecord",
]

"""
Parse-and-validate boundary between raw store documents and typed records.

Store documents are untyped dicts. ``parse_person`` turns one into a
``PersonRecord`` or raises ``RecordParseError`` when the *structure* is
wrong (a list where a dict belongs, a non-string reference, ...). Values
that are structurally fine but semantically invalid (unknown gender, bad
date format) are kept as-is so the validator can report them.

``person_to_dict`` is the inverse used for write-back; unknown keys survive
the round trip through ``raw`` / ``extra``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from genealogy_tree.core.exceptions import RecordParseError
from genealogy_tree.records.entities import (
    LifeEvent,
    NameVariant,
    PersonRecord,
    UnionRecord,
    VitalRecord,
)

NAME_KEYS = ("first_name", "last_name", "middle_name", "type", "is_current", "display_name")
EVENT_KEYS = (
    "type",
    "date",
    "date_precision",
    "date_qualifier",
    "place",
    "place_latitude",
    "place_longitude",
    "certainty",
    "union_id",
    "description",
)
UNION_KEYS = ("union_id", "spouse_id", "union_type", "order", "status", "end_reason")
PERSON_KEYS = (
    "id",
    "names",
    "gender",
    "vital_status",
    "events",
    "father_id",
    "mother_id",
    "unions",
    "sibling_order",
    "biography",
    "display_name",
    "first_name",
    "middle_name",
    "last_name",
    "other_first_names",
    "nicknames",
    "birth",
    "death",
    "original_code",
)


# -----------------------------------------------------------------------------
# Field helpers
# -----------------------------------------------------------------------------

def _opt_str(doc_id: Optional[str], path: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise RecordParseError(doc_id, f"{path} must be a string, got {type(value).__name__}")


def _opt_ref(doc_id: Optional[str], path: str, value: Any) -> Optional[str]:
    """References: empty strings read as "unknown" just like null."""
    ref = _opt_str(doc_id, path, value)
    return ref or None


def _date_value(doc_id: Optional[str], path: str, value: Any) -> Optional[str]:
    # Year-only dates are sometimes stored as numbers.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _opt_str(doc_id, path, value)


def _list_of(doc_id: Optional[str], path: str, value: Any) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RecordParseError(doc_id, f"{path} must be a list, got {type(value).__name__}")
    return value


def _mapping(doc_id: Optional[str], path: str, value: Any) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise RecordParseError(doc_id, f"{path} must be an object, got {type(value).__name__}")
    return value


def _leftovers(doc: Dict[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    known_set = set(known)
    return {k: v for k, v in doc.items() if k not in known_set}


# -----------------------------------------------------------------------------
# Sub-record parsers
# -----------------------------------------------------------------------------

def _parse_name(doc_id: Optional[str], idx: int, value: Any) -> NameVariant:
    path = f"names[{idx}]"
    data = _mapping(doc_id, path, value)
    return NameVariant(
        first_name=_opt_str(doc_id, f"{path}.first_name", data.get("first_name")),
        last_name=_opt_str(doc_id, f"{path}.last_name", data.get("last_name")),
        middle_name=_opt_str(doc_id, f"{path}.middle_name", data.get("middle_name")),
        type=_opt_str(doc_id, f"{path}.type", data.get("type")),
        is_current=data.get("is_current") is True,
        display_name=_opt_str(doc_id, f"{path}.display_name", data.get("display_name")),
        raw=_leftovers(data, NAME_KEYS),
    )


def _parse_event(doc_id: Optional[str], idx: int, value: Any) -> LifeEvent:
    path = f"events[{idx}]"
    data = _mapping(doc_id, path, value)
    return LifeEvent(
        type=_opt_str(doc_id, f"{path}.type", data.get("type")),
        date=_date_value(doc_id, f"{path}.date", data.get("date")),
        date_precision=_opt_str(doc_id, f"{path}.date_precision", data.get("date_precision")),
        date_qualifier=_opt_str(doc_id, f"{path}.date_qualifier", data.get("date_qualifier")),
        place=_opt_str(doc_id, f"{path}.place", data.get("place")),
        place_latitude=data.get("place_latitude"),
        place_longitude=data.get("place_longitude"),
        certainty=_opt_str(doc_id, f"{path}.certainty", data.get("certainty")),
        union_id=_opt_ref(doc_id, f"{path}.union_id", data.get("union_id")),
        description=_opt_str(doc_id, f"{path}.description", data.get("description")),
        raw=_leftovers(data, EVENT_KEYS),
    )


def _parse_union(doc_id: Optional[str], idx: int, value: Any) -> UnionRecord:
    path = f"unions[{idx}]"
    data = _mapping(doc_id, path, value)
    return UnionRecord(
        union_id=_opt_ref(doc_id, f"{path}.union_id", data.get("union_id")),
        spouse_id=_opt_ref(doc_id, f"{path}.spouse_id", data.get("spouse_id")),
        union_type=_opt_str(doc_id, f"{path}.union_type", data.get("union_type")),
        order=data.get("order"),
        status=_opt_str(doc_id, f"{path}.status", data.get("status")),
        end_reason=_opt_str(doc_id, f"{path}.end_reason", data.get("end_reason")),
        raw=_leftovers(data, UNION_KEYS),
    )


def _parse_vital(doc_id: Optional[str], key: str, value: Any) -> Optional[VitalRecord]:
    if value is None:
        return None
    data = _mapping(doc_id, key, value)
    return VitalRecord(
        date=_date_value(doc_id, f"{key}.date", data.get("date")),
        place=_opt_str(doc_id, f"{key}.place", data.get("place")),
    )


def _str_list(doc_id: Optional[str], path: str, value: Any) -> List[str]:
    return [_opt_str(doc_id, f"{path}[{i}]", v) or "" for i, v in enumerate(_list_of(doc_id, path, value))]


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def parse_person(doc: Any, doc_id: Optional[str] = None) -> PersonRecord:
    """
    Build a PersonRecord from a store document.

    ``doc_id`` is the store key; it wins over an ``id`` field inside the
    document, the same way the store's key is authoritative on read.
    """
    if not isinstance(doc, dict):
        raise RecordParseError(doc_id, f"document must be an object, got {type(doc).__name__}")

    person_id = doc_id if doc_id is not None else _opt_str(doc_id, "id", doc.get("id"))
    person_id = person_id or ""

    events_raw = doc.get("events")
    events = None
    if events_raw is not None:
        events = [_parse_event(person_id, i, e) for i, e in enumerate(_list_of(person_id, "events", events_raw))]

    return PersonRecord(
        id=person_id,
        names=[_parse_name(person_id, i, n) for i, n in enumerate(_list_of(person_id, "names", doc.get("names")))],
        gender=_opt_str(person_id, "gender", doc.get("gender")),
        vital_status=_opt_str(person_id, "vital_status", doc.get("vital_status")),
        events=events,
        father_id=_opt_ref(person_id, "father_id", doc.get("father_id")),
        mother_id=_opt_ref(person_id, "mother_id", doc.get("mother_id")),
        unions=[_parse_union(person_id, i, u) for i, u in enumerate(_list_of(person_id, "unions", doc.get("unions")))],
        sibling_order=doc.get("sibling_order"),
        biography=_opt_str(person_id, "biography", doc.get("biography")) or "",
        display_name=_opt_str(person_id, "display_name", doc.get("display_name")),
        first_name=_opt_str(person_id, "first_name", doc.get("first_name")),
        middle_name=_opt_str(person_id, "middle_name", doc.get("middle_name")),
        last_name=_opt_str(person_id, "last_name", doc.get("last_name")),
        other_first_names=_str_list(person_id, "other_first_names", doc.get("other_first_names")),
        nicknames=_str_list(person_id, "nicknames", doc.get("nicknames")),
        birth=_parse_vital(person_id, "birth", doc.get("birth")),
        death=_parse_vital(person_id, "death", doc.get("death")),
        original_code=_opt_str(person_id, "original_code", doc.get("original_code")),
        extra=_leftovers(doc, PERSON_KEYS),
    )


def parse_roster(docs: Dict[str, Any]) -> List[PersonRecord]:
    """Parse ``{doc_id: doc}`` in store order."""
    return [parse_person(doc, doc_id) for doc_id, doc in docs.items()]


def person_to_dict(person: PersonRecord) -> Dict[str, Any]:
    """
    Serialize a record for the store. Legacy fields are only written when
    the record carries them, so events-schema records stay clean.
    """
    out: Dict[str, Any] = {
        "id": person.id,
        "names": [
            {
                "first_name": n.first_name,
                "middle_name": n.middle_name,
                "last_name": n.last_name,
                "type": n.type,
                "is_current": n.is_current,
                **({"display_name": n.display_name} if n.display_name is not None else {}),
                **n.raw,
            }
            for n in person.names
        ],
        "gender": person.gender,
        "vital_status": person.vital_status,
        "father_id": person.father_id,
        "mother_id": person.mother_id,
        "unions": [
            {
                "union_id": u.union_id,
                "spouse_id": u.spouse_id,
                "union_type": u.union_type,
                "order": u.order,
                "status": u.status,
                "end_reason": u.end_reason,
                **u.raw,
            }
            for u in person.unions
        ],
        "sibling_order": person.sibling_order,
        "biography": person.biography,
    }

    if person.events is not None:
        out["events"] = [
            {
                **{k: getattr(e, k) for k in EVENT_KEYS},
                **e.raw,
            }
            for e in person.events
        ]

    for key in ("display_name", "first_name", "middle_name", "last_name", "original_code"):
        value = getattr(person, key)
        if value is not None:
            out[key] = value
    if person.other_first_names:
        out["other_first_names"] = list(person.other_first_names)
    if person.nicknames:
        out["nicknames"] = list(person.nicknames)
    for key in ("birth", "death"):
        vital = getattr(person, key)
        if vital is not None:
            out[key] = {"date": vital.date, "place": vital.place}

    out.update(person.extra)
    return out


__all__ = [
    "parse_person",
    "parse_roster",
    "person_to_dict",
]

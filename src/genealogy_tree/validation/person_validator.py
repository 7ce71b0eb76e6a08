"""
Person validator.

Checks a single person record against the rest of the roster before it is
saved, and (through ``validate_roster``) every stored record at read time.

Every check runs on every call; nothing short-circuits on the first
problem, so a caller sees the full list and decides whether to block a
save or only warn. Nothing here mutates the roster or the person.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from genealogy_tree.logging import get_logger
from genealogy_tree.records.entities import LifeEvent, NameVariant, PersonRecord, UnionRecord
from genealogy_tree.records.vocab import (
    CERTAINTIES,
    DATE_PATTERNS,
    DATE_PRECISIONS,
    DATE_QUALIFIERS,
    EVENT_TYPES,
    GENDERS,
    NAME_TYPES,
    PERSON_ID_PATTERN,
    UNION_STATUSES,
    UNION_TYPES,
    VITAL_STATUSES,
)
from genealogy_tree.validation.violations import Violation

log = get_logger("person_validator")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class PersonValidator:
    """
    Validates person records against a roster snapshot.

    The roster is indexed once at construction; ``validate`` can then be
    called for any number of candidates.
    """

    def __init__(self, roster: Sequence[PersonRecord] = ()):
        self.roster = roster
        self.existing_ids = {p.id for p in roster}
        self._by_id: Dict[str, PersonRecord] = {}
        for p in roster:
            self._by_id.setdefault(p.id, p)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def validate(self, person: PersonRecord, current_id: Optional[str] = None) -> List[Violation]:
        """
        Validate ``person``.

        ``current_id`` is the id the person is stored under when editing an
        existing record; the uniqueness check ignores a match against it.
        Pass None for a brand-new person.
        """
        errors: List[Violation] = []

        errors.extend(self.validate_id(person.id, current_id))
        errors.extend(self.validate_names(person.names))
        errors.extend(self.validate_gender(person.gender))
        errors.extend(self.validate_vital_status(person))
        errors.extend(self.validate_sibling_order(person.sibling_order))

        if person.events is not None:
            errors.extend(self.validate_events(person.events, person.unions))

        errors.extend(self.validate_relationships(person))

        return [
            Violation(e.field, e.message, person_id=person.id or None)
            for e in errors
        ]

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def validate_id(self, person_id: Optional[str], current_id: Optional[str] = None) -> List[Violation]:
        if not person_id or not person_id.strip():
            return [Violation("id", "ID is required")]

        errors: List[Violation] = []
        if not PERSON_ID_PATTERN.fullmatch(person_id):
            errors.append(Violation("id", "ID must be lowercase letters, numbers, and underscores only"))

        if person_id != current_id and person_id in self.existing_ids:
            errors.append(Violation("id", "ID already exists - must be unique"))

        return errors

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def validate_names(self, names: List[NameVariant]) -> List[Violation]:
        if not names:
            return [Violation("names", "At least one name is required")]

        errors: List[Violation] = []

        current_count = sum(1 for n in names if n.is_current)
        if current_count == 0:
            errors.append(Violation("names", "One name must be marked as current"))
        elif current_count > 1:
            errors.append(Violation("names", f"Only one name may be marked as current (found {current_count})"))

        for idx, name in enumerate(names):
            if _blank(name.first_name) or _blank(name.last_name):
                errors.append(Violation(f"names[{idx}]", "Name must have at least first_name and last_name"))

            if name.type is not None and name.type not in NAME_TYPES:
                errors.append(Violation(
                    f"names[{idx}].type",
                    f"Invalid name type. Must be one of: {', '.join(NAME_TYPES)}",
                ))

        return errors

    # ------------------------------------------------------------------
    # Scalar fields
    # ------------------------------------------------------------------

    def validate_gender(self, gender: Optional[str]) -> List[Violation]:
        if gender not in GENDERS:
            return [Violation("gender", "Gender must be M (Male), F (Female), or U (Unknown)")]
        return []

    def validate_vital_status(self, person: PersonRecord) -> List[Violation]:
        if person.vital_status not in VITAL_STATUSES:
            return [Violation("vital_status", "Vital status must be living, deceased, or unknown")]

        if person.vital_status == "living" and person.first_event("death") is not None:
            return [Violation("vital_status", "Person marked as living has a death event")]

        return []

    def validate_sibling_order(self, sibling_order) -> List[Violation]:
        if sibling_order is not None and not _is_positive_int(sibling_order):
            return [Violation("sibling_order", "Sibling order must be a positive integer (1, 2, 3...)")]
        return []

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def validate_events(self, events: List[LifeEvent], unions: Iterable[UnionRecord] = ()) -> List[Violation]:
        errors: List[Violation] = []
        union_ids = {u.union_id for u in unions if u.union_id}

        for idx, event in enumerate(events):
            path = f"events[{idx}]"

            if not event.type or event.type not in EVENT_TYPES:
                errors.append(Violation(f"{path}.type", "Invalid event type"))

            if event.type == "marriage" and not event.union_id:
                errors.append(Violation(f"{path}.union_id", "Marriage event must have union_id"))

            if event.union_id and event.union_id not in union_ids:
                errors.append(Violation(f"{path}.union_id", "Event union_id does not match any union"))

            if event.date_precision is not None and event.date_precision not in DATE_PRECISIONS:
                errors.append(Violation(
                    f"{path}.date_precision",
                    f"Date precision must be one of: {', '.join(DATE_PRECISIONS)}",
                ))
            elif event.date and event.date_precision:
                errors.extend(self.validate_date_format(event.date, event.date_precision, idx))

            if event.date_qualifier is not None and event.date_qualifier not in DATE_QUALIFIERS:
                errors.append(Violation(
                    f"{path}.date_qualifier",
                    f"Date qualifier must be one of: {', '.join(DATE_QUALIFIERS)}",
                ))

            errors.extend(self._validate_coordinate(path, "place_latitude", event.place_latitude, 90))
            errors.extend(self._validate_coordinate(path, "place_longitude", event.place_longitude, 180))

            if event.certainty is not None and event.certainty not in CERTAINTIES:
                errors.append(Violation(f"{path}.certainty", "Invalid certainty value"))

        return errors

    def validate_date_format(self, date: str, precision: str, event_idx: int) -> List[Violation]:
        """Decade and century precisions accept free text."""
        pattern = DATE_PATTERNS.get(precision)
        if pattern is not None and not pattern.fullmatch(str(date)):
            return [Violation(
                f"events[{event_idx}].date",
                f'Date format must match precision "{precision}"',
            )]
        return []

    @staticmethod
    def _validate_coordinate(path: str, key: str, value, bound: int) -> List[Violation]:
        if value is None:
            return []
        if not _is_number(value) or not -bound <= value <= bound:
            label = "Latitude" if key == "place_latitude" else "Longitude"
            return [Violation(f"{path}.{key}", f"{label} must be a number between -{bound} and {bound}")]
        return []

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def validate_relationships(self, person: PersonRecord) -> List[Violation]:
        errors: List[Violation] = []

        if person.father_id and not self.person_exists(person.father_id):
            errors.append(Violation("father_id", "Father ID references non-existent person"))

        if person.mother_id and not self.person_exists(person.mother_id):
            errors.append(Violation("mother_id", "Mother ID references non-existent person"))

        if person.father_id and person.father_id == person.mother_id:
            errors.append(Violation("mother_id", "Father and mother cannot be the same person"))

        if self.has_circular_ancestry(person):
            errors.append(Violation("relationships", "Circular parent relationship detected"))

        seen_union_ids = set()
        for idx, union in enumerate(person.unions):
            path = f"unions[{idx}]"

            if union.spouse_id:
                if union.spouse_id == person.id:
                    errors.append(Violation(f"{path}.spouse_id", "A person cannot be their own spouse"))
                elif not self.person_exists(union.spouse_id):
                    errors.append(Violation(f"{path}.spouse_id", "Spouse ID references non-existent person"))

            if union.union_id:
                if union.union_id in seen_union_ids:
                    errors.append(Violation(f"{path}.union_id", "Union ID must be unique within a person's unions"))
                seen_union_ids.add(union.union_id)

            if union.union_type is not None and union.union_type not in UNION_TYPES:
                errors.append(Violation(f"{path}.union_type", "Invalid union type"))

            if union.status is not None and union.status not in UNION_STATUSES:
                errors.append(Violation(f"{path}.status", "Union status must be current or ended"))

            if union.order is not None and not _is_positive_int(union.order):
                errors.append(Violation(f"{path}.order", "Union order must be a positive integer"))

        return errors

    def person_exists(self, person_id: str) -> bool:
        return person_id in self.existing_ids

    def has_circular_ancestry(self, person: PersonRecord) -> bool:
        """
        Walk the ancestors of ``person`` (using its own father/mother ids,
        then the roster) and report whether its id is reached.

        Each id is expanded at most once, so already-cyclic roster data
        elsewhere in the tree still terminates and is not blamed on
        ``person``.
        """
        if not person.id:
            return False

        to_check = [pid for pid in (person.father_id, person.mother_id) if pid]
        visited = set()

        while to_check:
            current_id = to_check.pop()
            if current_id == person.id:
                return True
            if current_id in visited:
                continue
            visited.add(current_id)

            ancestor = self._by_id.get(current_id)
            if ancestor is not None:
                to_check.extend(pid for pid in (ancestor.father_id, ancestor.mother_id) if pid)

        return False


# -----------------------------------------------------------------------------
# Functional API
# -----------------------------------------------------------------------------

def validate_person(
    person: PersonRecord,
    roster: Sequence[PersonRecord],
    current_id: Optional[str] = None,
) -> List[Violation]:
    return PersonValidator(roster).validate(person, current_id=current_id)


def validate_roster(roster: Sequence[PersonRecord]) -> Dict[str, List[Violation]]:
    """
    Read-time check of every stored record. Returns only the people that
    have violations, keyed by id.
    """
    validator = PersonValidator(roster)
    counts = Counter(p.id for p in roster)
    results: Dict[str, List[Violation]] = {}
    reported_duplicates = set()

    for person in roster:
        violations = validator.validate(person, current_id=person.id)
        if person.id and counts[person.id] > 1 and person.id not in reported_duplicates:
            reported_duplicates.add(person.id)
            violations.append(Violation(
                "id",
                f"ID appears {counts[person.id]} times in the roster",
                person_id=person.id,
            ))
        if violations:
            results.setdefault(person.id, []).extend(violations)

    log.debug("Validated %d records, %d with violations", len(roster), len(results))
    return results


__all__ = [
    "PersonValidator",
    "validate_person",
    "validate_roster",
]

"""
Write path for the tree.

Unlike read-time validation, which only warns, every write here validates
first and raises ``ValidationFailedError`` before the store is touched.
Authorization is left to the store, which rejects non-writers.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

from genealogy_tree.core.exceptions import PersonNotFoundError, ValidationFailedError
from genealogy_tree.identity.id_generator import generate_person_id, rewrite_references
from genealogy_tree.logging import get_logger
from genealogy_tree.records.entities import PersonRecord
from genealogy_tree.records.schema import person_to_dict
from genealogy_tree.store.json_store import DEFAULT_TREE_ID, JsonTreeStore
from genealogy_tree.validation.person_validator import PersonValidator

log = get_logger("editing")


def create_person(
    store: JsonTreeStore,
    draft: PersonRecord,
    user_id: Optional[str],
    tree_id: str = DEFAULT_TREE_ID,
) -> PersonRecord:
    """
    Store a new person. A draft without an id gets one generated from its
    current name, unique within the tree.
    """
    roster = store.fetch_people(tree_id)
    validator = PersonValidator(roster)

    person = draft
    if not person.id:
        person = replace(draft, id=generate_person_id(draft, validator.existing_ids))

    violations = validator.validate(person, current_id=None)
    if violations:
        raise ValidationFailedError(person.id, violations)

    store.save_person(person, user_id, tree_id, merge=False)
    log.info("Created person %s in tree %s", person.id, tree_id)
    return person


def save_person(
    store: JsonTreeStore,
    person: PersonRecord,
    user_id: Optional[str],
    tree_id: str = DEFAULT_TREE_ID,
) -> PersonRecord:
    """Save edits to an existing person. The id itself is changed with ``rename_person``."""
    roster = store.fetch_people(tree_id)
    if not any(p.id == person.id for p in roster):
        raise PersonNotFoundError(f"No person {person.id!r} in tree {tree_id!r}")

    violations = PersonValidator(roster).validate(person, current_id=person.id)
    if violations:
        raise ValidationFailedError(person.id, violations)

    store.save_person(person, user_id, tree_id, merge=True)
    log.info("Saved person %s in tree %s", person.id, tree_id)
    return person


def rename_person(
    store: JsonTreeStore,
    old_id: str,
    user_id: Optional[str],
    new_id: Optional[str] = None,
    tree_id: str = DEFAULT_TREE_ID,
) -> PersonRecord:
    """
    Give a person a new id and repoint every father_id, mother_id and
    spouse_id that referenced the old one, in a single store batch.

    Without ``new_id`` the id is regenerated from the person's current name.
    """
    roster = store.fetch_people(tree_id)
    person = next((p for p in roster if p.id == old_id), None)
    if person is None:
        raise PersonNotFoundError(f"No person {old_id!r} in tree {tree_id!r}")

    validator = PersonValidator(roster)
    if new_id is None:
        new_id = generate_person_id(person, validator.existing_ids - {old_id})
    if new_id == old_id:
        return person

    violations = [
        replace(v, person_id=old_id) for v in validator.validate_id(new_id, current_id=None)
    ]
    if violations:
        raise ValidationFailedError(old_id, violations)

    rewritten = rewrite_references(roster, old_id, new_id)

    writes: Dict[str, dict] = {}
    renamed = person
    for before, after in zip(roster, rewritten):
        if before.id == old_id:
            renamed = replace(after, id=new_id)
            writes[new_id] = person_to_dict(renamed)
        elif after is not before:
            writes[after.id] = person_to_dict(after)

    store.apply_batch(writes, (old_id,), user_id, tree_id, merge=False)
    log.info(
        "Renamed %s -> %s in tree %s (%d referencing record(s) updated)",
        old_id, new_id, tree_id, len(writes) - 1,
    )
    return renamed


__all__ = [
    "create_person",
    "rename_person",
    "save_person",
]

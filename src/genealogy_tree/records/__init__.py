"""
Person record model and the store-document boundary.
"""

from genealogy_tree.records.entities import (
    LifeEvent,
    NameVariant,
    PersonRecord,
    UnionRecord,
    VitalRecord,
)
from genealogy_tree.records.schema import parse_person, parse_roster, person_to_dict

__all__ = [
    "LifeEvent",
    "NameVariant",
    "PersonRecord",
    "UnionRecord",
    "VitalRecord",
    "parse_person",
    "parse_roster",
    "person_to_dict",
]

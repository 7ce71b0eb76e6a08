"""
Record-level validation: returns violations, never raises.
"""

from genealogy_tree.validation.person_validator import (
    PersonValidator,
    validate_person,
    validate_roster,
)
from genealogy_tree.validation.violations import Violation

__all__ = [
    "PersonValidator",
    "Violation",
    "validate_person",
    "validate_roster",
]

"""
Closed vocabularies for person records.

Values are the stored spellings; the validator and the chart adapter both
check membership against these tuples.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern

GENDERS = ("M", "F", "U")
VITAL_STATUSES = ("living", "deceased", "unknown")

NAME_TYPES = (
    "english",
    "vietnamese",
    "french",
    "legal",
    "birth",
    "married",
    "alias",
)

EVENT_TYPES = (
    "birth",
    "death",
    "marriage",
    "divorce",
    "baptism",
    "burial",
    "engagement",
    "graduation",
    "adoption",
    "immigration",
    "emigration",
    "occupation",
    "residence",
    "military",
)

DATE_PRECISIONS = ("day", "month", "year", "decade", "century", "time")
DATE_QUALIFIERS = ("exact", "approximate", "before", "after", "between")
CERTAINTIES = ("certain", "probable", "possible", "uncertain", "living")

UNION_TYPES = ("marriage", "partnership", "common_law")
UNION_STATUSES = ("current", "ended")

# Decade and century precisions accept free text ("1880s", "19th century").
DATE_PATTERNS: Dict[str, Pattern[str]] = {
    "day": re.compile(r"^\d{4}-\d{2}-\d{2}$"),
    "month": re.compile(r"^\d{4}-\d{2}$"),
    "year": re.compile(r"^\d{4}$"),
    "time": re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$"),
}

PERSON_ID_PATTERN = re.compile(r"^[a-z0-9_]+$")

__all__ = [
    "GENDERS",
    "VITAL_STATUSES",
    "NAME_TYPES",
    "EVENT_TYPES",
    "DATE_PRECISIONS",
    "DATE_QUALIFIERS",
    "CERTAINTIES",
    "UNION_TYPES",
    "UNION_STATUSES",
    "DATE_PATTERNS",
    "PERSON_ID_PATTERN",
]

# src/genealogy_tree/identity/id_generator.py
from __future__ import annotations

import re
import unicodedata
import uuid
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from genealogy_tree.records.entities import PersonRecord


# -----------------------------
# Diacritic substitution table
# -----------------------------

# Each accented character maps to exactly one ASCII base letter. Lookups are
# done on the lowercased character, so capitals are covered too.
_DIACRITIC_GROUPS: Dict[str, str] = {
    # Latin
    "a": "àáâãäåăąāǎ",
    "c": "çćčĉċ",
    "d": "đď",
    "e": "èéêëęėěēĕ",
    "g": "ğĝġģ",
    "h": "ĥħ",
    "i": "ìíîïįīĭı",
    "j": "ĵ",
    "k": "ķ",
    "l": "łľĺļ",
    "n": "ñńňņ",
    "o": "òóôõöøőōŏ",
    "r": "řŕŗ",
    "s": "şśšŝș",
    "t": "ťţț",
    "u": "ùúûüűūůŭų",
    "w": "ŵ",
    "y": "ýÿŷ",
    "z": "žźż",
}

# Vietnamese tone marks on every vowel (and vowel-with-hat/horn/breve) base.
_VIETNAMESE_GROUPS: Dict[str, str] = {
    "a": "ảạ" "ắằẳẵặ" "ấầẩẫậ",
    "e": "ẻẽẹ" "ếềểễệ",
    "i": "ỉĩị",
    "o": "ỏọ" "ốồổỗộ" "ơớờởỡợ",
    "u": "ủũụ" "ưứừửữự",
    "y": "ỳỷỹỵ",
}


def _build_table(*groups: Dict[str, str]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for group in groups:
        for base, accented in group.items():
            for ch in accented:
                table[ch] = base
    return table


DIACRITICS: Dict[str, str] = _build_table(_DIACRITIC_GROUPS, _VIETNAMESE_GROUPS)

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


# -----------------------------
# Normalization
# -----------------------------

def remove_diacritics(text: str) -> str:
    """Replace accented characters with their ASCII base letter."""
    # Decomposed input (base letter + combining mark) is composed first so
    # the table sees one code point per accented letter.
    composed = unicodedata.normalize("NFC", text)
    return "".join(DIACRITICS.get(ch.lower(), ch) for ch in composed)


def slugify(text: Optional[str]) -> str:
    """
    Normalize one name component:
      - strip diacritics (fixed table, no locale collation)
      - lowercase
      - runs of non-alphanumerics -> single underscore
      - no leading/trailing underscores
    """
    if not text:
        return ""
    lowered = remove_diacritics(text).lower()
    return _NON_ALNUM_RUN.sub("_", lowered).strip("_")


# -----------------------------
# Identifier generation
# -----------------------------

def placeholder_id(existing_ids: Iterable[str] = ()) -> str:
    """Unique stand-in for records without enough name data to slug."""
    taken = set(existing_ids)
    while True:
        candidate = f"person_{uuid.uuid4().hex[:12]}"
        if candidate not in taken:
            return candidate


def generate_id(
    last_name: Optional[str],
    first_name: Optional[str],
    middle_name: Optional[str] = None,
    existing_ids: Iterable[str] = (),
) -> str:
    """
    ``lastname_middlename_firstname``, suffixed ``_2``, ``_3``, ... on
    collision with ``existing_ids``.

    Incomplete names (no first or no last name) never block creation; they
    get a placeholder id instead.
    """
    taken = set(existing_ids)

    last = slugify(last_name)
    first = slugify(first_name)
    if not last or not first:
        return placeholder_id(taken)

    base_id = "_".join(part for part in (last, slugify(middle_name), first) if part)

    final_id = base_id
    counter = 2
    while final_id in taken:
        final_id = f"{base_id}_{counter}"
        counter += 1
    return final_id


def generate_person_id(person: PersonRecord, existing_ids: Iterable[str] = ()) -> str:
    """Generate an id from the person's current name (or first name variant)."""
    name = person.primary_name()
    if name is None:
        return placeholder_id(existing_ids)
    return generate_id(
        name.last_name,
        name.first_name,
        name.middle_name,
        existing_ids=existing_ids,
    )


# -----------------------------
# Reference rewriting
# -----------------------------

def rewrite_references(
    roster: Sequence[PersonRecord],
    old_id: str,
    new_id: str,
) -> List[PersonRecord]:
    """
    Return a new roster where father_id, mother_id and every union spouse_id
    equal to ``old_id`` point at ``new_id`` instead.

    Changed records (and changed unions) are copies; untouched ones are
    shared with the input. The renamed person's own ``id`` is left alone.
    """
    updated: List[PersonRecord] = []

    for person in roster:
        changes = {}
        if person.father_id == old_id:
            changes["father_id"] = new_id
        if person.mother_id == old_id:
            changes["mother_id"] = new_id

        if any(u.spouse_id == old_id for u in person.unions):
            changes["unions"] = [
                replace(u, spouse_id=new_id) if u.spouse_id == old_id else u
                for u in person.unions
            ]

        updated.append(replace(person, **changes) if changes else person)

    return updated


__all__ = [
    "DIACRITICS",
    "remove_diacritics",
    "slugify",
    "placeholder_id",
    "generate_id",
    "generate_person_id",
    "rewrite_references",
]

# src/genealogy_tree/rendering/dates.py

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Dict, Optional

from genealogy_tree.i18n import month_name, normalize_language, translate


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

YEAR_ONLY = re.compile(r"^\d{4}$")
ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}(:\d{2})?)?$")


def _parse_iso_date(text: str) -> Optional[date]:
    if not ISO_DATE.fullmatch(text):
        return None
    try:
        if "T" in text:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    except ValueError:
        # e.g. 1990-02-30: shown verbatim
        return None


def format_long_date(value: date, language: str | None = "en") -> str:
    lang = normalize_language(language)
    month = month_name(value.month, lang)
    if lang == "fr":
        return f"{value.day} {month} {value.year}"
    if lang == "vi":
        return f"{value.day} {month}, {value.year}"
    return f"{month} {value.day}, {value.year}"


# ---------------------------------------------------------------------------
# Display policy
# ---------------------------------------------------------------------------

def format_date(value: Any, *, is_death: bool = False, language: str | None = "en") -> str:
    """
    Render a stored date value.

    - None               -> "unknown" (genuinely unknown)
    - ""  on a death date -> "living"
    - ""  anywhere else   -> "unknown"
    - "1980"             -> "1980"
    - ISO calendar date  -> long localized form
    - anything else      -> verbatim ("circa 1800")

    The empty-string case is keyed only on which field the value sits in.
    """
    if value is None:
        return translate("unknown", language)

    text = str(value).strip()
    if text == "":
        return translate("living" if is_death else "unknown", language)

    if YEAR_ONLY.fullmatch(text):
        return text

    parsed = _parse_iso_date(text)
    if parsed is not None:
        return format_long_date(parsed, language)

    return text


# ---------------------------------------------------------------------------
# Card label lines
# ---------------------------------------------------------------------------

def card_name_line(data: Dict[str, Any], language: str | None = "en") -> str:
    name = data.get("display_name") or " ".join(
        p for p in ((data.get("first_name") or "").strip(), (data.get("last_name") or "").strip()) if p
    )
    nicknames = data.get("nicknames") or []
    if name and nicknames:
        name += f" [{', '.join(nicknames)}]"
    return name or translate("unknown", language)


def card_dates_line(data: Dict[str, Any], language: str | None = "en") -> str:
    """``birth - death``, or just the birth value when death is empty/unknown."""
    birth = format_date(data.get("birth_date"), language=language)
    death_raw = data.get("death_date")

    if death_raw is None or death_raw == "":
        return birth

    death = format_date(death_raw, is_death=True, language=language)
    return f"{birth} - {death}"


__all__ = [
    "card_dates_line",
    "card_name_line",
    "format_date",
    "format_long_date",
]

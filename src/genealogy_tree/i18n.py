"""
Translation tables for the three supported display languages.

English is the default and the fallback for unknown languages. Lookups of
unknown keys return the key itself so a missing translation is visible
rather than fatal.
"""

from __future__ import annotations

from typing import Dict, List

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "appTitle": "Genealogy Tree",
        "loading": "Loading genealogy tree",
        # Data semantics
        "unknown": "Unknown",
        "none": "None",
        "notSpecified": "Not specified",
        "notApplicable": "Not applicable",
        "living": "Living",
        # Genealogy terms
        "father": "Father",
        "mother": "Mother",
        "spouse": "Spouse",
        "children": "Children",
        "siblings": "Siblings",
        "unionDate": "Union Date",
        "unionPlace": "Union Place",
        "birthDate": "Birth Date",
        "birthPlace": "Birth Place",
        "deathDate": "Death Date",
        "deathPlace": "Death Place",
        "biography": "Biography",
        # Errors
        "errorLoadingData": "Error loading genealogy data. Please try again later.",
        "noDataAvailable": "No genealogy data available.",
    },
    "fr": {
        "appTitle": "Arbre Généalogique",
        "loading": "Chargement de l'arbre généalogique",
        "unknown": "Inconnu",
        "none": "Aucun",
        "notSpecified": "Non précisé",
        "notApplicable": "Non applicable",
        "living": "En vie",
        "father": "Père",
        "mother": "Mère",
        "spouse": "Conjoint(e)",
        "children": "Enfants",
        "siblings": "Frères et sœurs",
        "unionDate": "Date d'union",
        "unionPlace": "Lieu d'union",
        "birthDate": "Date de naissance",
        "birthPlace": "Lieu de naissance",
        "deathDate": "Date de décès",
        "deathPlace": "Lieu de décès",
        "biography": "Biographie",
        "errorLoadingData": "Erreur lors du chargement des données généalogiques. Veuillez réessayer plus tard.",
        "noDataAvailable": "Aucune donnée généalogique disponible.",
    },
    "vi": {
        "appTitle": "Cây Gia Phả",
        "loading": "Đang tải cây gia phả",
        "unknown": "Không rõ",
        "none": "Không có",
        "notSpecified": "Chưa ghi",
        "notApplicable": "Không áp dụng",
        "living": "Còn sống",
        "father": "Cha",
        "mother": "Mẹ",
        "spouse": "Vợ/Chồng",
        "children": "Con cái",
        "siblings": "Anh chị em",
        "unionDate": "Ngày kết hôn",
        "unionPlace": "Nơi kết hôn",
        "birthDate": "Ngày sinh",
        "birthPlace": "Nơi sinh",
        "deathDate": "Ngày mất",
        "deathPlace": "Nơi mất",
        "biography": "Tiểu sử",
        "errorLoadingData": "Lỗi khi tải dữ liệu gia phả. Vui lòng thử lại sau.",
        "noDataAvailable": "Không có dữ liệu gia phả.",
    },
}

LOCALES = {
    "en": "en-US",
    "fr": "fr-FR",
    "vi": "vi-VN",
}

MONTH_NAMES: Dict[str, List[str]] = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "fr": [
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ],
    # Vietnamese months are numbered: "tháng 3"
    "vi": [f"tháng {i}" for i in range(1, 13)],
}


def normalize_language(language: str | None) -> str:
    if language in TRANSLATIONS:
        return language
    return DEFAULT_LANGUAGE


def translate(key: str, language: str | None = DEFAULT_LANGUAGE) -> str:
    return TRANSLATIONS[normalize_language(language)].get(key, key)


def locale_for(language: str | None) -> str:
    return LOCALES[normalize_language(language)]


def month_name(month: int, language: str | None = DEFAULT_LANGUAGE) -> str:
    return MONTH_NAMES[normalize_language(language)][month - 1]


__all__ = [
    "DEFAULT_LANGUAGE",
    "TRANSLATIONS",
    "locale_for",
    "month_name",
    "normalize_language",
    "translate",
]

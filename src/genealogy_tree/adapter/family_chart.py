"""
Family chart adapter.

Converts stored person records into the node format the family-chart
rendering engine consumes:

    {
      "id": "tran_ha_minh",
      "data": {"gender": "M", "display_name": ..., "birth_date": ..., ...},
      "rels": {"parents": [...], "spouses": [...], "children": [...]}
    }

Only father_id / mother_id / unions are stored. ``children`` is derived on
every call by inverting the parent references over the whole roster.

Two record generations are accepted:
  - current: ``names[]`` + ``events[]``
  - legacy:  flat ``display_name`` / ``first_name`` ... + ``birth`` / ``death``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from genealogy_tree.logging import get_logger
from genealogy_tree.records.entities import NameVariant, PersonRecord
from genealogy_tree.records.vocab import GENDERS
from genealogy_tree.validation.violations import Violation

log = get_logger("family_chart")


# ======================================================================
# NODE MODEL
# ======================================================================

@dataclass
class ChartRels:
    parents: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)


@dataclass
class ChartNode:
    """
    One derived graph node. Never persisted; rebuilt on every load.
    """
    id: str
    data: Dict[str, Any] = field(default_factory=dict)
    rels: ChartRels = field(default_factory=ChartRels)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "data": dict(self.data),
            "rels": {
                "parents": list(self.rels.parents),
                "spouses": list(self.rels.spouses),
                "children": list(self.rels.children),
            },
        }


@dataclass
class ChartBuild:
    """Adapter output plus the diagnostics gathered over the derived graph."""
    nodes: List[ChartNode]
    diagnostics: List[Violation] = field(default_factory=list)


# ======================================================================
# DISPLAY DATA
# ======================================================================

def _join_name(*parts: Optional[str]) -> str:
    return " ".join(p.strip() for p in parts if p and p.strip())


def _variant_display_name(name: NameVariant) -> str:
    if name.display_name:
        return name.display_name
    # Vietnamese names are written family name first.
    if name.type == "vietnamese":
        return _join_name(name.last_name, name.middle_name, name.first_name)
    return _join_name(name.first_name, name.middle_name, name.last_name)


def resolve_display_name(person: PersonRecord) -> str:
    current = person.current_name()
    if current is not None:
        return _variant_display_name(current)
    return person.display_name or ""


def resolve_vitals(person: PersonRecord) -> Dict[str, Optional[str]]:
    """
    Birth/death date and place.

    ``None`` means unknown. A death date of ``""`` means the person is
    living: legacy records store it that way, and events-schema records
    with vital_status ``living`` and no death event are given the same
    marker.
    """
    if person.events is None:
        birth, death = person.birth, person.death
        return {
            "birth_date": birth.date if birth else None,
            "birth_place": birth.place if birth else None,
            "death_date": death.date if death else None,
            "death_place": death.place if death else None,
        }

    birth_event = person.first_event("birth")
    death_event = person.first_event("death")

    if death_event is not None:
        death_date = death_event.date
    elif person.vital_status == "living":
        death_date = ""
    else:
        death_date = None

    return {
        "birth_date": birth_event.date if birth_event else None,
        "birth_place": birth_event.place if birth_event else None,
        "death_date": death_date,
        "death_place": death_event.place if death_event else None,
    }


def _name_parts(person: PersonRecord) -> Dict[str, str]:
    name = person.primary_name()
    if name is not None:
        return {
            "first_name": name.first_name or "",
            "middle_name": name.middle_name or "",
            "last_name": name.last_name or "",
        }
    return {
        "first_name": person.first_name or "",
        "middle_name": person.middle_name or "",
        "last_name": person.last_name or "",
    }


def build_display_data(person: PersonRecord) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "gender": person.gender or "U",
        "display_name": resolve_display_name(person),
        **_name_parts(person),
        "other_first_names": list(person.other_first_names),
        "nicknames": list(person.nicknames),
        **resolve_vitals(person),
        "vital_status": person.vital_status,
        "unions": [
            {
                "union_id": u.union_id,
                "spouse_id": u.spouse_id,
                "union_type": u.union_type,
                "order": u.order,
                "status": u.status,
                "end_reason": u.end_reason,
            }
            for u in person.unions
        ],
        "biography": person.biography or "",
        "sibling_order": person.sibling_order,
        "original_code": person.original_code,
    }
    return data


# ======================================================================
# GRAPH CONSTRUCTION
# ======================================================================

def build_children_index(roster: Sequence[PersonRecord]) -> Dict[str, List[str]]:
    """
    parent id -> child ids, in roster order. A person is listed once under
    its father and once under its mother.
    """
    children_by_parent: Dict[str, List[str]] = {}
    for person in roster:
        for parent_id in (person.father_id, person.mother_id):
            if parent_id:
                children_by_parent.setdefault(parent_id, []).append(person.id)
    return children_by_parent


def _unique_spouses(person: PersonRecord) -> List[str]:
    spouses: List[str] = []
    for union in person.unions:
        if union.spouse_id and union.spouse_id not in spouses:
            spouses.append(union.spouse_id)
    return spouses


def to_family_chart_data(roster: Sequence[PersonRecord]) -> List[ChartNode]:
    """
    Convert a roster into chart nodes. Deterministic and non-mutating: the
    same roster always yields structurally identical nodes.
    """
    if not roster:
        return []

    children_by_parent = build_children_index(roster)

    nodes: List[ChartNode] = []
    for person in roster:
        nodes.append(
            ChartNode(
                id=person.id,
                data=build_display_data(person),
                rels=ChartRels(
                    parents=[pid for pid in (person.father_id, person.mother_id) if pid],
                    spouses=_unique_spouses(person),
                    children=list(children_by_parent.get(person.id, [])),
                ),
            )
        )
    return nodes


# ======================================================================
# GRAPH VALIDATION
# ======================================================================

def validate_relationships(nodes: Sequence[ChartNode]) -> List[Violation]:
    """
    Check the derived graph: every referenced parent/spouse/child must be a
    node, and gender must be renderable. Catches dangling references that
    no single record check sees.
    """
    errors: List[Violation] = []
    id_set = {n.id for n in nodes}

    for node in nodes:
        for rel, label in (("parents", "parent"), ("spouses", "spouse"), ("children", "child")):
            for ref_id in getattr(node.rels, rel):
                if ref_id not in id_set:
                    errors.append(Violation(
                        f"rels.{rel}",
                        f"Person {node.id} references missing {label}: {ref_id}",
                        person_id=node.id,
                    ))

        gender = node.data.get("gender")
        if gender not in GENDERS:
            errors.append(Violation(
                "data.gender",
                f"Person {node.id} has invalid gender: {gender}",
                person_id=node.id,
            ))

    return errors


def build_family_chart(roster: Sequence[PersonRecord]) -> ChartBuild:
    """Adapt and validate in one step. Never raises on bad references."""
    nodes = to_family_chart_data(roster)
    diagnostics = validate_relationships(nodes)
    if diagnostics:
        log.debug("Derived graph has %d relationship diagnostics", len(diagnostics))
    return ChartBuild(nodes=nodes, diagnostics=diagnostics)


__all__ = [
    "ChartBuild",
    "ChartNode",
    "ChartRels",
    "build_children_index",
    "build_display_data",
    "build_family_chart",
    "resolve_display_name",
    "resolve_vitals",
    "to_family_chart_data",
    "validate_relationships",
]

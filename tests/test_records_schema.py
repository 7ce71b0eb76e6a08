# tests/test_records_schema.py

from __future__ import annotations

import pytest

from conftest import person_doc

from genealogy_tree.core.exceptions import RecordParseError
from genealogy_tree.records.schema import parse_person, parse_roster, person_to_dict


def test_events_schema_document():
    doc = person_doc("tran_minh", "Minh", "Trần", events=[{"type": "birth", "date": "1990"}])
    person = parse_person(doc, "tran_minh")

    assert person.id == "tran_minh"
    assert person.current_name().first_name == "Minh"
    assert person.first_event("birth").date == "1990"
    assert person.first_event("death") is None


def test_legacy_document_has_no_events():
    person = parse_person({"display_name": "Old Record", "birth": {"date": 1900}}, "old")
    assert person.events is None
    assert person.birth.date == "1900"
    assert person.names == []


def test_store_key_wins_over_embedded_id():
    person = parse_person({"id": "stale"}, "fresh")
    assert person.id == "fresh"


def test_empty_reference_reads_as_unknown():
    person = parse_person({"father_id": "", "mother_id": None}, "a")
    assert person.father_id is None
    assert person.mother_id is None


def test_semantically_bad_values_are_kept():
    person = parse_person({"gender": "X", "sibling_order": "two"}, "a")
    assert person.gender == "X"
    assert person.sibling_order == "two"


def test_structural_errors_raise():
    with pytest.raises(RecordParseError) as exc:
        parse_person({"names": "Minh"}, "a")
    assert exc.value.doc_id == "a"
    assert "names must be a list" in str(exc.value)

    with pytest.raises(RecordParseError):
        parse_person({"father_id": 42}, "a")

    with pytest.raises(RecordParseError):
        parse_person(["not", "a", "dict"], "a")


def test_parse_roster_keeps_store_order():
    docs = {"b": {}, "a": {}, "c": {}}
    assert [p.id for p in parse_roster(docs)] == ["b", "a", "c"]


def test_unknown_fields_survive_write_back():
    doc = person_doc(
        "a", "An", "Trần",
        photo_url="https://example.org/a.jpg",
        unions=[{"union_id": "u1", "spouse_id": "b", "notes": "kept"}],
    )
    out = person_to_dict(parse_person(doc, "a"))
    assert out["photo_url"] == "https://example.org/a.jpg"
    assert out["unions"][0]["notes"] == "kept"


def test_events_schema_write_back_has_no_legacy_fields():
    out = person_to_dict(parse_person(person_doc("a", "An", "Trần"), "a"))
    assert "birth" not in out
    assert "display_name" not in out
    assert out["events"] == []


def test_legacy_write_back_keeps_vitals():
    out = person_to_dict(parse_person({"death": {"date": "", "place": None}}, "a"))
    assert out["death"] == {"date": "", "place": None}
    assert "events" not in out

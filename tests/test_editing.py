# tests/test_editing.py

from __future__ import annotations

import json

import pytest

from conftest import person_doc, write_tree

from genealogy_tree.core.exceptions import (
    AuthorizationError,
    PersonNotFoundError,
    ValidationFailedError,
)
from genealogy_tree.editing import create_person, rename_person, save_person
from genealogy_tree.records.entities import NameVariant, PersonRecord
from genealogy_tree.records.schema import parse_person
from genealogy_tree.store.json_store import JsonTreeStore


def stored_people(data_dir):
    return json.loads((data_dir / "trees" / "main.json").read_text(encoding="utf-8"))["people"]


def draft(first, last, middle=None, **kwargs):
    return PersonRecord(
        id=kwargs.pop("id", ""),
        names=[NameVariant(first_name=first, middle_name=middle, last_name=last, type="vietnamese", is_current=True)],
        gender=kwargs.pop("gender", "M"),
        vital_status=kwargs.pop("vital_status", "unknown"),
        events=[],
        **kwargs,
    )


@pytest.fixture
def family(data_dir):
    write_tree(data_dir, {
        "tran_an": person_doc(
            "tran_an", "An", "Trần", gender="M",
            unions=[{"union_id": "u1", "spouse_id": "le_binh"}],
        ),
        "le_binh": person_doc(
            "le_binh", "Bình", "Lê", gender="F",
            unions=[{"union_id": "u1", "spouse_id": "tran_an"}],
        ),
        "tran_cuong": person_doc("tran_cuong", "Cường", "Trần", father_id="tran_an", mother_id="le_binh"),
        "nguyen_dao": person_doc("nguyen_dao", "Đào", "Nguyễn"),
    })
    return JsonTreeStore(data_dir)


# -----------------------------
# create
# -----------------------------

def test_create_generates_id(data_dir):
    store = JsonTreeStore(data_dir)
    person = create_person(store, draft("Minh", "Trần", "Hà"), "alice")

    assert person.id == "tran_ha_minh"
    assert "tran_ha_minh" in stored_people(data_dir)


def test_create_suffixes_colliding_id(family, data_dir):
    person = create_person(family, draft("An", "Trần"), "alice")
    assert person.id == "tran_an_2"


def test_create_blocked_by_violations(family, data_dir):
    bad = draft("Minh", "Trần", father_id="ghost")
    with pytest.raises(ValidationFailedError) as exc:
        create_person(family, bad, "alice")

    assert [v.field for v in exc.value.violations] == ["father_id"]
    assert "tran_minh" not in stored_people(data_dir)


def test_create_with_explicit_duplicate_id(family):
    with pytest.raises(ValidationFailedError):
        create_person(family, draft("Khác", "Người", id="tran_an"), "alice")


def test_create_requires_writer(data_dir):
    with pytest.raises(AuthorizationError):
        create_person(JsonTreeStore(data_dir), draft("Minh", "Trần"), "bob")


# -----------------------------
# save
# -----------------------------

def test_save_existing_person(family, data_dir):
    person = family.fetch_person("nguyen_dao")
    person.biography = "Teacher in Huế"
    save_person(family, person, "alice")

    assert stored_people(data_dir)["nguyen_dao"]["biography"] == "Teacher in Huế"


def test_save_unknown_person(family):
    with pytest.raises(PersonNotFoundError):
        save_person(family, parse_person(person_doc("ghost", "G", "Host"), "ghost"), "alice")


def test_save_rejects_cycle(family, data_dir):
    person = family.fetch_person("tran_an")
    person.father_id = "tran_cuong"

    with pytest.raises(ValidationFailedError) as exc:
        save_person(family, person, "alice")

    assert [v.field for v in exc.value.violations] == ["relationships"]
    assert stored_people(data_dir)["tran_an"]["father_id"] is None


# -----------------------------
# rename
# -----------------------------

def test_rename_rewrites_references(family, data_dir):
    renamed = rename_person(family, "tran_an", "alice", new_id="tran_van_an")
    people = stored_people(data_dir)

    assert renamed.id == "tran_van_an"
    assert "tran_an" not in people
    assert people["tran_van_an"]["names"][0]["first_name"] == "An"
    assert people["tran_cuong"]["father_id"] == "tran_van_an"
    assert people["le_binh"]["unions"][0]["spouse_id"] == "tran_van_an"
    # untouched record keeps its document
    assert people["nguyen_dao"]["father_id"] is None


def test_rename_regenerates_from_current_name(family, data_dir):
    family.update_person(
        "nguyen_dao",
        {"names": [{"first_name": "Đào", "middle_name": "Thị", "last_name": "Nguyễn", "type": "vietnamese", "is_current": True}]},
        "alice",
    )
    renamed = rename_person(family, "nguyen_dao", "alice")
    assert renamed.id == "nguyen_thi_dao"


def test_rename_to_same_id_is_a_no_op(family, data_dir):
    before = stored_people(data_dir)
    person = rename_person(family, "tran_an", "alice", new_id="tran_an")
    assert person.id == "tran_an"
    assert stored_people(data_dir) == before


def test_rename_to_taken_id(family, data_dir):
    with pytest.raises(ValidationFailedError):
        rename_person(family, "tran_an", "alice", new_id="le_binh")
    assert "tran_an" in stored_people(data_dir)


def test_rename_invalid_id(family):
    with pytest.raises(ValidationFailedError):
        rename_person(family, "tran_an", "alice", new_id="Tran An")


def test_rename_missing_person(family):
    with pytest.raises(PersonNotFoundError):
        rename_person(family, "ghost", "alice", new_id="ghost_2")


def test_rename_requires_writer(family, data_dir):
    with pytest.raises(AuthorizationError):
        rename_person(family, "tran_an", "bob", new_id="tran_van_an")
    assert "tran_an" in stored_people(data_dir)

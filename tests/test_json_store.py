# tests/test_json_store.py

from __future__ import annotations

import json

import pytest

from conftest import person_doc, write_tree

from genealogy_tree.core.exceptions import AuthorizationError, PersonNotFoundError, StoreError
from genealogy_tree.records.schema import parse_person
from genealogy_tree.store.json_store import JsonTreeStore


def stored_people(data_dir, tree_id="main"):
    return json.loads((data_dir / "trees" / f"{tree_id}.json").read_text(encoding="utf-8"))["people"]


def test_missing_tree_reads_as_empty(data_dir):
    store = JsonTreeStore(data_dir)
    assert store.fetch_people("nope") == []
    assert store.fetch_person("a") is None


def test_fetch_people_in_store_order(data_dir):
    write_tree(data_dir, {"b": person_doc("b", "B", "Bb"), "a": person_doc("a", "A", "Aa")})
    store = JsonTreeStore(data_dir)
    assert [p.id for p in store.fetch_people()] == ["b", "a"]
    assert store.fetch_person("a").current_name().first_name == "A"


def test_trees_are_separate(data_dir):
    write_tree(data_dir, {"a": person_doc("a", "A", "Aa")}, tree_id="other")
    store = JsonTreeStore(data_dir)
    assert store.fetch_people("main") == []
    assert [p.id for p in store.fetch_people("other")] == ["a"]


def test_roles(data_dir):
    store = JsonTreeStore(data_dir)
    assert store.is_writer("alice")
    assert not store.is_writer("bob")
    assert not store.is_writer("mallory")
    assert not store.is_writer(None)


def test_non_writer_cannot_save(data_dir):
    store = JsonTreeStore(data_dir)
    person = parse_person(person_doc("a", "A", "Aa"), "a")

    with pytest.raises(AuthorizationError):
        store.save_person(person, "bob")
    with pytest.raises(AuthorizationError):
        store.save_person(person, None)

    assert not store.tree_path("main").exists()


def test_save_merges_top_level_fields(data_dir):
    write_tree(data_dir, {"a": {**person_doc("a", "A", "Aa"), "photo_url": "x.jpg"}})
    store = JsonTreeStore(data_dir)

    person = parse_person(person_doc("a", "A", "Aa", gender="F"), "a")
    store.save_person(person, "alice")

    doc = stored_people(data_dir)["a"]
    assert doc["gender"] == "F"
    assert doc["photo_url"] == "x.jpg"


def test_save_without_merge_replaces(data_dir):
    write_tree(data_dir, {"a": {**person_doc("a", "A", "Aa"), "photo_url": "x.jpg"}})
    store = JsonTreeStore(data_dir)

    store.save_person(parse_person(person_doc("a", "A", "Aa"), "a"), "alice", merge=False)
    assert "photo_url" not in stored_people(data_dir)["a"]


def test_update_person(data_dir):
    write_tree(data_dir, {"a": person_doc("a", "A", "Aa")})
    store = JsonTreeStore(data_dir)

    store.update_person("a", {"biography": "Farmer"}, "alice")
    assert stored_people(data_dir)["a"]["biography"] == "Farmer"

    with pytest.raises(PersonNotFoundError):
        store.update_person("ghost", {"biography": "?"}, "alice")


def test_delete_person(data_dir):
    write_tree(data_dir, {"a": person_doc("a", "A", "Aa"), "b": person_doc("b", "B", "Bb")})
    store = JsonTreeStore(data_dir)

    store.delete_person("a", "alice")
    assert list(stored_people(data_dir)) == ["b"]

    with pytest.raises(AuthorizationError):
        store.delete_person("b", "bob")
    assert list(stored_people(data_dir)) == ["b"]


def test_apply_batch(data_dir):
    write_tree(data_dir, {"a": person_doc("a", "A", "Aa")})
    store = JsonTreeStore(data_dir)

    store.apply_batch({"b": person_doc("b", "B", "Bb")}, ["a"], "alice")
    assert list(stored_people(data_dir)) == ["b"]


def test_corrupt_tree_file(data_dir):
    (data_dir / "trees" / "main.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        JsonTreeStore(data_dir).fetch_people()


def test_people_must_be_an_object(data_dir):
    (data_dir / "trees" / "main.json").write_text('{"people": []}', encoding="utf-8")
    with pytest.raises(StoreError):
        JsonTreeStore(data_dir).fetch_people()

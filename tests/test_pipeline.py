# tests/test_pipeline.py

from __future__ import annotations

import pytest

from conftest import person_doc, write_tree

from genealogy_tree.core.context import ViewContext
from genealogy_tree.core.exceptions import TreeLoadError
from genealogy_tree.core.pipeline import TreePipeline
from genealogy_tree.rendering.renderers import FamilyChartPayloadRenderer
from genealogy_tree.store.json_store import JsonTreeStore


def test_empty_tree(data_dir):
    result = TreePipeline(JsonTreeStore(data_dir), ViewContext(), FamilyChartPayloadRenderer()).run()
    assert result.empty
    assert result.output is None


def test_bad_data_warns_but_still_renders(data_dir):
    write_tree(data_dir, {
        "a": person_doc("a", "An", "Trần", gender="X"),
        "b": person_doc("b", "Bình", "Lê", father_id="ghost"),
    })
    ctx = ViewContext(language="fr")
    result = TreePipeline(JsonTreeStore(data_dir), ctx, FamilyChartPayloadRenderer({"card_x_spacing": 250})).run()

    assert [n.id for n in result.nodes] == ["a", "b"]
    assert set(result.record_violations) == {"a", "b"}
    assert [d.field for d in result.graph_diagnostics] == ["data.gender", "rels.parents"]

    assert ctx.stats == {"people": 2, "records_with_violations": 2, "relationship_diagnostics": 2}
    assert len(ctx.warnings) == 4

    payload = result.output
    assert payload["language"] == "fr"
    assert payload["settings"] == {"card_x_spacing": 250}
    assert [n["id"] for n in payload["nodes"]] == ["a", "b"]
    assert payload["cards"]["a"] == ["An Trần", "Inconnu"]


def test_no_renderer(data_dir):
    write_tree(data_dir, {"a": person_doc("a", "An", "Trần")})
    result = TreePipeline(JsonTreeStore(data_dir), ViewContext()).run()
    assert not result.empty
    assert result.output is None


def test_store_failure_becomes_tree_load_error(data_dir):
    (data_dir / "trees" / "main.json").write_text("{broken", encoding="utf-8")
    with pytest.raises(TreeLoadError):
        TreePipeline(JsonTreeStore(data_dir), ViewContext()).run()


def test_unparseable_record_becomes_tree_load_error(data_dir):
    write_tree(data_dir, {"a": {"names": "not a list"}})
    with pytest.raises(TreeLoadError) as exc:
        TreePipeline(JsonTreeStore(data_dir), ViewContext()).run()
    assert "names must be a list" in str(exc.value)

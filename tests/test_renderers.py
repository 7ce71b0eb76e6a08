# tests/test_renderers.py

from __future__ import annotations

import io

from rich.console import Console

from genealogy_tree.adapter.family_chart import to_family_chart_data
from genealogy_tree.core.context import ViewContext
from genealogy_tree.records.entities import NameVariant, PersonRecord, UnionRecord, VitalRecord
from genealogy_tree.rendering.renderers import (
    ConsoleTreeRenderer,
    FamilyChartPayloadRenderer,
    card_lines,
    render_empty_state,
)


def _person(pid, first, last, **kwargs):
    return PersonRecord(
        id=pid,
        names=[NameVariant(first_name=first, last_name=last, is_current=True)],
        gender=kwargs.pop("gender", "U"),
        **kwargs,
    )


def _text(renderable) -> str:
    buf = io.StringIO()
    Console(file=buf, width=120, color_system=None).print(renderable)
    return buf.getvalue()


def test_card_lines_for_living_legacy_person():
    nodes = to_family_chart_data([
        PersonRecord(id="a", display_name="Nguyễn Hoa", nicknames=["Bé"],
                     birth=VitalRecord(date="1932"), death=VitalRecord(date="")),
    ])
    assert card_lines(nodes[0]) == ["Nguyễn Hoa [Bé]", "1932"]


def test_payload_nodes_keep_chart_shape():
    nodes = to_family_chart_data([_person("a", "An", "Trần")])
    payload = FamilyChartPayloadRenderer().render(nodes, ViewContext(language="vi"))

    assert payload["nodes"] == [nodes[0].to_dict()]
    assert payload["cards"] == {"a": ["An Trần", "Không rõ"]}
    assert payload["settings"] == {}
    assert payload["locale"] == "vi-VN"


def test_console_tree_nests_children_under_parents():
    roster = [
        _person("f", "An", "Tran", unions=[UnionRecord(union_id="u1", spouse_id="m")]),
        _person("m", "Binh", "Le", unions=[UnionRecord(union_id="u1", spouse_id="f")]),
        _person("c", "Cuong", "Tran", father_id="f", mother_id="m"),
    ]
    tree = ConsoleTreeRenderer().render(to_family_chart_data(roster), ViewContext())
    text = _text(tree)

    assert "Genealogy Tree" in text
    assert "An Tran" in text and "+ Binh Le" in text
    # c is reached through both roots but printed in full once
    assert text.count("Cuong Tran (Unknown)") == 1
    assert "↑ Cuong Tran" in text


def test_console_tree_from_root():
    roster = [
        _person("a", "An", "Tran"),
        _person("b", "Binh", "Tran", father_id="a"),
        _person("x", "Xuan", "Le"),
    ]
    text = _text(ConsoleTreeRenderer(root_id="b").render(to_family_chart_data(roster), ViewContext()))
    assert "Binh Tran" in text
    assert "An Tran" not in text
    assert "Xuan Le" not in text


def test_console_tree_escapes_markup():
    roster = [_person("a", "[bold]Eve", "Smith")]
    text = _text(ConsoleTreeRenderer().render(to_family_chart_data(roster), ViewContext()))
    assert "[bold]Eve Smith" in text


def test_empty_state_is_localized():
    assert "Aucune donnée" in _text(render_empty_state(ViewContext(language="fr")))


def test_console_tree_keeps_people_in_a_parent_cycle():
    roster = [
        _person("a", "Ann", "Lee", father_id="b"),
        _person("b", "Bob", "Lee", father_id="a"),
    ]
    text = _text(ConsoleTreeRenderer().render(to_family_chart_data(roster), ViewContext()))
    assert "Ann Lee (Unknown)" in text
    assert "Bob Lee (Unknown)" in text
    assert text.count("Ann Lee (Unknown)") == 1

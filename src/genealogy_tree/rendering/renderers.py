"""
Chart renderers.

The layout engine itself is external. Renderers here only hand it the
derived graph in the agreed shape (``FamilyChartPayloadRenderer``) or draw a
plain console view of it for the CLI (``ConsoleTreeRenderer``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Set

from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from genealogy_tree.adapter.family_chart import ChartNode
from genealogy_tree.core.context import ViewContext
from genealogy_tree.i18n import locale_for, translate
from genealogy_tree.rendering.dates import card_dates_line, card_name_line


class ChartRenderer(Protocol):
    def render(self, nodes: Sequence[ChartNode], context: ViewContext) -> Any:
        ...


def card_lines(node: ChartNode, language: str | None = "en") -> List[str]:
    return [card_name_line(node.data, language), card_dates_line(node.data, language)]


class FamilyChartPayloadRenderer:
    """
    Payload for the family-chart engine. ``nodes`` keep exactly the
    ``{id, data, rels}`` shape; card text and layout settings travel
    alongside them.
    """

    def __init__(self, chart_settings: Optional[Mapping[str, Any]] = None):
        self.settings = dict(chart_settings or {})

    def render(self, nodes: Sequence[ChartNode], context: ViewContext) -> Dict[str, Any]:
        return {
            "language": context.language,
            "locale": locale_for(context.language),
            "settings": dict(self.settings),
            "nodes": [node.to_dict() for node in nodes],
            "cards": {node.id: card_lines(node, context.language) for node in nodes},
        }


class ConsoleTreeRenderer:
    """
    Descendant tree for the terminal. Roots are people with no parent in
    the graph; people left unreached after that (a parent cycle) start
    their own branch. A person reached twice is printed once and then
    referenced.
    """

    def __init__(self, root_id: Optional[str] = None):
        self.root_id = root_id

    def render(self, nodes: Sequence[ChartNode], context: ViewContext) -> Tree:
        by_id = {n.id: n for n in nodes}
        title = translate("appTitle", context.language)
        tree = Tree(f"[bold]{title}[/bold]")

        if self.root_id is not None:
            roots = [by_id[self.root_id]] if self.root_id in by_id else []
        else:
            roots = [n for n in nodes if not any(p in by_id for p in n.rels.parents)]

        seen: Set[str] = set()
        for root in roots:
            self._add(tree, root, by_id, seen, context.language)

        # People in a parent cycle have no root above them.
        if self.root_id is None:
            for node in nodes:
                if node.id not in seen:
                    self._add(tree, node, by_id, seen, context.language)
        return tree

    def _label(self, node: ChartNode, by_id: Dict[str, ChartNode], language: str) -> str:
        name, dates = card_lines(node, language)
        label = f"{escape(name)} [dim]({escape(dates)})[/dim]"
        spouses = [escape(card_name_line(by_id[s].data, language)) for s in node.rels.spouses if s in by_id]
        if spouses:
            label += f" + {', '.join(spouses)}"
        return label

    def _add(self, parent: Tree, node: ChartNode, by_id: Dict[str, ChartNode], seen: Set[str], language: str) -> None:
        if node.id in seen:
            parent.add(f"[italic]↑ {escape(card_name_line(node.data, language))}[/italic]")
            return
        seen.add(node.id)

        branch = parent.add(self._label(node, by_id, language))
        for child_id in node.rels.children:
            child = by_id.get(child_id)
            if child is not None:
                self._add(branch, child, by_id, seen, language)


def render_empty_state(context: ViewContext) -> Panel:
    return Panel(translate("noDataAvailable", context.language), title=translate("appTitle", context.language))


__all__ = [
    "ChartRenderer",
    "ConsoleTreeRenderer",
    "FamilyChartPayloadRenderer",
    "card_lines",
    "render_empty_state",
]

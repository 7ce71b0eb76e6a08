from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from genealogy_tree.adapter.family_chart import ChartNode, build_family_chart
from genealogy_tree.core.context import ViewContext
from genealogy_tree.core.exceptions import TreeLoadError
from genealogy_tree.logging import get_logger
from genealogy_tree.rendering.renderers import ChartRenderer
from genealogy_tree.store.json_store import JsonTreeStore
from genealogy_tree.validation.person_validator import validate_roster
from genealogy_tree.validation.violations import Violation

log = get_logger("pipeline")


@dataclass
class TreeLoadResult:
    nodes: List[ChartNode] = field(default_factory=list)
    record_violations: Dict[str, List[Violation]] = field(default_factory=dict)
    graph_diagnostics: List[Violation] = field(default_factory=list)
    output: Any = None

    @property
    def empty(self) -> bool:
        return not self.nodes


class TreePipeline:
    """
    Orchestrates store -> records -> validation -> adapter -> renderer.
    No business logic lives here.

    Validation problems in stored data are logged as warnings and never
    stop rendering. Operational failures are raised as ``TreeLoadError``.
    """

    def __init__(self, store: JsonTreeStore, context: ViewContext, renderer: Optional[ChartRenderer] = None):
        self.store = store
        self.ctx = context
        self.renderer = renderer

    def run(self) -> TreeLoadResult:
        log.info("Loading tree %s", self.ctx.tree_id)

        try:
            roster = self.store.fetch_people(self.ctx.tree_id)
            if not roster:
                log.info("Tree %s has no people", self.ctx.tree_id)
                return TreeLoadResult()

            record_violations = validate_roster(roster)
            for violations in record_violations.values():
                for v in violations:
                    log.warning("Record validation: %s", v)

            build = build_family_chart(roster)
            for d in build.diagnostics:
                log.warning("Relationship validation: %s", d)

            self.ctx.stats.update(
                people=len(build.nodes),
                records_with_violations=len(record_violations),
                relationship_diagnostics=len(build.diagnostics),
            )
            self.ctx.warnings.extend(str(v) for vs in record_violations.values() for v in vs)
            self.ctx.warnings.extend(str(d) for d in build.diagnostics)

            output = self.renderer.render(build.nodes, self.ctx) if self.renderer else None

            log.info("Tree %s loaded: %d people", self.ctx.tree_id, len(build.nodes))
            return TreeLoadResult(
                nodes=build.nodes,
                record_violations=record_violations,
                graph_diagnostics=build.diagnostics,
                output=output,
            )

        except Exception as exc:
            log.exception("Loading tree %s failed", self.ctx.tree_id)
            raise TreeLoadError(str(exc)) from exc

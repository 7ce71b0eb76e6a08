"""
Date display policy and chart renderers.
"""

from genealogy_tree.rendering.dates import format_date
from genealogy_tree.rendering.renderers import (
    ChartRenderer,
    ConsoleTreeRenderer,
    FamilyChartPayloadRenderer,
    render_empty_state,
)

__all__ = [
    "ChartRenderer",
    "ConsoleTreeRenderer",
    "FamilyChartPayloadRenderer",
    "format_date",
    "render_empty_state",
]

"""
Adapters from person records to renderer input formats.
"""

from genealogy_tree.adapter.family_chart import (
    ChartBuild,
    ChartNode,
    build_family_chart,
    to_family_chart_data,
    validate_relationships,
)

__all__ = [
    "ChartBuild",
    "ChartNode",
    "build_family_chart",
    "to_family_chart_data",
    "validate_relationships",
]

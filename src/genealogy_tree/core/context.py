from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ViewContext:
    """
    Explicit rendering context.
    Passed to the pipeline and renderers instead of module-level state.
    """

    language: str = "en"
    user_id: Optional[str] = None
    tree_id: str = "main"

    stats: Dict[str, Any] = field(default_factory=dict)
    warnings: list = field(default_factory=list)

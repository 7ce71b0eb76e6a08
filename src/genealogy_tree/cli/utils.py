from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console

from genealogy_tree.config import get_config
from genealogy_tree.core.context import ViewContext
from genealogy_tree.i18n import normalize_language
from genealogy_tree.store.json_store import JsonTreeStore

console = Console()


def open_store(data_dir: Optional[Path] = None) -> JsonTreeStore:
    """
    Store rooted at ``data_dir`` or, by default, the configured data dir.
    """
    cfg = get_config()
    path = data_dir or Path(cfg.paths["data_dir"])
    return JsonTreeStore(path, writer_role=cfg.store["writer_role"])


def build_context(
    tree: Optional[str] = None,
    language: Optional[str] = None,
    user: Optional[str] = None,
) -> ViewContext:
    cfg = get_config()
    return ViewContext(
        language=normalize_language(language or cfg.display["language"]),
        user_id=user,
        tree_id=tree or cfg.store["default_tree_id"],
    )


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)

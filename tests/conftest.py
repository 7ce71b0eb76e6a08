import json
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


def person_doc(person_id, first, last, **fields):
    """Minimal valid events-schema document."""
    doc = {
        "id": person_id,
        "names": [{"first_name": first, "last_name": last, "type": "english", "is_current": True}],
        "gender": "U",
        "vital_status": "unknown",
        "events": [],
        "father_id": None,
        "mother_id": None,
        "unions": [],
    }
    doc.update(fields)
    return doc


@pytest.fixture
def data_dir(tmp_path):
    """Store directory with one admin and one viewer, and an empty main tree."""
    (tmp_path / "trees").mkdir()
    (tmp_path / "users.json").write_text(
        json.dumps({"alice": {"role": "admin"}, "bob": {"role": "viewer"}}),
        encoding="utf-8",
    )
    return tmp_path


def write_tree(data_dir, docs, tree_id="main"):
    path = Path(data_dir) / "trees" / f"{tree_id}.json"
    path.write_text(json.dumps({"people": docs}, ensure_ascii=False), encoding="utf-8")
    return path

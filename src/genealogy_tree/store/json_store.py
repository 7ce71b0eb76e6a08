"""
JSON-file document store.

Layout under ``data_dir``:

    trees/<tree_id>.json   {"people": {"<person id>": {...document...}}}
    users.json             {"<user id>": {"role": "admin"}}

Reads are public. Every write names the caller and is accepted only when
the caller's role in ``users.json`` is the writer role; otherwise the whole
write is rejected before anything touches disk. Files are replaced
atomically, so a batch either lands completely or not at all.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from genealogy_tree.core.exceptions import AuthorizationError, PersonNotFoundError, StoreError
from genealogy_tree.logging import get_logger
from genealogy_tree.records.entities import PersonRecord
from genealogy_tree.records.schema import parse_person, parse_roster, person_to_dict

log = get_logger("json_store")

DEFAULT_TREE_ID = "main"
USERS_FILE = "users.json"


class JsonTreeStore:
    def __init__(self, data_dir: Path | str, writer_role: str = "admin"):
        self.data_dir = Path(data_dir)
        self.writer_role = writer_role

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def tree_path(self, tree_id: str) -> Path:
        return self.data_dir / "trees" / f"{tree_id}.json"

    @staticmethod
    def _read_json(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            log.error("Error reading %s: %s", path, exc)
            raise StoreError(f"Cannot read {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise StoreError(f"{path} must contain a JSON object")
        return data

    @staticmethod
    def _write_json(path: Path, data: Mapping[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except OSError as exc:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log.error("Error writing %s: %s", path, exc)
            raise StoreError(f"Cannot write {path}: {exc}") from exc

    def _people(self, tree_id: str) -> Dict[str, Any]:
        people = self._read_json(self.tree_path(tree_id)).get("people", {})
        if not isinstance(people, dict):
            raise StoreError(f"'people' in tree {tree_id!r} must be an object")
        return people

    def _save_people(self, tree_id: str, people: Dict[str, Any]) -> None:
        path = self.tree_path(tree_id)
        data = self._read_json(path)
        data["people"] = people
        self._write_json(path, data)

    # ------------------------------------------------------------------
    # Authorization
    # ------------------------------------------------------------------

    def role_of(self, user_id: Optional[str]) -> Optional[str]:
        if not user_id:
            return None
        entry = self._read_json(self.data_dir / USERS_FILE).get(user_id)
        if isinstance(entry, dict):
            return entry.get("role")
        return None

    def is_writer(self, user_id: Optional[str]) -> bool:
        return self.role_of(user_id) == self.writer_role

    def _require_writer(self, user_id: Optional[str]) -> None:
        if not self.is_writer(user_id):
            log.warning("Rejected write by %r (role %r)", user_id, self.role_of(user_id))
            raise AuthorizationError(f"User {user_id!r} is not allowed to edit the tree")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_documents(self, tree_id: str = DEFAULT_TREE_ID) -> Dict[str, Any]:
        """Raw documents keyed by person id, in stored order."""
        return dict(self._people(tree_id))

    def fetch_people(self, tree_id: str = DEFAULT_TREE_ID) -> List[PersonRecord]:
        people = parse_roster(self._people(tree_id))
        log.info("Fetched %d people from tree %s", len(people), tree_id)
        return people

    def fetch_person(self, person_id: str, tree_id: str = DEFAULT_TREE_ID) -> Optional[PersonRecord]:
        doc = self._people(tree_id).get(person_id)
        if doc is None:
            return None
        return parse_person(doc, person_id)

    # ------------------------------------------------------------------
    # Writes (writer role only)
    # ------------------------------------------------------------------

    def save_person(
        self,
        person: PersonRecord,
        user_id: Optional[str],
        tree_id: str = DEFAULT_TREE_ID,
        merge: bool = True,
    ) -> None:
        """Create or update; with ``merge`` top-level fields are merged into the stored document."""
        self.apply_batch({person.id: person_to_dict(person)}, (), user_id, tree_id, merge=merge)

    def update_person(
        self,
        person_id: str,
        updates: Mapping[str, Any],
        user_id: Optional[str],
        tree_id: str = DEFAULT_TREE_ID,
    ) -> None:
        self._require_writer(user_id)
        people = self._people(tree_id)
        if person_id not in people:
            raise PersonNotFoundError(f"No person {person_id!r} in tree {tree_id!r}")
        self.apply_batch({person_id: dict(updates)}, (), user_id, tree_id, merge=True)

    def delete_person(self, person_id: str, user_id: Optional[str], tree_id: str = DEFAULT_TREE_ID) -> None:
        self.apply_batch({}, (person_id,), user_id, tree_id)

    def apply_batch(
        self,
        writes: Mapping[str, Mapping[str, Any]],
        deletes: Iterable[str],
        user_id: Optional[str],
        tree_id: str = DEFAULT_TREE_ID,
        merge: bool = True,
    ) -> None:
        """Write and delete several documents in one atomic file replace."""
        self._require_writer(user_id)
        deletes = tuple(deletes)
        people = self._people(tree_id)

        for person_id in deletes:
            people.pop(person_id, None)

        for person_id, doc in writes.items():
            existing = people.get(person_id)
            if merge and isinstance(existing, dict):
                people[person_id] = {**existing, **doc}
            else:
                people[person_id] = dict(doc)

        self._save_people(tree_id, people)
        log.info(
            "User %s wrote %d and deleted %d document(s) in tree %s",
            user_id, len(writes), len(deletes), tree_id,
        )


__all__ = [
    "DEFAULT_TREE_ID",
    "JsonTreeStore",
]

"""
Document store access.
"""

from genealogy_tree.store.json_store import DEFAULT_TREE_ID, JsonTreeStore

__all__ = [
    "DEFAULT_TREE_ID",
    "JsonTreeStore",
]

"""
Person identifier generation and reference rewriting.
"""

from genealogy_tree.identity.id_generator import (
    generate_id,
    generate_person_id,
    rewrite_references,
    slugify,
)

__all__ = [
    "generate_id",
    "generate_person_id",
    "rewrite_references",
    "slugify",
]

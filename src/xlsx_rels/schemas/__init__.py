"""
Schema modules for relationship records.

This package hosts lightweight dataclasses that define the contract between
the archive-reading layer and the typed relationship model.
"""

__all__ = [
    "rels_contract",
]

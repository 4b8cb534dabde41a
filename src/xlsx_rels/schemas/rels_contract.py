"""
Raw relationship record contract.

These dataclasses describe the row layout exchanged with the archive layer:
one row per ``<Relationship>`` element of a ``.rels`` part, all fields kept as
the plain strings found in the document. Keeping them centralized lets the XML
reader and the typed model share a single source of truth for the field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

# Attribute names as they appear on a <Relationship> element.
ATTR_ID = "Id"
ATTR_TYPE = "Type"
ATTR_TARGET = "Target"
ATTR_TARGET_MODE = "TargetMode"


@dataclass(frozen=True)
class RelationshipRow:
    """Row read for each relationship element, in document order."""

    id: str
    type: str
    target: str
    target_mode: Optional[str] = None


REQUIRED_ATTRIBUTES: Sequence[str] = (ATTR_ID, ATTR_TYPE, ATTR_TARGET)

__all__ = [
    "ATTR_ID",
    "ATTR_TYPE",
    "ATTR_TARGET",
    "ATTR_TARGET_MODE",
    "RelationshipRow",
    "REQUIRED_ATTRIBUTES",
]

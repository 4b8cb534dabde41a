"""
Read and write ``.rels`` parts.

Only the XML shape is handled here: one ``<Relationship Id Type Target
[TargetMode]>`` element per row, in document order. Classification of the
Type URI happens in ``xlsx_rels.core``.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from xlsx_rels.constants import (
    RELS_ELEMENT_NAME,
    RELS_ELEMENT_TAG,
    RELS_NAMESPACE,
    RELS_ROOT_NAME,
    RELS_ROOT_TAG,
)
from xlsx_rels.core.catalog import SchemaCatalog
from xlsx_rels.core.relationships import Relationships
from xlsx_rels.schemas.rels_contract import (
    ATTR_ID,
    ATTR_TARGET,
    ATTR_TARGET_MODE,
    ATTR_TYPE,
    REQUIRED_ATTRIBUTES,
    RelationshipRow,
)

logger = logging.getLogger(__name__)


class RelsParseError(ValueError):
    """Raised when a .rels part is not well-formed or misses required attributes."""


def parse_rels_xml(xml_bytes: bytes) -> List[RelationshipRow]:
    """
    Parse a .rels part into raw rows.

    Args:
        xml_bytes: Content of the part.

    Returns:
        One RelationshipRow per Relationship element, in document order.

    Raises:
        RelsParseError: On malformed XML or a missing Id/Type/Target.
    """
    try:
        root = ET.fromstring(xml_bytes)
    except ET.ParseError as exc:
        raise RelsParseError(f"Malformed relationships XML: {exc}") from exc

    if root.tag != RELS_ROOT_TAG:
        raise RelsParseError(f"Unexpected root element {root.tag}, expected {RELS_ROOT_TAG}")

    rows: List[RelationshipRow] = []
    for position, element in enumerate(root.findall(RELS_ELEMENT_TAG)):
        missing = [name for name in REQUIRED_ATTRIBUTES if element.get(name) is None]
        if missing:
            raise RelsParseError(
                f"Relationship #{position} missing required attributes: {missing}"
            )
        rows.append(RelationshipRow(
            id=element.get(ATTR_ID),
            type=element.get(ATTR_TYPE),
            target=element.get(ATTR_TARGET),
            target_mode=element.get(ATTR_TARGET_MODE),
        ))

    logger.debug(f"Parsed {len(rows)} relationship rows")
    return rows


def write_rels_xml(rows: Iterable[RelationshipRow]) -> bytes:
    """Serialize rows to a UTF-8 .rels part, preserving order."""
    # Unqualified names with an explicit xmlns: the default-namespace form Office writes.
    root = ET.Element(RELS_ROOT_NAME, xmlns=RELS_NAMESPACE)
    count = 0
    for row in rows:
        element = ET.SubElement(root, RELS_ELEMENT_NAME)
        element.set(ATTR_ID, row.id)
        element.set(ATTR_TYPE, row.type)
        element.set(ATTR_TARGET, row.target)
        if row.target_mode is not None:
            element.set(ATTR_TARGET_MODE, row.target_mode)
        count += 1

    logger.debug(f"Wrote {count} relationship rows")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def load_relationships(xml_bytes: bytes, catalog: Optional[SchemaCatalog] = None) -> Relationships:
    """Parse a .rels part straight into typed Relationships."""
    return Relationships.from_rows(parse_rels_xml(xml_bytes), catalog=catalog)


def dump_relationships(relationships: Relationships, catalog: Optional[SchemaCatalog] = None) -> bytes:
    return write_rels_xml(relationships.to_rows(catalog=catalog))


__all__ = [
    "RelsParseError",
    "parse_rels_xml",
    "write_rels_xml",
    "load_relationships",
    "dump_relationships",
]

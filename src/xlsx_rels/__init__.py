"""
xlsx_rels: typed model and codec for OOXML relationship manifests.

Usage:
    from xlsx_rels import load_relationships

    rels = load_relationships(xml_bytes)
    sheets = [rel.resolve_path("xl") for rel in rels if rel.type.is_worksheet_related()]
"""

from xlsx_rels.core import (
    SchemaTag,
    SchemaType,
    CatalogInconsistency,
    SchemaCatalog,
    get_catalog,
    Relationship,
    Relationships,
)
from xlsx_rels.schemas.rels_contract import RelationshipRow
from xlsx_rels.utils import (
    RelsParseError,
    parse_rels_xml,
    write_rels_xml,
    load_relationships,
    dump_relationships,
)

__version__ = "0.1.0"

__all__ = [
    "SchemaTag",
    "SchemaType",
    "CatalogInconsistency",
    "SchemaCatalog",
    "get_catalog",
    "Relationship",
    "Relationships",
    "RelationshipRow",
    "RelsParseError",
    "parse_rels_xml",
    "write_rels_xml",
    "load_relationships",
    "dump_relationships",
]

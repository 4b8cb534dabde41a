"""
Typed relationship model.

Layers:
    SchemaCatalog:  uri <-> SchemaTag, built once
                        ↓
    SchemaType:     known tag or unknown(uri)
                        ↓
    Relationship:   id + type + target
                        ↓
    Relationships:  ordered entries of one .rels part

Usage:
    from xlsx_rels.core import Relationships, get_catalog
"""

from xlsx_rels.core.schema_type import (
    SchemaTag,
    SchemaType,
    WORKSHEET_TAGS,
    MODERN_OFFICE_TAGS,
)
from xlsx_rels.core.catalog import (
    KNOWN_SCHEMAS,
    CatalogInconsistency,
    SchemaCatalog,
    get_catalog,
)
from xlsx_rels.core.relationship import Relationship
from xlsx_rels.core.relationships import RELATIONSHIP_COLUMNS, Relationships

__all__ = [
    "SchemaTag",
    "SchemaType",
    "WORKSHEET_TAGS",
    "MODERN_OFFICE_TAGS",
    "KNOWN_SCHEMAS",
    "CatalogInconsistency",
    "SchemaCatalog",
    "get_catalog",
    "Relationship",
    "RELATIONSHIP_COLUMNS",
    "Relationships",
]

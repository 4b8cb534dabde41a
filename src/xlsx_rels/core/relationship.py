"""
Typed relationship entries.

A Relationship links an identifier (``rId1``) to a target part inside the
archive. Most callers only need ``resolve_path`` to locate worksheets and
chartsheets; everything else is carried through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from xlsx_rels.constants import PATH_SEPARATOR
from xlsx_rels.core.catalog import SchemaCatalog, get_catalog
from xlsx_rels.core.schema_type import SchemaType
from xlsx_rels.schemas.rels_contract import RelationshipRow


@dataclass(frozen=True)
class Relationship:
    """
    Relationship to an entity stored in an ``.xlsx`` archive.

    Attributes:
        id: Identifier of the entry, unique within its .rels part (not verified).
        type: Semantic type resolved from the Type URI.
        target: Path of the target, relative to the source part unless it
            starts with "/".
        target_mode: Raw TargetMode attribute ("External" for hyperlinks),
            carried for lossless re-encoding.
    """
    id: str
    type: SchemaType
    target: str
    target_mode: Optional[str] = None

    @classmethod
    def from_fields(
        cls,
        id: str,
        type_uri: str,
        target: str,
        target_mode: Optional[str] = None,
        catalog: Optional[SchemaCatalog] = None,
    ) -> "Relationship":
        """Decode raw attribute values, classifying the Type URI."""
        catalog = catalog if catalog is not None else get_catalog()
        return cls(
            id=id,
            type=catalog.resolve(type_uri),
            target=target,
            target_mode=target_mode,
        )

    @classmethod
    def from_row(cls, row: RelationshipRow, catalog: Optional[SchemaCatalog] = None) -> "Relationship":
        return cls.from_fields(row.id, row.type, row.target, row.target_mode, catalog=catalog)

    def to_row(self, catalog: Optional[SchemaCatalog] = None) -> RelationshipRow:
        """Encode back to raw form, re-deriving the Type URI from the catalog."""
        catalog = catalog if catalog is not None else get_catalog()
        return RelationshipRow(
            id=self.id,
            type=catalog.canonical_uri(self.type),
            target=self.target,
            target_mode=self.target_mode,
        )

    def resolve_path(self, root: str) -> str:
        """
        Archive-internal path of the target.

        Root-anchored targets ("/xl/sheet1.xml") are returned as is; relative
        ones are joined to ``root`` with a single separator. ".." segments are
        left for the archive layer.

        Example:
            >>> rel.target
            'worksheets/sheet1.xml'
            >>> rel.resolve_path("xl")
            'xl/worksheets/sheet1.xml'
        """
        if self.target.startswith(PATH_SEPARATOR):
            return self.target
        return f"{root}{PATH_SEPARATOR}{self.target}"

    def to_dict(self, catalog: Optional[SchemaCatalog] = None) -> Dict[str, object]:
        """Flat representation for DataFrame construction."""
        catalog = catalog if catalog is not None else get_catalog()
        return {
            "id": self.id,
            "type": self.type.name,
            "type_uri": catalog.canonical_uri(self.type),
            "target": self.target,
            "target_mode": self.target_mode,
            "is_known": self.type.is_known(),
        }


__all__ = [
    "Relationship",
]

"""
Ordered collection of relationships from one .rels part.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from xlsx_rels.core.catalog import SchemaCatalog, get_catalog
from xlsx_rels.core.relationship import Relationship
from xlsx_rels.schemas.rels_contract import RelationshipRow

logger = logging.getLogger(__name__)

RELATIONSHIP_COLUMNS = ["id", "type", "type_uri", "target", "target_mode", "is_known"]


@dataclass(frozen=True)
class Relationships:
    """Relationships in document order. No deduplication."""
    items: Tuple[Relationship, ...] = ()

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[RelationshipRow],
        catalog: Optional[SchemaCatalog] = None,
    ) -> "Relationships":
        catalog = catalog if catalog is not None else get_catalog()
        items = tuple(Relationship.from_row(row, catalog=catalog) for row in rows)
        unknown_count = sum(1 for item in items if not item.type.is_known())
        logger.debug(f"Decoded {len(items)} relationships ({unknown_count} unknown types)")
        return cls(items=items)

    def to_rows(self, catalog: Optional[SchemaCatalog] = None) -> List[RelationshipRow]:
        catalog = catalog if catalog is not None else get_catalog()
        return [item.to_row(catalog=catalog) for item in self.items]

    def to_dataframe(self, catalog: Optional[SchemaCatalog] = None) -> pd.DataFrame:
        """One row per relationship, in order."""
        catalog = catalog if catalog is not None else get_catalog()
        records = [item.to_dict(catalog=catalog) for item in self.items]
        return pd.DataFrame(records, columns=RELATIONSHIP_COLUMNS)

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: Union[int, slice]) -> Union[Relationship, "Relationships"]:
        if isinstance(index, slice):
            return Relationships(items=self.items[index])
        return self.items[index]


__all__ = [
    "RELATIONSHIP_COLUMNS",
    "Relationships",
]

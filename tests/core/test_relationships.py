from __future__ import annotations

from xlsx_rels.core.relationships import RELATIONSHIP_COLUMNS, Relationships
from xlsx_rels.core.schema_type import SchemaTag
from xlsx_rels.schemas.rels_contract import RelationshipRow

WORKSHEET_URI = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet"
CUSTOM_URI = "http://customschemas.contoso.com/foo"

ROWS = [
    RelationshipRow("rId1", WORKSHEET_URI, "worksheets/sheet1.xml"),
    RelationshipRow("rId2", CUSTOM_URI, "../media/image1.png"),
]


def test_decoding_preserves_order_and_types():
    rels = Relationships.from_rows(ROWS)
    assert len(rels) == 2
    assert [rel.id for rel in rels] == ["rId1", "rId2"]

    assert rels[0].type.tag is SchemaTag.WORKSHEET
    assert rels[0].type.is_worksheet_related() is True
    assert rels[1].type.is_known() is False
    assert rels[1].type.unknown_schema() == CUSTOM_URI


def test_reencoding_reproduces_original_rows():
    rels = Relationships.from_rows(ROWS)
    assert rels.to_rows() == ROWS


def test_duplicates_are_kept():
    rows = ROWS + ROWS
    rels = Relationships.from_rows(rows)
    assert len(rels) == 4
    assert rels.to_rows() == rows


def test_empty_input():
    rels = Relationships.from_rows([])
    assert len(rels) == 0
    assert rels.to_rows() == []
    assert list(rels.to_dataframe().columns) == RELATIONSHIP_COLUMNS


def test_dataframe_has_one_row_per_item_in_order():
    df = Relationships.from_rows(ROWS).to_dataframe()
    assert list(df.columns) == RELATIONSHIP_COLUMNS
    assert df["id"].tolist() == ["rId1", "rId2"]
    assert df["type"].tolist() == ["worksheet", CUSTOM_URI]
    assert df["type_uri"].tolist() == [WORKSHEET_URI, CUSTOM_URI]
    assert df["is_known"].tolist() == [True, False]


def test_slicing_returns_relationships():
    rels = Relationships.from_rows(ROWS)
    tail = rels[1:]
    assert isinstance(tail, Relationships)
    assert [rel.id for rel in tail] == ["rId2"]
    assert tail.to_rows() == ROWS[1:]
    assert rels[-1].id == "rId2"

from __future__ import annotations

import pytest

from xlsx_rels.core.catalog import SchemaCatalog
from xlsx_rels.core.relationship import Relationship
from xlsx_rels.core.schema_type import SchemaTag, SchemaType
from xlsx_rels.schemas.rels_contract import RelationshipRow

WORKSHEET_URI = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet"


def _rel(target: str) -> Relationship:
    return Relationship.from_fields("rId1", WORKSHEET_URI, target)


def test_resolve_relative_target_joins_root():
    assert _rel("sheet1.xml").resolve_path("xl/worksheets") == "xl/worksheets/sheet1.xml"


def test_resolve_absolute_target_is_unchanged():
    assert _rel("/xl/sheet1.xml").resolve_path("xl/worksheets") == "/xl/sheet1.xml"


def test_resolve_keeps_parent_segments():
    assert _rel("../media/image1.png").resolve_path("xl/drawings") == "xl/drawings/../media/image1.png"


def test_from_row_classifies_type():
    rel = Relationship.from_row(RelationshipRow("rId3", WORKSHEET_URI, "worksheets/sheet1.xml"))
    assert rel.id == "rId3"
    assert rel.type == SchemaType.known(SchemaTag.WORKSHEET)
    assert rel.target == "worksheets/sheet1.xml"
    assert rel.target_mode is None


def test_to_row_restores_raw_fields():
    row = RelationshipRow("rId9", "http://example.com/hyperlink", "https://example.com", "External")
    rel = Relationship.from_row(row)
    assert rel.type.is_known() is False
    assert rel.to_row() == row


def test_custom_catalog_is_used_both_ways():
    catalog = SchemaCatalog([("urn:theme", SchemaTag.THEME)])
    rel = Relationship.from_fields("rId1", "urn:theme", "theme/theme1.xml", catalog=catalog)
    assert rel.type.tag is SchemaTag.THEME
    assert rel.to_row(catalog=catalog).type == "urn:theme"


def test_to_dict_renders_tag_name():
    data = _rel("worksheets/sheet1.xml").to_dict()
    assert data["type"] == "worksheet"
    assert data["type_uri"] == WORKSHEET_URI
    assert data["is_known"] is True


def test_relationship_is_immutable():
    rel = _rel("sheet1.xml")
    with pytest.raises(AttributeError):
        rel.target = "other.xml"

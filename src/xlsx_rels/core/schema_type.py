"""
Relationship schema types.

A relationship's ``Type`` attribute is an open-ended URI. The ones this
package knows about are classified into ``SchemaTag`` values; anything else is
kept verbatim in an unknown ``SchemaType`` so newer files decode and re-encode
without loss.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from xlsx_rels.constants import MODERN_OFFICE_MARKER


# =============================================================================
# KNOWN TAGS
# =============================================================================

class SchemaTag(Enum):
    """Relationship types registered in the schema catalog."""
    CALC_CHAIN = "calcChain"
    OFFICE_DOCUMENT = "officeDocument"
    EXTENDED_PROPERTIES = "extendedProperties"
    PACKAGE_CORE_PROPERTIES = "packageCoreProperties"
    CORE_PROPERTIES = "coreProperties"
    CONNECTIONS = "connections"
    WORKSHEET = "worksheet"
    CHARTSHEET = "chartsheet"
    SHARED_STRINGS = "sharedStrings"
    STYLES = "styles"
    THEME = "theme"
    PIVOT_CACHE = "pivotCache"
    METADATA_THUMBNAIL = "metadataThumbnail"
    CUSTOM_PROPERTIES = "customProperties"
    EXTERNAL_LINK = "externalLink"
    CUSTOM_XML = "customXml"
    PERSON = "person"                                 # Threaded comments (2017)
    WEB_EXTENSION_TASK_PANES = "webExtensionTaskPanes"
    GOOGLE_WORKBOOK_METADATA = "googleWorkbookMetadata"  # Google Sheets exports
    PURL_OCLC = "purlOCLC"                            # Strict OOXML properties
    CLASSIFICATION_LABELS = "classificationLabels"    # Sensitivity labels
    RICH_DATA_STRUCTURE = "richDataStructure"
    RICH_DATA_TYPES = "richDataTypes"
    RICH_DATA_WEB_IMAGE = "richDataWebImage"


WORKSHEET_TAGS: FrozenSet[SchemaTag] = frozenset({
    SchemaTag.WORKSHEET,
    SchemaTag.CHARTSHEET,
})

MODERN_OFFICE_TAGS: FrozenSet[SchemaTag] = frozenset({
    SchemaTag.CLASSIFICATION_LABELS,
    SchemaTag.RICH_DATA_STRUCTURE,
    SchemaTag.RICH_DATA_TYPES,
    SchemaTag.RICH_DATA_WEB_IMAGE,
    SchemaTag.PERSON,
})


# =============================================================================
# SCHEMA TYPE
# =============================================================================

@dataclass(frozen=True)
class SchemaType:
    """
    Semantic type of a relationship target.

    Exactly one of the two fields is set:
        tag: The known tag, for URIs registered in the catalog.
        unknown_uri: The original URI, for anything the catalog does not know.

    Use ``SchemaType.known`` / ``SchemaType.unknown`` rather than the raw
    constructor. Two values are equal iff they carry the same tag, or both are
    unknown with the identical URI.
    """
    tag: Optional[SchemaTag] = None
    unknown_uri: Optional[str] = None

    def __post_init__(self):
        if (self.tag is None) == (self.unknown_uri is None):
            raise ValueError("SchemaType needs exactly one of tag or unknown_uri")
        if self.tag is not None and not isinstance(self.tag, SchemaTag):
            raise ValueError(f"Not a SchemaTag: {self.tag!r}")

    @classmethod
    def known(cls, tag: SchemaTag) -> "SchemaType":
        return cls(tag=tag)

    @classmethod
    def unknown(cls, uri: str) -> "SchemaType":
        return cls(unknown_uri=uri)

    @property
    def name(self) -> str:
        """Tag name for known types, the literal URI otherwise."""
        if self.tag is not None:
            return self.tag.value
        return self.unknown_uri

    def is_known(self) -> bool:
        return self.tag is not None

    def unknown_schema(self) -> Optional[str]:
        """The wrapped URI if this type is unknown, else None."""
        return self.unknown_uri

    def is_worksheet_related(self) -> bool:
        return self.tag in WORKSHEET_TAGS

    def is_modern_office_feature(self) -> bool:
        """
        True for Office 365 era features.

        Known: classification labels, rich data parts and persons.
        Unknown: any URI under a dated ``schemas.microsoft.com/office/20..`` path.
        """
        if self.tag is not None:
            return self.tag in MODERN_OFFICE_TAGS
        return MODERN_OFFICE_MARKER in self.unknown_uri

    def __repr__(self) -> str:
        if self.tag is not None:
            return f"SchemaType({self.tag.name})"
        return f"SchemaType.unknown({self.unknown_uri!r})"


__all__ = [
    "SchemaTag",
    "SchemaType",
    "WORKSHEET_TAGS",
    "MODERN_OFFICE_TAGS",
]

"""
Schema catalog: known relationship type URIs <-> SchemaTag.

The catalog is the compatibility contract with the file format. Adding a tag
means adding exactly one (uri, tag) pair to KNOWN_SCHEMAS; removing one makes
previously classified relationships decode as unknown.

The default catalog is built once at import and exposed read-only through
``get_catalog()``.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from xlsx_rels.constants import MICROSOFT_OFFICE, OFFICE_DOCUMENT_RELS, PACKAGE_RELS
from xlsx_rels.core.schema_type import SchemaTag, SchemaType

logger = logging.getLogger(__name__)


# =============================================================================
# CATALOG DATA
# =============================================================================

KNOWN_SCHEMAS: Tuple[Tuple[str, SchemaTag], ...] = (
    (f"{OFFICE_DOCUMENT_RELS}/calcChain", SchemaTag.CALC_CHAIN),
    (f"{OFFICE_DOCUMENT_RELS}/officeDocument", SchemaTag.OFFICE_DOCUMENT),
    (f"{OFFICE_DOCUMENT_RELS}/extended-properties", SchemaTag.EXTENDED_PROPERTIES),
    (f"{PACKAGE_RELS}/metadata/core-properties", SchemaTag.PACKAGE_CORE_PROPERTIES),
    (f"{OFFICE_DOCUMENT_RELS}/metadata/core-properties", SchemaTag.CORE_PROPERTIES),
    (f"{OFFICE_DOCUMENT_RELS}/connections", SchemaTag.CONNECTIONS),
    (f"{OFFICE_DOCUMENT_RELS}/worksheet", SchemaTag.WORKSHEET),
    (f"{OFFICE_DOCUMENT_RELS}/chartsheet", SchemaTag.CHARTSHEET),
    (f"{OFFICE_DOCUMENT_RELS}/sharedStrings", SchemaTag.SHARED_STRINGS),
    (f"{OFFICE_DOCUMENT_RELS}/styles", SchemaTag.STYLES),
    (f"{OFFICE_DOCUMENT_RELS}/theme", SchemaTag.THEME),
    (f"{OFFICE_DOCUMENT_RELS}/pivotCacheDefinition", SchemaTag.PIVOT_CACHE),
    (f"{PACKAGE_RELS}/metadata/thumbnail", SchemaTag.METADATA_THUMBNAIL),
    (f"{OFFICE_DOCUMENT_RELS}/custom-properties", SchemaTag.CUSTOM_PROPERTIES),
    (f"{OFFICE_DOCUMENT_RELS}/externalLink", SchemaTag.EXTERNAL_LINK),
    (f"{OFFICE_DOCUMENT_RELS}/customXml", SchemaTag.CUSTOM_XML),
    (f"{MICROSOFT_OFFICE}/2017/10/relationships/person", SchemaTag.PERSON),
    (f"{MICROSOFT_OFFICE}/2011/relationships/webextensiontaskpanes", SchemaTag.WEB_EXTENSION_TASK_PANES),
    ("http://customschemas.google.com/relationships/workbookmetadata", SchemaTag.GOOGLE_WORKBOOK_METADATA),
    ("http://purl.oclc.org/ooxml/officeDocument/relationships/extendedProperties", SchemaTag.PURL_OCLC),
    (f"{MICROSOFT_OFFICE}/2020/02/relationships/classificationlabels", SchemaTag.CLASSIFICATION_LABELS),
    (f"{MICROSOFT_OFFICE}/2017/06/relationships/rdRichValueStructure", SchemaTag.RICH_DATA_STRUCTURE),
    (f"{MICROSOFT_OFFICE}/2017/06/relationships/rdRichValue", SchemaTag.RICH_DATA_TYPES),
    (f"{MICROSOFT_OFFICE}/2017/06/relationships/rdRichValueWebImage", SchemaTag.RICH_DATA_WEB_IMAGE),
)


# =============================================================================
# CATALOG
# =============================================================================

class CatalogInconsistency(RuntimeError):
    """Raised when the catalog tables do not form a bijection."""


class SchemaCatalog:
    """
    Bidirectional table between schema URIs and known tags.

    Enforces:
    - One URI per tag and one tag per URI (checked at construction)
    - Exact, case-sensitive URI matching
    - No mutation after construction
    """

    def __init__(self, entries: Iterable[Tuple[str, SchemaTag]]):
        uri_to_tag: Dict[str, SchemaTag] = {}
        tag_to_uri: Dict[SchemaTag, str] = {}

        for uri, tag in entries:
            if uri in uri_to_tag:
                raise CatalogInconsistency(
                    f"URI '{uri}' registered for both {uri_to_tag[uri].name} and {tag.name}"
                )
            if tag in tag_to_uri:
                raise CatalogInconsistency(
                    f"Tag {tag.name} registered for both '{tag_to_uri[tag]}' and '{uri}'"
                )
            uri_to_tag[uri] = tag
            tag_to_uri[tag] = uri

        self._uri_to_tag: Mapping[str, SchemaTag] = MappingProxyType(uri_to_tag)
        self._tag_to_uri: Mapping[SchemaTag, str] = MappingProxyType(tag_to_uri)

    def resolve(self, uri: str) -> SchemaType:
        """Classify a type URI. Never fails: unregistered URIs come back unknown."""
        tag = self._uri_to_tag.get(uri)
        if tag is None:
            return SchemaType.unknown(uri)
        return SchemaType.known(tag)

    def canonical_uri(self, schema_type: SchemaType) -> str:
        """
        URI to write back for a schema type.

        Raises:
            CatalogInconsistency: If a known tag has no registered URI.
        """
        if not schema_type.is_known():
            return schema_type.unknown_schema()
        uri = self._tag_to_uri.get(schema_type.tag)
        if uri is None:
            raise CatalogInconsistency(f"No URI registered for tag {schema_type.tag.name}")
        return uri

    def uris(self) -> List[str]:
        """All registered URIs, in registration order."""
        return list(self._uri_to_tag.keys())

    def tags(self) -> List[SchemaTag]:
        """All registered tags, in registration order."""
        return list(self._tag_to_uri.keys())

    def __contains__(self, uri: object) -> bool:
        return uri in self._uri_to_tag

    def __len__(self) -> int:
        return len(self._uri_to_tag)

    def __repr__(self) -> str:
        return f"SchemaCatalog({len(self)} entries)"


# Built at import; the import lock keeps concurrent first importers from racing.
_DEFAULT_CATALOG = SchemaCatalog(KNOWN_SCHEMAS)
logger.debug(f"Schema catalog built with {len(_DEFAULT_CATALOG)} known types")


def get_catalog() -> SchemaCatalog:
    """Return the process-wide default catalog."""
    return _DEFAULT_CATALOG


__all__ = [
    "KNOWN_SCHEMAS",
    "CatalogInconsistency",
    "SchemaCatalog",
    "get_catalog",
]

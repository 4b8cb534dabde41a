"""
Shared constants across xlsx_rels modules.

This module is the single source of truth for:
- Schema URI roots used by the relationship catalog
- The package relationships XML namespace
- Path conventions inside an OPC archive
"""

# =============================================================================
# SCHEMA ROOTS
# =============================================================================
# Prefixes shared by the registered relationship type URIs

OFFICE_DOCUMENT_RELS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
PACKAGE_RELS = "http://schemas.openxmlformats.org/package/2006/relationships"
MICROSOFT_OFFICE = "http://schemas.microsoft.com/office"

# Unknown types whose URI contains this segment come from a vendor extension
# published in 2020 or later.
MODERN_OFFICE_MARKER = "schemas.microsoft.com/office/20"


# =============================================================================
# XML
# =============================================================================

# Default namespace of a .rels part; also the root of the package schemas.
RELS_NAMESPACE = PACKAGE_RELS
RELS_ROOT_NAME = "Relationships"
RELS_ELEMENT_NAME = "Relationship"
RELS_ROOT_TAG = f"{{{RELS_NAMESPACE}}}{RELS_ROOT_NAME}"
RELS_ELEMENT_TAG = f"{{{RELS_NAMESPACE}}}{RELS_ELEMENT_NAME}"


# =============================================================================
# ARCHIVE PATHS
# =============================================================================

PATH_SEPARATOR = "/"
RELS_DIR = "_rels"
RELS_SUFFIX = ".rels"

"""
Utility modules for xlsx_rels.

Submodules:
    paths: OPC part naming (.rels location, source root)
    rels_xml: .rels XML reading and writing
"""

from xlsx_rels.utils.paths import rels_path_for, source_root_for
from xlsx_rels.utils.rels_xml import (
    RelsParseError,
    parse_rels_xml,
    write_rels_xml,
    load_relationships,
    dump_relationships,
)

__all__ = [
    # Path helpers
    "rels_path_for",
    "source_root_for",
    # XML codec
    "RelsParseError",
    "parse_rels_xml",
    "write_rels_xml",
    "load_relationships",
    "dump_relationships",
]

#!/usr/bin/env python3
"""
Inspect a .rels part from an extracted .xlsx archive.

Prints every relationship with its classified type and resolved path, then a
known/unknown summary. Optionally exports the table as CSV.

Usage:
    xlsx-rels PATH [--root ROOT] [--csv OUT] [--log-level LEVEL]
    python -m xlsx_rels.cli xl/_rels/workbook.xml.rels
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from xlsx_rels.config import LOG_LEVELS, RelsConfig
from xlsx_rels.core.relationship import Relationship
from xlsx_rels.core.relationships import Relationships
from xlsx_rels.utils.rels_xml import RelsParseError, load_relationships

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def summarize(relationships: Relationships) -> Dict[str, int]:
    """Counts used for the summary line."""
    known = sum(1 for rel in relationships if rel.type.is_known())
    return {
        "total": len(relationships),
        "known": known,
        "unknown": len(relationships) - known,
        "worksheets": sum(1 for rel in relationships if rel.type.is_worksheet_related()),
        "modern": sum(1 for rel in relationships if rel.type.is_modern_office_feature()),
    }


def format_relationship_line(rel: Relationship, root: str) -> str:
    path = rel.resolve_path(root) if root else rel.target
    flags = []
    if not rel.type.is_known():
        flags.append("unknown")
    if rel.type.is_worksheet_related():
        flags.append("sheet")
    if rel.type.is_modern_office_feature():
        flags.append("modern")
    if rel.target_mode:
        flags.append(rel.target_mode.lower())
    flag_str = f" [{', '.join(flags)}]" if flags else ""
    return f"{rel.id}\t{rel.type.name}\t{path}{flag_str}"


def run(config: RelsConfig) -> Relationships:
    """
    Load, print and optionally export the relationships described by config.

    Raises:
        OSError: If config.rels_path cannot be read (missing, a directory, no permission).
        RelsParseError: If the file is not a valid .rels part.
    """
    logger.info(f"Reading {config.rels_path} (root: {config.root or '<archive root>'})")
    relationships = load_relationships(config.rels_path.read_bytes())

    print("=" * 70)
    print(f"RELATIONSHIPS: {config.rels_path}")
    print("=" * 70)
    for rel in relationships:
        print(format_relationship_line(rel, config.root))

    counts = summarize(relationships)
    print(
        f"\n{counts['total']} relationships: {counts['known']} known, "
        f"{counts['unknown']} unknown, {counts['worksheets']} sheets, "
        f"{counts['modern']} modern Office features"
    )

    if config.csv_path is not None:
        config.csv_path.parent.mkdir(parents=True, exist_ok=True)
        relationships.to_dataframe().to_csv(config.csv_path, index=False)
        logger.info(f"Wrote {len(relationships)} rows to {config.csv_path}")

    return relationships


# =============================================================================
# CLI
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Classify the relationships of an OOXML .rels part"
    )
    parser.add_argument(
        "rels_path",
        help="Path to the .rels file (e.g. xl/_rels/workbook.xml.rels)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Directory relative targets resolve against (derived from the path by default)",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Write the classified relationships to this CSV file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: $XLSX_RELS_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    options = {"rels_path": args.rels_path, "root": args.root, "csv_path": args.csv}
    if args.log_level:
        options["log_level"] = args.log_level
    try:
        config = RelsConfig(**options)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(config)
    except OSError as exc:
        logger.error(f"Cannot open {config.rels_path}: {exc}")
        return EXIT_INPUT_ERROR
    except RelsParseError as exc:
        logger.error(f"Cannot read {config.rels_path}: {exc}")
        return EXIT_INPUT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

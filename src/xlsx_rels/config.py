"""
Configuration for the xlsx-rels inspection command.

This module defines the RelsConfig dataclass that captures the parameters of a
single inspection run, so the CLI and library callers share the same defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from xlsx_rels.utils.paths import source_root_for

LOG_LEVEL_ENV = "XLSX_RELS_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RelsConfig:
    """
    Configuration for inspecting one .rels part.

    Attributes:
        rels_path: Path of the .rels file, ideally relative to the extracted
            archive root (e.g. "xl/_rels/workbook.xml.rels").
        root: Directory relative targets resolve against. If None, derived
            from rels_path ("xl/_rels/workbook.xml.rels" -> "xl").
        csv_path: Optional CSV export of the classified relationships.
        log_level: Logging level name; defaults to $XLSX_RELS_LOG_LEVEL or INFO.

    Raises:
        ValueError: If log_level is not one of LOG_LEVELS.
    """

    rels_path: Path
    root: Optional[str] = None
    csv_path: Optional[Path] = None
    log_level: str = field(default_factory=lambda: os.environ.get(LOG_LEVEL_ENV, "INFO"))

    def __post_init__(self):
        """Coerce paths and derive the target root if not provided."""
        if isinstance(self.rels_path, str):
            self.rels_path = Path(self.rels_path)

        if isinstance(self.csv_path, str):
            self.csv_path = Path(self.csv_path)

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}', expected one of {list(LOG_LEVELS)}")

        if self.root is None:
            try:
                self.root = source_root_for(self.rels_path.as_posix())
            except ValueError:
                # Loose file outside a _rels directory: resolve against its folder.
                parent = self.rels_path.parent.as_posix()
                self.root = "" if parent == "." else parent

"""
OPC part naming helpers.

A part ``dir/name.ext`` keeps its relationships in ``dir/_rels/name.ext.rels``;
relative targets in that file are resolved against ``dir``.
"""

from pathlib import PurePosixPath

from xlsx_rels.constants import PATH_SEPARATOR, RELS_DIR, RELS_SUFFIX


def rels_path_for(part_path: str) -> str:
    """
    Path of the .rels part describing ``part_path``.

    Example:
        >>> rels_path_for("xl/workbook.xml")
        'xl/_rels/workbook.xml.rels'
        >>> rels_path_for("")
        '_rels/.rels'
    """
    part = PurePosixPath(part_path.lstrip(PATH_SEPARATOR))
    if not part.name:
        return f"{RELS_DIR}{PATH_SEPARATOR}{RELS_SUFFIX}"
    return (part.parent / RELS_DIR / f"{part.name}{RELS_SUFFIX}").as_posix()


def source_root_for(rels_path: str) -> str:
    """
    Directory that relative targets in ``rels_path`` are resolved against.

    Raises:
        ValueError: If the path is not inside a ``_rels`` directory.

    Example:
        >>> source_root_for("xl/worksheets/_rels/sheet1.xml.rels")
        'xl/worksheets'
        >>> source_root_for("_rels/.rels")
        ''
    """
    path = PurePosixPath(rels_path)
    if path.parent.name != RELS_DIR or not path.name.endswith(RELS_SUFFIX):
        raise ValueError(f"Not a relationships part path: {rels_path}")
    root = path.parent.parent.as_posix()
    return "" if root == "." else root

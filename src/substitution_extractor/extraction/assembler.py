"""Build per-class schedule entries from split columns."""

from collections.abc import Iterable

from ..config import BLOCK_COUNT
from ..errors import ErrorKind, ExtractionError
from .cells import CellContent


def join_cell(cell: CellContent) -> str | None:
    """Lines of a cell joined by newlines, None for an empty cell."""
    if not cell:
        return None
    return "\n".join(cell)


def column_entry(cells: list[CellContent]) -> tuple[str, list[str | None]]:
    """Class name and block texts of one split column.

    ``cells[0]`` is the header cell holding the class name, ``cells[1:7]``
    are the lesson blocks.
    """
    if len(cells) < BLOCK_COUNT + 1 or not cells[0]:
        raise ExtractionError(
            ErrorKind.CELL_LINE_COUNT_WRONG,
            f"expected a header cell and {BLOCK_COUNT} block cells, got {len(cells)} cells",
        )
    class_name = cells[0][0]
    return class_name, [join_cell(cell) for cell in cells[1 : BLOCK_COUNT + 1]]


def assemble_entries(columns: Iterable[list[CellContent]]) -> dict[str, list[str | None]]:
    """Map class names to their six block texts.

    Columns are expected in page, region, column order; a class seen twice
    keeps the later column.
    """
    entries: dict[str, list[str | None]] = {}
    for cells in columns:
        class_name, blocks = column_entry(cells)
        entries[class_name] = blocks
    return entries

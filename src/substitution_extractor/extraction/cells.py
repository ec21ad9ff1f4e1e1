"""Split a column into cells along its real row separators.

The planning tool draws a rule as several short segments and marks
sub-divisions inside a cell with small ticks. Real separators are recognized
as the lines followed by the largest gaps in the column.
"""

from ..config import DEFAULT_CONFIG, ExtractorConfig
from ..errors import ErrorKind, ExtractionError
from ..logger import logger
from .columns import TableColumn
from .geometry import Line, PageObject, Text

CellContent = list[str]


def remove_vertical_lines(column: TableColumn) -> list[PageObject]:
    """The column's objects without vertical lines."""
    return [o for o in column.objects if not (isinstance(o, Line) and not o.is_horizontal)]


def separator_lines(lines: list[Line], config: ExtractorConfig = DEFAULT_CONFIG) -> list[Line]:
    """Keep the horizontal lines that separate rows, top line first.

    Each line is paired with the gap to the next line below it. The smallest
    of the ``separator_rank`` largest gaps is the threshold; the bottom line
    is paired with the threshold itself and always survives.

    Raises:
        ExtractionError: CELL_LINE_COUNT_WRONG if there are too few gaps or
            the filter does not leave exactly ``separator_rank + 1`` lines.
    """
    rank = config.separator_rank
    lines = sorted(lines, key=lambda line: line.start.y, reverse=True)

    spacing = [upper.start.y - lower.start.y for upper, lower in zip(lines, lines[1:])]

    if len(spacing) < rank:
        raise ExtractionError(
            ErrorKind.CELL_LINE_COUNT_WRONG,
            f"need at least {rank + 1} horizontal lines, got {len(lines)}",
        )

    smallest_space = sorted(spacing, reverse=True)[:rank][-1]
    spacing.append(smallest_space)

    separators = [line for line, space in zip(lines, spacing) if space >= smallest_space]

    if len(separators) != config.separator_count:
        raise ExtractionError(
            ErrorKind.CELL_LINE_COUNT_WRONG,
            f"expected exactly {config.separator_count} row separators, "
            f"got {len(separators)}",
        )
    return separators


def _sort_key(obj: PageObject) -> tuple[int, int, int]:
    # Top to bottom; at equal y lines come before texts, then left to right
    if isinstance(obj, Line):
        return (-obj.start.y, 0, obj.start.x)
    return (-obj.y, 1, obj.x)


def split_cells(column: TableColumn, config: ExtractorConfig = DEFAULT_CONFIG) -> list[CellContent]:
    """Distribute a column's texts into its cells.

    Args:
        column: Column with attached rules and texts.
        config: Tolerances; ``separator_rank`` is the number of blocks.

    Returns:
        ``separator_rank + 1`` cells: the header cell followed by one cell
        per lesson block, each a top-to-bottom list of text lines.

    Raises:
        ExtractionError: CELL_LINE_COUNT_WRONG (see ``separator_lines``),
            COLUMN_HEADER_MISSING if a rule lies above every text,
            CELL_OUT_OF_BOUNDS for text below the last separator.
    """
    cleaned = remove_vertical_lines(column)
    lines = [o for o in cleaned if isinstance(o, Line)]
    texts = [o for o in cleaned if isinstance(o, Text)]

    separators = separator_lines(lines, config)

    ordered: list[PageObject] = sorted([*separators, *texts], key=_sort_key)

    if not ordered or isinstance(ordered[0], Line):
        raise ExtractionError(
            ErrorKind.COLUMN_HEADER_MISSING,
            f"column '{column.header.text}' does not start with its header text",
        )

    cells: list[CellContent] = [[] for _ in range(config.separator_count)]
    index = 0
    for obj in ordered:
        if isinstance(obj, Line):
            index += 1
            continue
        if index >= len(cells):
            raise ExtractionError(
                ErrorKind.CELL_OUT_OF_BOUNDS,
                f"text '{obj.text}' at y={obj.y} lies below the last row "
                f"separator of column '{column.header.text}'",
            )
        cells[index].append(obj.text)

    logger.debug(
        "column split",
        column=column.header.text,
        separators=[line.start.y for line in separators],
        texts=len(texts),
    )
    return cells

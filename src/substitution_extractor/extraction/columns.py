"""Column extraction inside one table region."""

from pydantic import BaseModel, Field

from ..config import BLOCK_LANDMARK, DEFAULT_CONFIG, ExtractorConfig
from ..errors import ErrorKind, ExtractionError
from ..logger import logger
from .geometry import Line, PageObject, Text
from .regions import TableRegion


class TableColumn(BaseModel):
    """A class column: its header text and the objects attached to it."""

    header: Text
    objects: list[PageObject] = Field(default_factory=list)

    def lines(self) -> list[Line]:
        return [o for o in self.objects if isinstance(o, Line)]

    def texts(self) -> list[Text]:
        return [o for o in self.objects if isinstance(o, Text)]

    def _horizontal_lines(self) -> list[Line]:
        lines = [line for line in self.lines() if line.is_horizontal]
        if not lines:
            raise ExtractionError(
                ErrorKind.COLUMN_EMPTY,
                f"no horizontal lines attached to column '{self.header.text}' "
                f"at x={self.header.x}",
            )
        return lines

    @property
    def start(self) -> int:
        """Leftmost x of the column's rules."""
        return min(line.start.x for line in self._horizontal_lines())

    @property
    def end(self) -> int:
        """Rightmost x of the column's rules."""
        return max(line.end.x for line in self._horizontal_lines())


def header_baseline(region: TableRegion) -> int:
    """Y of the region's single "Block" header text."""
    headers = [t for t in region.objects.texts() if t.text == BLOCK_LANDMARK]
    if len(headers) != 1:
        raise ExtractionError(
            ErrorKind.REGION_HEADER_MISSING,
            f"expected exactly one '{BLOCK_LANDMARK}' header in region "
            f"({region.top}, {region.bottom}), found {len(headers)}",
        )
    return headers[0].y


def extract_columns(
    region: TableRegion, config: ExtractorConfig = DEFAULT_CONFIG
) -> list[TableColumn]:
    """Find the class columns of a table and attach their rules and texts.

    Args:
        region: Objects of one table.
        config: Tolerances; ``header_half_band`` bounds the header row.

    Returns:
        Columns in the order their headers appear in the region.

    Raises:
        ExtractionError: REGION_HEADER_MISSING without a unique "Block"
            header, COLUMN_EMPTY if a header has no rule below it.
    """
    header_y = header_baseline(region)
    half_band = config.header_half_band

    columns = [
        TableColumn(header=text)
        for text in region.objects.texts()
        if abs(text.y - header_y) < half_band and text.text != BLOCK_LANDMARK
    ]

    for column in columns:
        border = column.header.x
        column.objects.extend(o for o in region.objects if o.intersects_x_border(border))

    for column in columns:
        start, end = column.start, column.end
        column.objects.extend(t for t in region.objects.texts() if t.between_x(start, end))

    logger.debug(
        "columns extracted",
        header_y=header_y,
        columns=[c.header.text for c in columns],
    )
    return columns

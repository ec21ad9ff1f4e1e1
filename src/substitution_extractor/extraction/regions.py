"""Split a page into table regions.

A table starts at its "Block" header cell and ends at the first horizontal
rule below the cell of the last lesson (the one containing "15:15").
"""

from pydantic import BaseModel, ConfigDict

from ..config import BLOCK_LANDMARK, DEFAULT_CONFIG, LAST_BLOCK_LANDMARK, ExtractorConfig
from ..errors import ErrorKind, ExtractionError
from ..logger import logger
from .geometry import between_y
from .page_objects import PageObjects


class TableRegion(BaseModel):
    """Objects of one table, bounded (exclusively) by ``top`` and ``bottom``."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    top: int
    bottom: int
    objects: PageObjects


def region_bounds(
    page: PageObjects, config: ExtractorConfig = DEFAULT_CONFIG
) -> list[tuple[int, int]]:
    """Compute ``(top, bottom)`` of every table on the page, lowest table first.

    Raises:
        ExtractionError: REGION_COUNT_MISMATCH if the number of "Block" and
            "15:15" landmarks differ, REGION_BOUND_MISSING if no horizontal
            rule lies below a "15:15" landmark.
    """
    padding = config.region_padding

    top_limits = sorted(t.y + padding for t in page.texts() if t.text == BLOCK_LANDMARK)
    bottom_limits = sorted(t.y for t in page.texts() if LAST_BLOCK_LANDMARK in t.text)

    if len(top_limits) != len(bottom_limits):
        raise ExtractionError(
            ErrorKind.REGION_COUNT_MISMATCH,
            f"found {len(top_limits)} '{BLOCK_LANDMARK}' but "
            f"{len(bottom_limits)} '{LAST_BLOCK_LANDMARK}' landmarks",
        )

    rule_heights = [line.start.y for line in page.horizontal_lines()]

    adjusted_bottoms = []
    for limit in bottom_limits:
        deltas = [y - limit for y in rule_heights if y - limit < 0]
        if not deltas:
            raise ExtractionError(
                ErrorKind.REGION_BOUND_MISSING,
                f"no horizontal rule below '{LAST_BLOCK_LANDMARK}' at y={limit}",
            )
        # Closest rule strictly below the landmark, then the tolerance
        adjusted_bottoms.append(limit + max(deltas) - padding)

    return list(zip(top_limits, adjusted_bottoms))


def find_regions(
    page: PageObjects, config: ExtractorConfig = DEFAULT_CONFIG
) -> list[TableRegion]:
    """Partition a page's objects into one object set per table.

    Objects keep their page order inside each region. An object belongs to
    a region only if all of its y coordinates are strictly inside the bounds.
    """
    bounds = region_bounds(page, config)
    regions = [
        TableRegion(top=top, bottom=bottom, objects=PageObjects()) for top, bottom in bounds
    ]

    for obj in page:
        for region in regions:
            if between_y(obj, region.top, region.bottom):
                region.objects.add(obj)

    logger.debug(
        "table regions found",
        regions=len(regions),
        bounds=[[r.top, r.bottom] for r in regions],
    )
    return regions

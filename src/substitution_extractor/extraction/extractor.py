"""Substitution schedule extraction from the planning tool's PDFs."""

import time
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from ..config import ExtractorConfig
from ..errors import ExtractionError
from ..logger import log_context, logger
from .assembler import assemble_entries
from .cells import CellContent, split_cells
from .columns import extract_columns
from .dates import extract_date
from .geometry import Text
from .models import Schedule
from .operators import read_page_objects
from .page_objects import PageObjects
from .pdf_loader import PdfSource, load_page_operations
from .regions import find_regions

Column = list[CellContent]
Table = list[Column]
Page = list[Table]


class ScheduleExtractor:
    """Geometric table extractor over the pages of one PDF."""

    def __init__(self, pages: list[PageObjects], config: ExtractorConfig | None = None):
        """Initialize the extractor.

        Args:
            pages: Objects of every page, in page order.
            config: Tolerances (defaults to ExtractorConfig()).
        """
        self.pages = pages
        self.config = config or ExtractorConfig()

    @classmethod
    def load_from(
        cls, src: BinaryIO | bytes | bytearray, config: ExtractorConfig | None = None
    ) -> "ScheduleExtractor":
        """Load a PDF from a binary stream or raw bytes."""
        return cls._load(src, config)

    @classmethod
    def from_path(
        cls, file_path: str | Path, config: ExtractorConfig | None = None
    ) -> "ScheduleExtractor":
        """Load a PDF file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return cls._load(Path(file_path), config)

    @classmethod
    def _load(cls, source: PdfSource, config: ExtractorConfig | None) -> "ScheduleExtractor":
        pages = [read_page_objects(ops) for ops in load_page_operations(source)]
        return cls(pages, config)

    def texts(self) -> Iterator[Text]:
        for page in self.pages:
            yield from page.texts()

    def extract_date(self) -> int:
        """Issue date of the PDF in epoch milliseconds (midnight UTC)."""
        return extract_date(self.texts())

    def extract_tables(self) -> list[Page]:
        """Every page's tables as columns of cells.

        Each column is the header cell followed by one cell per block; each
        cell is a list of text lines.
        """
        result = []
        for page_number, page in enumerate(self.pages, 1):
            tables = []
            for region in find_regions(page, self.config):
                columns = extract_columns(region, self.config)
                tables.append([split_cells(column, self.config) for column in columns])
            logger.debug(
                "page tables extracted",
                page_number=page_number,
                tables=len(tables),
                columns=sum(len(t) for t in tables),
            )
            result.append(tables)
        return result

    def extract_tables_simple(self) -> list[list[str]]:
        """All columns of all tables, each cell joined with newlines."""
        return [
            ["\n".join(cell) for cell in column]
            for page in self.extract_tables()
            for table in page
            for column in table
        ]

    def schedule(self) -> Schedule:
        """Class to block mapping plus issue date."""
        columns = (
            column for page in self.extract_tables() for table in page for column in table
        )
        entries = assemble_entries(columns)
        return Schedule(issue_date_ms=self.extract_date(), entries=entries)


def extract(source: PdfSource, config: ExtractorConfig | None = None) -> Schedule:
    """Extract the substitution schedule from a PDF.

    Args:
        source: Binary readable, raw PDF bytes, or a path to a PDF file.
        config: Tolerances (defaults to ExtractorConfig()).

    Returns:
        Schedule with the issue date and the six block texts per class.

    Raises:
        FileNotFoundError: If a path is given that does not exist.
        ExtractionError: On the first failure of any stage; no partial
            schedule is produced.
    """
    label = str(source) if isinstance(source, (str, Path)) else type(source).__name__
    start = time.perf_counter()

    with log_context(pdf=label):
        try:
            extractor = ScheduleExtractor._load(source, config)
            schedule = extractor.schedule()
        except ExtractionError as e:
            logger.error("schedule extraction failed", kind=e.kind.value, error=e.message)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "schedule extracted",
            total_pages=len(extractor.pages),
            classes=len(schedule.entries),
            issue_date_ms=schedule.issue_date_ms,
            duration_ms=round(duration_ms, 2),
        )
    return schedule

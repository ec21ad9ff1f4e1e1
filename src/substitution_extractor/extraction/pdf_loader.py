"""PDF ingestion using pypdf: page content streams as operator lists."""

import io
from pathlib import Path
from typing import BinaryIO

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from ..errors import ErrorKind, ExtractionError
from ..logger import logger
from .operators import Operation

PdfSource = BinaryIO | bytes | bytearray | str | Path


def _open_reader(source: PdfSource) -> PdfReader:
    if isinstance(source, (str, Path)):
        file_path = Path(source)
        if not file_path.exists():
            raise FileNotFoundError(f"PDF file not found: {file_path}")
        stream: BinaryIO = io.BytesIO(file_path.read_bytes())
    elif isinstance(source, (bytes, bytearray)):
        stream = io.BytesIO(bytes(source))
    else:
        # Consume the caller's stream completely; it may be released afterwards
        stream = io.BytesIO(source.read())
    return PdfReader(stream)


def load_page_operations(source: PdfSource) -> list[list[Operation]]:
    """Read every page's content stream operators in page order.

    Args:
        source: Binary readable, raw PDF bytes, or a path to a PDF file.

    Returns:
        One list of ``(operator, operands)`` pairs per page. Pages without
        content yield an empty list.

    Raises:
        FileNotFoundError: If a path is given that does not exist.
        ExtractionError: PDF_READ_ERROR when pypdf cannot read the document.
    """
    try:
        reader = _open_reader(source)
        pages: list[list[Operation]] = []
        for page in reader.pages:
            contents = page.get_contents()
            if contents is None:
                pages.append([])
                continue
            pages.append(
                [
                    (
                        operator.decode("latin-1") if isinstance(operator, bytes) else str(operator),
                        operands,
                    )
                    for operands, operator in contents.operations
                ]
            )
    except PyPdfError as e:
        raise ExtractionError(ErrorKind.PDF_READ_ERROR, f"could not read pdf: {e}") from e

    logger.debug(
        "pdf loaded",
        total_pages=len(pages),
        total_operations=sum(len(p) for p in pages),
    )
    return pages

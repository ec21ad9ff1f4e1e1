"""Error taxonomy for schedule extraction.

Every failure aborts the whole extraction. The kind tells callers which stage
rejected the document:

    try:
        schedule = extract(pdf_bytes)
    except ExtractionError as e:
        if e.kind is ErrorKind.DATE_NOT_FOUND:
            ...
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Stage-specific failure kinds."""

    PARSE_SEQUENCE_ERROR = "PARSE_SEQUENCE_ERROR"
    PARSE_OPERAND_ERROR = "PARSE_OPERAND_ERROR"
    REGION_COUNT_MISMATCH = "REGION_COUNT_MISMATCH"
    REGION_BOUND_MISSING = "REGION_BOUND_MISSING"
    REGION_HEADER_MISSING = "REGION_HEADER_MISSING"
    COLUMN_EMPTY = "COLUMN_EMPTY"
    COLUMN_HEADER_MISSING = "COLUMN_HEADER_MISSING"
    CELL_LINE_COUNT_WRONG = "CELL_LINE_COUNT_WRONG"
    CELL_OUT_OF_BOUNDS = "CELL_OUT_OF_BOUNDS"
    DIAGONAL_LINE = "DIAGONAL_LINE"
    DATE_NOT_FOUND = "DATE_NOT_FOUND"
    DATE_MALFORMED = "DATE_MALFORMED"
    DATE_PARSE_ERROR = "DATE_PARSE_ERROR"
    TABLE_MALFORMED = "TABLE_MALFORMED"
    PDF_READ_ERROR = "PDF_READ_ERROR"


class ExtractionError(Exception):
    """Base exception for all extraction failures.

    Carries the failure kind and a short human-readable message.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message

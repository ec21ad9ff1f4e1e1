"""Substitution schedule extraction from school planning PDFs."""

from .config import ExtractorConfig
from .errors import ErrorKind, ExtractionError
from .extraction import Schedule, ScheduleExtractor, extract

__all__ = [
    "ExtractorConfig",
    "ErrorKind",
    "ExtractionError",
    "Schedule",
    "ScheduleExtractor",
    "extract",
]

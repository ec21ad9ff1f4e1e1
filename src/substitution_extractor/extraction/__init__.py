from .extractor import ScheduleExtractor, extract
from .geometry import Line, PageObject, Point, Text
from .models import Schedule
from .page_objects import PageObjects
from .tabula import parse_tabula_json, schedule_from_tables

__all__ = [
    "ScheduleExtractor",
    "extract",
    "Line",
    "PageObject",
    "Point",
    "Text",
    "Schedule",
    "PageObjects",
    "parse_tabula_json",
    "schedule_from_tables",
]

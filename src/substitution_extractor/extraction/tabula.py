"""Schedules from rectangular tables produced by an external table extractor.

tabula (``java -jar tabula.jar -g -f JSON -p all``) emits every table as rows
of positioned cells. Unlike the geometric engine it splits one lesson block
into several rows; the label cell of the last row of a block starts with
"-" (the "- 09:00" end time), which closes the block.
"""

import json

from pydantic import BaseModel, ValidationError

from ..config import BLOCK_COUNT, CONTINUATION_PREFIX
from ..errors import ErrorKind, ExtractionError
from ..logger import logger
from .models import Schedule, empty_entry

Table = list[list[str]]


class TabulaCell(BaseModel):
    top: float
    left: float
    width: float
    height: float
    text: str


class TabulaTable(BaseModel):
    data: list[list[TabulaCell]]

    def rows_as_text(self) -> Table:
        return [[cell.text for cell in row] for row in self.data]


def parse_tabula_json(content: str) -> list[Table]:
    """Extract the cell texts of every table in tabula's JSON output.

    Raises:
        ExtractionError: TABLE_MALFORMED if the JSON is invalid or does not
            have tabula's shape.
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise ExtractionError(ErrorKind.TABLE_MALFORMED, f"invalid json: {e}") from e

    if not isinstance(payload, list):
        raise ExtractionError(ErrorKind.TABLE_MALFORMED, "json root must be a list of tables")

    try:
        tables = [TabulaTable.model_validate(entry) for entry in payload]
    except ValidationError as e:
        raise ExtractionError(ErrorKind.TABLE_MALFORMED, f"unexpected table json: {e}") from e

    return [table.rows_as_text() for table in tables]


def _append(existing: str | None, text: str) -> str:
    return text if existing is None else f"{existing}\n{text}"


def table_to_entries(table: Table) -> dict[str, list[str | None]]:
    """Grab the classes and their substitutions from one table.

    Row 0 holds "Block" followed by the class names. Every further row adds
    its non-empty cells to the current block of the matching class; a row
    whose label starts with "-" ends the block.
    """
    if not table or len(table[0]) < 2:
        raise ExtractionError(ErrorKind.TABLE_MALFORMED, "table has no class header row")

    classes = table[0][1:]
    entries = {class_name: empty_entry() for class_name in classes}

    block = 0
    for row_number, row in enumerate(table[1:], start=1):
        label = row[0] if row else ""
        parts = row[1:]

        if block >= BLOCK_COUNT:
            if any(part for part in parts) or label.strip():
                raise ExtractionError(
                    ErrorKind.TABLE_MALFORMED,
                    f"row {row_number} follows the last of {BLOCK_COUNT} blocks",
                )
            continue

        for class_name, part in zip(classes, parts):
            if part:
                entries[class_name][block] = _append(entries[class_name][block], part)

        if label.startswith(CONTINUATION_PREFIX):
            block += 1

    return entries


def schedule_from_tables(tables: list[Table], issue_date_ms: int) -> Schedule:
    """Build a Schedule from tables; later tables overwrite earlier classes."""
    entries: dict[str, list[str | None]] = {}
    for table in tables:
        entries.update(table_to_entries(table))

    logger.debug("schedule assembled from tables", tables=len(tables), classes=len(entries))
    return Schedule(issue_date_ms=issue_date_ms, entries=entries)

"""End-to-end tests for schedule extraction from PDF files."""

import io
from pathlib import Path

import pytest

from pdf_factory import TableLayout, build_pdf, line_ops, page_operations
from substitution_extractor import (
    ErrorKind,
    ExtractionError,
    ExtractorConfig,
    Schedule,
    ScheduleExtractor,
    extract,
)

ISSUE_DATE_MS = 1709510400000  # 04.03.2024


@pytest.fixture(scope="module")
def single_table_pdf() -> bytes:
    layout = TableLayout(classes=["7a", "7b", "8a", "8b"]).add("7a", 0, "Mathe Hr. X")
    return build_pdf(page_operations(layout))


@pytest.fixture(scope="module")
def full_plan_pdf() -> bytes:
    """Two pages, the first with two tables."""
    upper = (
        TableLayout(classes=["5a", "5b"])
        .add("5a", 0, "Entfall")
        .add("5b", 2, "Deutsch", "Fr. Müller", "Raum 12")
        .add_ticks("5b", 2, 2, 4, 6)
    )
    lower = TableLayout(
        classes=["6a", "6b"], header_y=250, first_rule_y=242, row_height=30
    ).add("6b", 5, "Sport")
    second = TableLayout(classes=["7a", "5a"]).add("5a", 4, "Kunst")
    return build_pdf(page_operations(upper, lower), page_operations(second, date=None))


@pytest.fixture
def pdf_path(tmp_path, single_table_pdf) -> Path:
    path = tmp_path / "plan.pdf"
    path.write_bytes(single_table_pdf)
    return path


class TestExtract:
    """Tests for extract function."""

    def test_single_table(self, single_table_pdf):
        schedule = extract(single_table_pdf)
        assert isinstance(schedule, Schedule)
        assert schedule.issue_date_ms == ISSUE_DATE_MS
        assert schedule.entries == {
            "7a": ["Mathe Hr. X", None, None, None, None, None],
            "7b": [None] * 6,
            "8a": [None] * 6,
            "8b": [None] * 6,
        }

    def test_accepts_readable_and_path(self, single_table_pdf, pdf_path):
        from_stream = extract(io.BytesIO(single_table_pdf))
        from_path = extract(pdf_path)
        from_str = extract(str(pdf_path))
        assert from_stream == from_path == from_str

    def test_repeated_runs_are_equal(self, full_plan_pdf):
        assert extract(full_plan_pdf) == extract(full_plan_pdf)

    def test_multi_page_multi_table(self, full_plan_pdf):
        schedule = extract(full_plan_pdf)
        assert set(schedule.entries) == {"5a", "5b", "6a", "6b", "7a"}
        assert schedule.entries["5b"][2] == "Deutsch\nFr. Müller\nRaum 12"
        assert schedule.entries["6b"][5] == "Sport"

    def test_later_page_wins_for_duplicate_class(self, full_plan_pdf):
        schedule = extract(full_plan_pdf)
        assert schedule.entries["5a"] == [None, None, None, None, "Kunst", None]

    def test_missing_date(self):
        layout = TableLayout(classes=["7a"])
        pdf = build_pdf(page_operations(layout, date=None))
        with pytest.raises(ExtractionError) as exc_info:
            extract(pdf)
        assert exc_info.value.kind is ErrorKind.DATE_NOT_FOUND

    def test_diagonal_segment(self):
        layout = TableLayout(classes=["7a"])
        pdf = build_pdf(page_operations(layout) + line_ops(10, 10, 20, 30))
        with pytest.raises(ExtractionError) as exc_info:
            extract(pdf)
        assert exc_info.value.kind is ErrorKind.DIAGONAL_LINE

    def test_unreadable_pdf(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract(b"this is not a pdf")
        assert exc_info.value.kind is ErrorKind.PDF_READ_ERROR

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            extract(tmp_path / "missing.pdf")

    def test_custom_config(self, single_table_pdf):
        # A band of 1 still catches headers on the exact baseline
        schedule = extract(single_table_pdf, ExtractorConfig(header_half_band=1))
        assert set(schedule.entries) == {"7a", "7b", "8a", "8b"}


class TestScheduleExtractor:
    """Tests for the ScheduleExtractor class."""

    def test_load_from_stream(self, single_table_pdf):
        extractor = ScheduleExtractor.load_from(io.BytesIO(single_table_pdf))
        assert len(extractor.pages) == 1
        assert extractor.extract_date() == ISSUE_DATE_MS

    def test_from_path(self, pdf_path):
        extractor = ScheduleExtractor.from_path(pdf_path)
        assert extractor.schedule().issue_date_ms == ISSUE_DATE_MS

    def test_extract_tables(self, full_plan_pdf):
        pages = ScheduleExtractor.load_from(full_plan_pdf).extract_tables()
        assert [len(tables) for tables in pages] == [2, 1]
        lower, upper = pages[0]
        assert [column[0] for column in upper] == [["5a"], ["5b"]]
        assert [column[0] for column in lower] == [["6a"], ["6b"]]
        assert all(len(column) == 7 for tables in pages for table in tables for column in table)

    def test_extract_tables_simple(self, single_table_pdf):
        columns = ScheduleExtractor.load_from(single_table_pdf).extract_tables_simple()
        assert columns[0] == ["7a", "Mathe Hr. X", "", "", "", "", ""]
        assert len(columns) == 4

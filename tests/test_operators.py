"""Tests for the operator reader and the page object set."""

import pytest

from substitution_extractor.errors import ErrorKind, ExtractionError
from substitution_extractor.extraction.geometry import Line, Point, Text
from substitution_extractor.extraction.operators import decode_win_ansi, read_page_objects
from substitution_extractor.extraction.page_objects import PageObjects


def line(x1, y1, x2, y2) -> Line:
    return Line(start=Point(x=x1, y=y1), end=Point(x=x2, y=y2))


def text(value, x, y) -> Text:
    return Text(text=value, position=Point(x=x, y=y))


class TestReadPageObjects:
    """Tests for read_page_objects function."""

    def test_reads_text_placement(self):
        """Test that Td followed by Tj yields a positioned text."""
        objects = read_page_objects([("BT", []), ("Td", [50, 700]), ("Tj", [b"Block"]), ("ET", [])])
        assert list(objects) == [text("Block", 50, 700)]

    def test_reads_line_segment(self):
        """Test that m followed by l yields a segment."""
        objects = read_page_objects([("m", [100, 692]), ("l", [200, 692]), ("S", [])])
        assert list(objects) == [line(100, 692, 200, 692)]

    def test_truncates_coordinates_toward_zero(self):
        """Test that float operands lose their fractional part."""
        objects = read_page_objects(
            [("Td", [50.9, 700.2]), ("Tj", [b"7a"]), ("m", [-3.7, 10.5]), ("l", [-3.2, 99.99])]
        )
        assert text("7a", 50, 700) in objects
        assert line(-3, 10, -3, 99) in objects

    def test_decodes_win_ansi(self):
        """Test that show-text bytes are decoded as Windows-1252."""
        objects = read_page_objects([("Td", [1, 2]), ("Tj", [b"Entfall M\xfcller \x80"])])
        assert objects.texts()[0].text == "Entfall Müller €"

    def test_deduplicates_objects(self):
        """Test that overdrawn rules and repeated glyph runs collapse."""
        ops = [("m", [0, 5]), ("l", [10, 5])] * 3 + [("Td", [1, 1]), ("Tj", [b"x"])] * 2
        objects = read_page_objects(ops)
        assert len(objects) == 2

    def test_ignores_other_operators(self):
        """Test that fonts, rectangles and painting are skipped."""
        ops = [
            ("Tf", ["/F1", 10]),
            ("re", [0, 0, 100, 100]),
            ("f", []),
            ("c", [1, 2, 3, 4, 5, 6]),
        ]
        assert len(read_page_objects(ops)) == 0

    def test_tj_without_td_fails(self):
        """Test that a show-text without a preceding text position is rejected."""
        with pytest.raises(ExtractionError) as exc_info:
            read_page_objects([("Tf", ["/F1", 10]), ("Tj", [b"x"])])
        assert exc_info.value.kind is ErrorKind.PARSE_SEQUENCE_ERROR

    def test_tj_first_operator_fails(self):
        """Test that a show-text at the start of the stream is rejected."""
        with pytest.raises(ExtractionError) as exc_info:
            read_page_objects([("Tj", [b"x"])])
        assert exc_info.value.kind is ErrorKind.PARSE_SEQUENCE_ERROR

    def test_line_to_without_move_fails(self):
        """Test that a line-to must directly follow a move-to."""
        ops = [("m", [0, 0]), ("l", [10, 0]), ("l", [10, 10])]
        with pytest.raises(ExtractionError) as exc_info:
            read_page_objects(ops)
        assert exc_info.value.kind is ErrorKind.PARSE_SEQUENCE_ERROR

    def test_diagonal_line_fails(self):
        """Test that a segment moving on both axes is a fatal error."""
        with pytest.raises(ExtractionError) as exc_info:
            read_page_objects([("m", [0, 0]), ("l", [10, 10])])
        assert exc_info.value.kind is ErrorKind.DIAGONAL_LINE

    def test_non_numeric_operand_fails(self):
        """Test that unusable coordinates are reported."""
        with pytest.raises(ExtractionError) as exc_info:
            read_page_objects([("Td", ["/F1"]), ("Tj", [b"x"])])
        assert exc_info.value.kind is ErrorKind.PARSE_OPERAND_ERROR


class TestDecodeWinAnsi:
    """Tests for decode_win_ansi function."""

    def test_bytes(self):
        assert decode_win_ansi(b"Vertretung f\xfcr 7a") == "Vertretung für 7a"

    def test_object_with_original_bytes(self):
        """Test that parser string objects are decoded from their raw bytes."""

        class ParsedString(str):
            original_bytes = b"\x93Sport\x94"

        assert decode_win_ansi(ParsedString("ignored")) == "“Sport”"

    def test_plain_str_passes_through(self):
        assert decode_win_ansi("already text") == "already text"

    def test_undefined_byte_is_replaced(self):
        assert decode_win_ansi(b"a\x81b") == "a�b"

    def test_rejects_numbers(self):
        with pytest.raises(ExtractionError) as exc_info:
            decode_win_ansi(42)
        assert exc_info.value.kind is ErrorKind.PARSE_OPERAND_ERROR


class TestPageObjects:
    """Tests for the PageObjects collection."""

    def test_typed_views(self):
        objects = PageObjects([text("a", 1, 1), line(0, 0, 5, 0), line(3, 0, 3, 9)])
        assert objects.texts() == [text("a", 1, 1)]
        assert objects.lines() == [line(0, 0, 5, 0), line(3, 0, 3, 9)]
        assert objects.horizontal_lines() == [line(0, 0, 5, 0)]

    def test_keeps_first_insertion_order(self):
        objects = PageObjects([text("b", 1, 1), text("a", 2, 2), text("b", 1, 1)])
        assert [t.text for t in objects.texts()] == ["b", "a"]

    def test_structural_equality(self):
        """Test that equal texts and lines are the same set member."""
        objects = PageObjects([text("7a", 110, 700)])
        assert text("7a", 110, 700) in objects
        assert text("7a", 110, 701) not in objects

"""Turn content-stream operators into page geometry.

Only two idioms of the planning tool's output are recognized:

- ``x y Td (text) Tj`` places a glyph run at (x, y)
- ``x1 y1 m x2 y2 l`` draws a straight segment

Everything else (fonts, colors, rectangles, path painting) is ignored.
"""

from collections.abc import Sequence
from typing import Any

from ..config import TEXT_ENCODING
from ..errors import ErrorKind, ExtractionError
from .geometry import Line, Point, Text
from .page_objects import PageObjects

Operation = tuple[str, Sequence[Any]]

_CODECS = {"WinAnsiEncoding": "cp1252"}


def decode_win_ansi(raw: Any, encoding: str = TEXT_ENCODING) -> str:
    """Decode a show-text operand under an 8-bit PDF encoding.

    Accepts raw ``bytes`` as well as string objects from the PDF parser that
    still carry their original bytes. Plain ``str`` operands are returned
    unchanged.
    """
    codec = _CODECS[encoding]
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode(codec, errors="replace")
    original = getattr(raw, "original_bytes", None)
    if original is not None:
        return bytes(original).decode(codec, errors="replace")
    if isinstance(raw, str):
        return raw
    raise ExtractionError(
        ErrorKind.PARSE_OPERAND_ERROR,
        f"show-text operand is not a string: {raw!r}",
    )


def _coordinate(operands: Sequence[Any], index: int, operator: str) -> int:
    # int() truncates toward zero; sub-pixel precision is not needed
    try:
        return int(float(operands[index]))
    except (IndexError, TypeError, ValueError) as e:
        raise ExtractionError(
            ErrorKind.PARSE_OPERAND_ERROR,
            f"operand {index} of '{operator}' is not a number: {list(operands)!r}",
        ) from e


def _point(operands: Sequence[Any], operator: str) -> Point:
    return Point(x=_coordinate(operands, 0, operator), y=_coordinate(operands, 1, operator))


def _previous(operations: Sequence[Operation], i: int, expected: str, current: str) -> Operation:
    if i == 0 or operations[i - 1][0] != expected:
        raise ExtractionError(
            ErrorKind.PARSE_SEQUENCE_ERROR,
            f"'{expected}' expected before '{current}' at operator {i}",
        )
    return operations[i - 1]


def read_page_objects(operations: Sequence[Operation]) -> PageObjects:
    """Collect the texts and line segments drawn by one page's operators.

    Args:
        operations: Ordered ``(operator, operands)`` pairs of the page content.

    Returns:
        PageObjects with duplicates removed.

    Raises:
        ExtractionError: PARSE_SEQUENCE_ERROR when a ``Tj`` or ``l`` lacks its
            positioning operator, PARSE_OPERAND_ERROR for unusable operands,
            DIAGONAL_LINE for a segment that is neither horizontal nor vertical.
    """
    objects = PageObjects()

    for i, (operator, operands) in enumerate(operations):
        if operator == "Tj":
            _, td_operands = _previous(operations, i, "Td", operator)
            if not operands:
                raise ExtractionError(
                    ErrorKind.PARSE_OPERAND_ERROR,
                    f"'Tj' without operand at operator {i}",
                )
            objects.add(
                Text(text=decode_win_ansi(operands[0]), position=_point(td_operands, "Td"))
            )
        elif operator == "l":
            _, m_operands = _previous(operations, i, "m", operator)
            line = Line(start=_point(m_operands, "m"), end=_point(operands, "l"))
            if not line.is_horizontal and not line.is_vertical:
                raise ExtractionError(
                    ErrorKind.DIAGONAL_LINE,
                    f"line from ({line.start.x}, {line.start.y}) "
                    f"to ({line.end.x}, {line.end.y}) is diagonal",
                )
            objects.add(line)

    return objects

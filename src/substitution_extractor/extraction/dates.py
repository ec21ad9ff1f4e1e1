"""Issue date of a substitution PDF."""

from collections.abc import Iterable
from datetime import datetime, timezone

from ..config import DATE_FORMAT, DATE_LANDMARK
from ..errors import ErrorKind, ExtractionError
from .geometry import Text


def find_date_text(texts: Iterable[Text]) -> str:
    """The first text containing the "Datum: " landmark."""
    for text in texts:
        if DATE_LANDMARK in text.text:
            return text.text
    raise ExtractionError(
        ErrorKind.DATE_NOT_FOUND, f"no text containing '{DATE_LANDMARK}' in pdf"
    )


def parse_issue_date(date_string: str) -> int:
    """Epoch milliseconds at midnight UTC of the trailing DD.MM.YYYY token.

    Args:
        date_string: e.g. "Datum: Montag, 04.03.2024".

    Raises:
        ExtractionError: DATE_MALFORMED without a space, DATE_PARSE_ERROR if
            the token is not a valid date.
    """
    date_begin = date_string.rfind(" ")
    if date_begin < 0:
        raise ExtractionError(ErrorKind.DATE_MALFORMED, f"date string malformed: {date_string!r}")

    token = date_string[date_begin + 1 :]
    try:
        parsed = datetime.strptime(token, DATE_FORMAT)
    except ValueError as e:
        raise ExtractionError(
            ErrorKind.DATE_PARSE_ERROR, f"could not parse date {token!r}: {e}"
        ) from e

    midnight = parsed.replace(tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def extract_date(texts: Iterable[Text]) -> int:
    """Issue date in epoch milliseconds from the texts of all pages."""
    return parse_issue_date(find_date_text(texts))

"""Input parsing for DD/MM/YYYY date text"""

import re

from .constants import DATE_FORMAT_HINT
from .exceptions import InputParseError
from .models import CalendarDate

# Three optionally signed ASCII integers separated by slashes
_DATE_PATTERN = re.compile(r'^([+-]?[0-9]+)/([+-]?[0-9]+)/([+-]?[0-9]+)$')

# Longest slice of the raw input kept in error context
_CONTEXT_CHARS = 40


def is_date_text(text: str) -> bool:
    """
    Check whether text has the DD/MM/YYYY shape

    Only the shape is checked; range checks belong to the validator.

    Examples:
        15/10/2025 -> True
        1/1/2000 -> True
        31/2/2023 -> True (shape only)
        15-10-2025 -> False
        15/10 -> False
        a/b/c -> False
        ١٥/١٠/٢٠٢٥ -> False (non-ASCII digits)
    """
    if not text or not isinstance(text, str):
        return False
    return bool(_DATE_PATTERN.match(text.strip()))


def parse_date(text: str) -> CalendarDate:
    """
    Parse DD/MM/YYYY text into a CalendarDate

    Surrounding whitespace is ignored. Leading zeros are allowed, so
    "05/03/2024" parses to day=5, month=3, year=2024.

    Raises:
        InputParseError: text is not three integers separated by '/', or a
            number is too long to convert
    """
    if not isinstance(text, str):
        raise InputParseError("Date input must be text", context={"input": text})

    stripped = text.strip()
    match = _DATE_PATTERN.match(stripped)
    if not match:
        raise InputParseError(
            f"Please ensure the format is exactly {DATE_FORMAT_HINT} with numbers.",
            context={"input": stripped[:_CONTEXT_CHARS]},
        )

    try:
        day, month, year = (int(group) for group in match.groups())
    except ValueError as e:
        # int() rejects digit runs past the interpreter's conversion limit
        raise InputParseError(
            "Number too long in date input.",
            context={"input": stripped[:_CONTEXT_CHARS]},
            original_error=e,
        )
    return CalendarDate(day=day, month=month, year=year)

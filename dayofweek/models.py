"""
Calendar value types.

This module contains the date value and the weekday-name lookup used by
the presentation layer.
"""
from dataclasses import dataclass

from .calendar_math import DEFAULT_YEAR_RANGE, YearRange, validate, weekday_index
from .constants import WEEKDAY_NAMES
from .exceptions import DateValidationError, InvalidWeekdayIndexError


@dataclass(frozen=True)
class CalendarDate:
    """A (day, month, year) triple. Validity is checked, not enforced."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def validate(self, year_range: YearRange = DEFAULT_YEAR_RANGE) -> DateValidationError | None:
        """Return the first validation error, or None if the date is real."""
        return validate(self.day, self.month, self.year, year_range)

    @property
    def is_valid(self) -> bool:
        """Valid within the default 1700-2500 range only; use validate(year_range) for a configured range."""
        return self.validate() is None

    def weekday_index(self) -> int:
        return weekday_index(self.day, self.month, self.year)

    def weekday_name(self) -> str:
        return weekday_name(self.weekday_index())


def weekday_name(index: int) -> str:
    """
    Map a weekday index to its name.

    Args:
        index: 0=Saturday ... 6=Friday

    Raises:
        InvalidWeekdayIndexError: index is not an int in 0-6
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidWeekdayIndexError(index)
    if not 0 <= index < len(WEEKDAY_NAMES):
        raise InvalidWeekdayIndexError(index)
    return WEEKDAY_NAMES[index]

"""
Gregorian calendar math: leap years, month lengths, date validation and
the day-of-week formula.

Every function here is pure. Validation failures are returned as values,
never raised, so callers decide how to report them.
"""

from dataclasses import dataclass

from .constants import (
    FEBRUARY,
    FIRST_MONTH,
    LAST_MONTH,
    MAX_SUPPORTED_YEAR,
    MIN_SUPPORTED_YEAR,
    MONTHS_WITH_30_DAYS,
    MONTHS_WITH_31_DAYS,
)
from .exceptions import (
    DateValidationError,
    DayOutOfRangeError,
    MonthOutOfRangeError,
    YearOutOfRangeError,
)


@dataclass(frozen=True)
class YearRange:
    """Closed interval of years accepted by the validator."""

    min_year: int = MIN_SUPPORTED_YEAR
    max_year: int = MAX_SUPPORTED_YEAR

    def __post_init__(self):
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})"
            )

    def __contains__(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year


DEFAULT_YEAR_RANGE = YearRange()


def is_leap(year: int) -> bool:
    """
    Gregorian leap-year rule

    Divisible by 400 -> leap, else divisible by 100 -> common,
    else divisible by 4 -> leap, else common.

    Examples:
        2000 -> True
        1900 -> False
        2024 -> True
        2023 -> False
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(month: int, year: int) -> int | None:
    """
    Number of days in a month, or None when month is outside 1-12
    """
    if month in MONTHS_WITH_31_DAYS:
        return 31
    if month in MONTHS_WITH_30_DAYS:
        return 30
    if month == FEBRUARY:
        return 29 if is_leap(year) else 28
    return None


def validate(
    day: int,
    month: int,
    year: int,
    year_range: YearRange = DEFAULT_YEAR_RANGE,
) -> DateValidationError | None:
    """
    Classify a (day, month, year) triple

    Checks run in order (year, month, day) and stop at the first failure,
    so exactly one error is reported.

    Args:
        day: Day of the month
        month: Month number
        year: Year
        year_range: Accepted years (default: 1700-2500)

    Returns:
        None if the date is valid, otherwise the (unraised) error describing
        the first failed check
    """
    if year not in year_range:
        return YearOutOfRangeError(day, month, year, year_range.min_year, year_range.max_year)

    if not FIRST_MONTH <= month <= LAST_MONTH:
        return MonthOutOfRangeError(day, month, year)

    max_day = days_in_month(month, year)
    if not 1 <= day <= max_day:
        return DayOutOfRangeError(day, month, year, max_day)

    return None


def is_valid_date(
    day: int,
    month: int,
    year: int,
    year_range: YearRange = DEFAULT_YEAR_RANGE,
) -> bool:
    """True if the triple passes ``validate``"""
    return validate(day, month, year, year_range) is None


def ensure_valid_date(
    day: int,
    month: int,
    year: int,
    year_range: YearRange = DEFAULT_YEAR_RANGE,
) -> None:
    """Raise the classified DateValidationError if the triple is invalid"""
    error = validate(day, month, year, year_range)
    if error is not None:
        raise error


def weekday_index(day: int, month: int, year: int) -> int:
    """
    Day of the week by Zeller's Congruence

    January and February are counted as months 13 and 14 of the previous
    year, so the year starts on March 1st and the leap day falls last.

    The date is not re-validated; call ``validate`` first.

    Returns:
        0=Saturday, 1=Sunday, 2=Monday, 3=Tuesday, 4=Wednesday,
        5=Thursday, 6=Friday
    """
    if month == 1:
        month = 13
        year -= 1
    elif month == 2:
        month = 14
        year -= 1

    year_of_century = year % 100
    century = year // 100

    return (
        day
        + (13 * (month + 1)) // 5
        + year_of_century
        + year_of_century // 4
        + century // 4
        + 5 * century
    ) % 7

"""Custom exceptions for the day-of-week calculator with error context"""

from typing import Any


class DayOfWeekError(Exception):
    """Base exception for calculator errors with enhanced context

    Attributes:
        message: Error message
        context: Additional context dictionary (e.g., day, month, year)
        original_error: Original exception if wrapped
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None,
                 original_error: Exception | None = None):
        self.message = message
        self.context = context or {}
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context"""
        msg = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg = f"{msg} [{ctx_str}]"
        if self.original_error:
            msg = f"{msg} (caused by: {type(self.original_error).__name__}: {self.original_error})"
        return msg


class ConfigError(DayOfWeekError):
    """Configuration validation failed

    Common causes:
    - Config file path given but missing
    - Malformed YAML
    - min_year greater than max_year
    - Unknown log level
    """
    pass


class InputParseError(DayOfWeekError):
    """Date text is not in DD/MM/YYYY form

    Raised by the input layer only. The calendar core never sees raw text.
    """
    pass


class DateValidationError(DayOfWeekError):
    """A (day, month, year) triple is not a supported calendar date

    The validator returns instances of the subclasses below instead of
    raising them; ``ensure_valid_date`` raises them for exception-style
    callers.
    """

    def __init__(self, message: str, day: int, month: int, year: int):
        self.day = day
        self.month = month
        self.year = year
        super().__init__(message, context={"day": day, "month": month, "year": year})

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.day, self.month, self.year) == (
            other.message, other.day, other.month, other.year
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.day, self.month, self.year))


class YearOutOfRangeError(DateValidationError):
    """Year outside the supported range"""

    def __init__(self, day: int, month: int, year: int, min_year: int, max_year: int):
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(
            f"Year must be between {min_year} and {max_year} for this calculation.",
            day, month, year,
        )


class MonthOutOfRangeError(DateValidationError):
    """Month outside 1-12"""

    def __init__(self, day: int, month: int, year: int):
        super().__init__("Month must be between 1 and 12.", day, month, year)


class DayOutOfRangeError(DateValidationError):
    """Day outside 1..max_day for the given month and year"""

    def __init__(self, day: int, month: int, year: int, max_day: int):
        self.max_day = max_day
        super().__init__(
            f"Day must be between 1 and {max_day} for {month}/{year}.",
            day, month, year,
        )


class InvalidWeekdayIndexError(DayOfWeekError):
    """Weekday index outside 0-6

    Unreachable with a correct weekday calculation; raised by the name
    lookup so a bad index never turns into an IndexError or a wrong name.
    """

    def __init__(self, index: Any):
        self.index = index
        super().__init__("Invalid day index calculated.", context={"index": index})

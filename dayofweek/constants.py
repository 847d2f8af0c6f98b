"""
Central constants for the day-of-week calculator.
All calendar bounds and fixed console strings are defined here.
"""

# =============================================================================
# SUPPORTED YEAR RANGE
# =============================================================================
MIN_SUPPORTED_YEAR = 1700       # Lowest year accepted by the validator
MAX_SUPPORTED_YEAR = 2500       # Highest year accepted by the validator


# =============================================================================
# MONTH LENGTHS
# =============================================================================
MONTHS_WITH_31_DAYS = frozenset({1, 3, 5, 7, 8, 10, 12})
MONTHS_WITH_30_DAYS = frozenset({4, 6, 9, 11})
FEBRUARY = 2
FIRST_MONTH = 1
LAST_MONTH = 12


# =============================================================================
# WEEKDAY NAMES (index order produced by the Zeller formula, Saturday first)
# =============================================================================
WEEKDAY_NAMES = (
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)


# =============================================================================
# CONSOLE TEXT
# =============================================================================
DATE_FORMAT_HINT = "DD/MM/YYYY"
BANNER = "--- Day of the Week Calculator ---"
PROMPT = "Enter a date in the format DD/MM/YYYY (e.g., 15/10/2025): "
RESULT_HEADER = "--- Result ---"
RESULT_FOOTER = "----------------"

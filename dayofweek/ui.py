"""Console output using rich library"""

from rich.console import Console

from .constants import BANNER, RESULT_FOOTER, RESULT_HEADER
from .models import CalendarDate

console = Console(highlight=False, soft_wrap=True)


def print_header() -> None:
    """Print the program banner"""
    console.print(BANNER, style="bold cyan", markup=False)


def print_error(message: str) -> None:
    """Print error message in red"""
    console.print(message, style="bold red", markup=False)


def print_info(message: str) -> None:
    console.print(message, markup=False)


def print_result(date: CalendarDate, weekday: str) -> None:
    """
    Print the resolved weekday

    Args:
        date: The date as entered, echoed as D/M/Y
        weekday: Weekday name
    """
    console.print()
    console.print(RESULT_HEADER, style="bold green", markup=False)
    console.print(f"Date entered: {date}", markup=False)
    console.print(f"The day of the week was: {weekday}", style="bold", markup=False)
    console.print(RESULT_FOOTER, style="bold green", markup=False)

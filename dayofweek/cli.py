"""CLI entry point for the day-of-week calculator.

This module handles argument parsing, reads the date and turns every
classified error into a console message and an exit code.
"""

import argparse
from collections.abc import Callable

from .config import Config
from .constants import PROMPT
from .exceptions import ConfigError, InputParseError, InvalidWeekdayIndexError
from .logger import logger
from .models import weekday_name
from .ui import print_error, print_header, print_info, print_result
from .validation import parse_date


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Day of the Week Calculator: DD/MM/YYYY → weekday name (Gregorian)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dayofweek                       Prompt for a date
  dayofweek 15/10/2025            Resolve a date given on the command line
  dayofweek --max-year 9999 1/1/3000
                                  Widen the supported year range
        """
    )

    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Date in DD/MM/YYYY form (prompted for when omitted)"
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML config file path"
    )

    parser.add_argument(
        "--min-year",
        type=int,
        default=None,
        metavar="YEAR",
        help="Lowest accepted year (default: 1700)"
    )

    parser.add_argument(
        "--max-year",
        type=int,
        default=None,
        metavar="YEAR",
        help="Highest accepted year (default: 2500)"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING or LOG_LEVEL env)"
    )

    return parser


def _load_config(args: argparse.Namespace) -> Config:
    cfg = Config.load(args.config)

    overrides = {}
    if args.min_year is not None:
        overrides["min_year"] = args.min_year
    if args.max_year is not None:
        overrides["max_year"] = args.max_year
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    if not overrides:
        return cfg

    calendar = cfg.calendar.model_dump()
    for key in ("min_year", "max_year"):
        if key in overrides:
            calendar[key] = overrides[key]
    try:
        return Config(
            calendar=calendar,
            log_level=overrides.get("log_level", cfg.log_level),
        )
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}")


def run_cli(
    argv: list[str] | None = None,
    *,
    read_input: Callable[[str], str] = input,
) -> int:
    """
    Parse arguments, read a date and print its weekday.

    Args:
        argv: Command line arguments (None for sys.argv)
        read_input: Prompt function used when no date argument is given

    Returns:
        Exit code (0 for success, 1 for bad input or invalid date,
        130 when interrupted)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        cfg = _load_config(args)
    except ConfigError as e:
        logger.warning("config.invalid", config=args.config, error=e.message)
        print_error(f"Config Error: {e}")
        return 1

    logger.set_level(cfg.log_level)
    logger.debug("config.loaded", min_year=cfg.calendar.min_year,
                 max_year=cfg.calendar.max_year, log_level=cfg.log_level)

    print_header()

    try:
        text = args.date if args.date is not None else read_input(PROMPT)
    except KeyboardInterrupt:
        print_info("\n\nInterrupted by user")
        return 130
    except EOFError:
        print_error("Input Error: No date entered.")
        return 1

    try:
        date = parse_date(text)
    except InputParseError as e:
        logger.info("input.parse_failed", error=e)
        print_error(f"Input Error: {e.message}")
        return 1

    error = date.validate(cfg.calendar.year_range)
    if error is not None:
        logger.info("date.invalid", reason=type(error).__name__,
                    day=date.day, month=date.month, year=date.year)
        print_error(f"Error: {error.message}")
        print_info("Exiting program due to invalid date.")
        return 1

    index = date.weekday_index()
    try:
        name = weekday_name(index)
    except InvalidWeekdayIndexError as e:
        logger.error("weekday.invalid_index", index=e.index)
        print_error(f"Error: {e.message}")
        return 1

    logger.info("weekday.resolved", date=str(date), index=index, weekday=name)
    print_result(date, name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Console-script entry point."""
    return run_cli(argv)

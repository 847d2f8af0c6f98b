import logging
import sys
import os
from pathlib import Path
from datetime import datetime


class StructuredLogger:
    """Simple wrapper to support key-value logging"""

    def __init__(self, logger):
        self._logger = logger

    def _format_msg(self, msg, **kwargs):
        if kwargs:
            kv_str = " ".join(f"{k}={v}" for k, v in kwargs.items())
            return f"{msg} {kv_str}"
        return msg

    def debug(self, msg, **kwargs):
        self._logger.debug(self._format_msg(msg, **kwargs))

    def info(self, msg, **kwargs):
        self._logger.info(self._format_msg(msg, **kwargs))

    def warning(self, msg, **kwargs):
        self._logger.warning(self._format_msg(msg, **kwargs))

    def error(self, msg, **kwargs):
        self._logger.error(self._format_msg(msg, **kwargs))

    def set_level(self, level: str):
        """Change the level of the logger and all of its handlers"""
        numeric_level = getattr(logging, level.upper(), logging.WARNING)
        has_file = False
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler):
                has_file = True
            else:
                handler.setLevel(numeric_level)
        self._logger.setLevel(logging.DEBUG if has_file else numeric_level)

    @property
    def level(self) -> int:
        return self._logger.level


def setup_logger(level: str = "WARNING", log_file: bool = False):
    """
    Setup logging with console and optional file output

    Console logs go to stderr; stdout carries the calculator's answer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Whether to also log to file

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    base_logger = logging.getLogger("dayofweek")
    base_logger.setLevel(numeric_level)
    base_logger.handlers = []  # Clear existing handlers

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_fmt)
    base_logger.addHandler(console_handler)

    if log_file:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)

        log_path = log_dir / f"dayofweek_{datetime.now():%Y%m%d}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_fmt = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_fmt)
        base_logger.addHandler(file_handler)
        # File handler must see DEBUG records
        base_logger.setLevel(logging.DEBUG)

        base_logger.debug(f"Logging to file: {log_path}")

    return StructuredLogger(base_logger)


# Get log level from environment variable (default: WARNING)
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
_log_file = os.environ.get("DOW_LOG_FILE", "").lower() in ("1", "true", "yes")
logger = setup_logger(level=_log_level, log_file=_log_file)

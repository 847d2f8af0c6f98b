import os
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from dotenv import load_dotenv
from .calendar_math import YearRange
from .constants import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from .exceptions import ConfigError

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CalendarConfig(BaseModel):
    min_year: int = Field(default=MIN_SUPPORTED_YEAR, description="Lowest accepted year")
    max_year: int = Field(default=MAX_SUPPORTED_YEAR, description="Highest accepted year")

    @model_validator(mode="after")
    def check_range(self) -> "CalendarConfig":
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})"
            )
        return self

    @property
    def year_range(self) -> YearRange:
        return YearRange(self.min_year, self.max_year)


class Config(BaseModel):
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    log_level: str = Field(default="WARNING")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Use one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """
        Load config from an optional YAML file, then apply env overrides

        With no path, defaults are used. An explicit path must exist.
        """
        raw = {}
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise ConfigError(f"Config file not found: {path}")

            try:
                raw = yaml.safe_load(p.read_text()) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Failed to parse YAML: {e}", original_error=e)

            if not isinstance(raw, dict):
                raise ConfigError(f"Invalid configuration: top level must be a mapping in {path}")

        if raw.get("calendar") is None:
            raw["calendar"] = {}
        if not isinstance(raw["calendar"], dict):
            raise ConfigError("Invalid configuration: calendar must be a mapping",
                              context={"calendar": raw["calendar"]})

        # Environment variable overrides
        if min_year := os.getenv("DOW_MIN_YEAR"):
            raw["calendar"]["min_year"] = min_year
        if max_year := os.getenv("DOW_MAX_YEAR"):
            raw["calendar"]["max_year"] = max_year
        if log_level := os.getenv("LOG_LEVEL"):
            raw["log_level"] = log_level

        try:
            return cls(**raw)
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}")

"""
Tests for config loading and validation
"""
import os
import tempfile
from unittest.mock import patch

import pytest

from dayofweek.calendar_math import YearRange
from dayofweek.config import CalendarConfig, Config
from dayofweek.exceptions import ConfigError

_ENV_KEYS = ("DOW_MIN_YEAR", "DOW_MAX_YEAR", "LOG_LEVEL")


@pytest.fixture
def clean_env():
    """Remove config env vars for the duration of a test"""
    with patch.dict(os.environ, {}, clear=False):
        for key in _ENV_KEYS:
            os.environ.pop(key, None)
        yield


def _write_config(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(content)
    return f.name


class TestCalendarConfig:
    """Test calendar range configuration"""

    def test_defaults(self):
        config = CalendarConfig()
        assert config.min_year == 1700
        assert config.max_year == 2500

    def test_year_range_property(self):
        config = CalendarConfig(min_year=1, max_year=9999)
        assert config.year_range == YearRange(1, 9999)

    def test_inverted_range_rejected(self):
        """Test that min_year above max_year is rejected"""
        with pytest.raises(ValueError, match="must not exceed"):
            CalendarConfig(min_year=2500, max_year=1700)

    def test_single_year_range_allowed(self):
        config = CalendarConfig(min_year=2000, max_year=2000)
        assert 2000 in config.year_range


class TestConfigModel:
    """Test top-level config validation"""

    def test_defaults(self):
        config = Config()
        assert config.log_level == "WARNING"
        assert config.calendar.year_range == YearRange()

    def test_log_level_normalized(self):
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            Config(log_level="LOUD")


class TestConfigLoad:
    """Test Config.load() functionality"""

    def test_load_without_path_uses_defaults(self, clean_env):
        config = Config.load()
        assert config.calendar.min_year == 1700
        assert config.calendar.max_year == 2500

    def test_load_missing_file_raises(self, clean_env):
        """Test that missing config file raises ConfigError"""
        with pytest.raises(ConfigError, match="not found"):
            Config.load("/nonexistent/config.yaml")

    def test_load_invalid_yaml_raises(self, clean_env):
        """Test that invalid YAML raises ConfigError"""
        path = _write_config("invalid: yaml: content: [")
        try:
            with pytest.raises(ConfigError, match="Failed to parse"):
                Config.load(path)
        finally:
            os.unlink(path)

    def test_load_valid_config(self, clean_env):
        """Test loading a valid config file"""
        path = _write_config("""
calendar:
  min_year: 1583
  max_year: 4000
log_level: info
""")
        try:
            config = Config.load(path)
            assert config.calendar.min_year == 1583
            assert config.calendar.max_year == 4000
            assert config.log_level == "INFO"
        finally:
            os.unlink(path)

    def test_load_empty_file_uses_defaults(self, clean_env):
        path = _write_config("")
        try:
            config = Config.load(path)
            assert config.calendar.year_range == YearRange()
        finally:
            os.unlink(path)

    def test_load_non_mapping_raises(self, clean_env):
        path = _write_config("- 1700\n- 2500\n")
        try:
            with pytest.raises(ConfigError, match="Invalid configuration"):
                Config.load(path)
        finally:
            os.unlink(path)

    def test_env_var_overrides_config_file(self, clean_env):
        """Test that environment variables override config file values"""
        path = _write_config("""
calendar:
  min_year: 1800
  max_year: 2200
""")
        try:
            os.environ["DOW_MAX_YEAR"] = "3000"
            os.environ["LOG_LEVEL"] = "ERROR"

            config = Config.load(path)
            # Env vars should override file values
            assert config.calendar.max_year == 3000
            assert config.log_level == "ERROR"
            # File values should remain for non-overridden
            assert config.calendar.min_year == 1800
        finally:
            os.unlink(path)

    def test_env_var_without_file(self, clean_env):
        os.environ["DOW_MIN_YEAR"] = "1600"

        config = Config.load()
        assert config.calendar.min_year == 1600
        assert config.calendar.max_year == 2500


class TestConfigValidation:
    """Test full config validation"""

    def test_inverted_range_in_file(self, clean_env):
        path = _write_config("""
calendar:
  min_year: 2500
  max_year: 1700
""")
        try:
            with pytest.raises(ConfigError, match="Invalid configuration"):
                Config.load(path)
        finally:
            os.unlink(path)

    def test_non_integer_year_rejected(self, clean_env):
        os.environ["DOW_MIN_YEAR"] = "seventeen hundred"

        with pytest.raises(ConfigError, match="Invalid configuration"):
            Config.load()

    def test_scalar_calendar_with_env_override(self, clean_env):
        """Test a non-mapping calendar section is a ConfigError, not a TypeError"""
        path = _write_config("calendar: 5\n")
        try:
            os.environ["DOW_MIN_YEAR"] = "1600"

            with pytest.raises(ConfigError, match="calendar must be a mapping"):
                Config.load(path)
        finally:
            os.unlink(path)

    def test_list_calendar_rejected(self, clean_env):
        path = _write_config("calendar:\n  - 1700\n  - 2500\n")
        try:
            with pytest.raises(ConfigError, match="calendar must be a mapping"):
                Config.load(path)
        finally:
            os.unlink(path)


class TestExampleConfig:
    """Test the shipped example config stays loadable"""

    def test_example_config_loads(self, clean_env):
        from pathlib import Path

        path = Path(__file__).resolve().parent.parent / "config.example.yaml"
        config = Config.load(str(path))

        assert config.calendar.year_range == YearRange(1700, 2500)
        assert config.log_level == "WARNING"

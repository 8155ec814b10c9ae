"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Unit tests for configuration management module.

These tests verify that the configuration module correctly handles environment variables,
validation, and default values for logging and fixture generation.
"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from skillfix.core.config import (
    AppConfig,
    FixtureConfig,
    LoggingConfig,
    get_app_config,
    init_app_config,
)


@pytest.mark.unit
class TestLoggingConfig:
    """Tests for the logging configuration."""

    def test_logging_config_defaults(self):
        """Test that logging config has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "%(message)s"
        assert config.date_format == "[%X]"
        assert config.use_rich is True
        assert config.json_format is False

    def test_logging_config_validation(self):
        """Test that log level validation works."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            assert LoggingConfig(level=level).level == level

        assert LoggingConfig(level="debug").level == "DEBUG"
        assert LoggingConfig(level="INVALID").level == "INFO"

    def test_get_log_level_int(self):
        """Test converting log level to int."""
        assert LoggingConfig(level="DEBUG").get_log_level_int() == logging.DEBUG
        assert LoggingConfig(level="INFO").get_log_level_int() == logging.INFO

    @patch("skillfix.core.logging.configure_logging")
    def test_configure_logging(self, mock_configure):
        """Test that logging configuration is forwarded to the logging module."""
        config = LoggingConfig(level="WARNING", use_rich=False, json_format=True)
        config.configure_logging(debug=True)

        mock_configure.assert_called_once()
        kwargs = mock_configure.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert kwargs["use_rich"] is False
        assert kwargs["json_format"] is True
        assert kwargs["debug"] is True
        assert kwargs["format_string"] == "%(message)s"
        assert kwargs["date_format"] == "[%X]"

    def test_from_env(self, clean_env):
        """Test creating logging config from environment variables."""
        with patch.dict(
            os.environ,
            {"SKILLFIX_LOG_LEVEL": "DEBUG", "SKILLFIX_LOG_JSON": "true", "SKILLFIX_LOG_USE_RICH": "no"},
        ):
            config = LoggingConfig.from_env()
        assert config.level == "DEBUG"
        assert config.json_format is True
        assert config.use_rich is False

    @patch("skillfix.core.logging.configure_logging")
    def test_format_settings_from_env(self, mock_configure, clean_env):
        """Test that format settings from the environment reach the handlers."""
        with patch.dict(
            os.environ,
            {"SKILLFIX_LOG_FORMAT": "%(levelname)s %(message)s", "SKILLFIX_LOG_DATE_FORMAT": "%H:%M"},
        ):
            LoggingConfig.from_env().configure_logging()
        kwargs = mock_configure.call_args.kwargs
        assert kwargs["format_string"] == "%(levelname)s %(message)s"
        assert kwargs["date_format"] == "%H:%M"

    def test_from_env_overrides(self, clean_env):
        """Test that overrides win over environment variables."""
        with patch.dict(os.environ, {"SKILLFIX_LOG_LEVEL": "DEBUG"}):
            config = LoggingConfig.from_env(level="ERROR")
        assert config.level == "ERROR"


@pytest.mark.unit
class TestFixtureConfig:
    """Tests for the fixture configuration."""

    def test_defaults(self, clean_env):
        config = FixtureConfig.from_env()
        assert config.default_count == 10
        assert config.default_profile == "small"
        assert config.seed == 42
        assert config.output_dir.endswith("skillfix_output")

    def test_from_env(self, mock_env_vars):
        with patch.dict(os.environ, {"SKILLFIX_OUTPUT_DIR": "/tmp/fixtures"}):
            config = FixtureConfig.from_env()
        assert config.seed == 7
        assert config.output_dir == "/tmp/fixtures"

    def test_non_numeric_env_count_rejected(self, clean_env):
        with patch.dict(os.environ, {"SKILLFIX_DEFAULT_COUNT": "ten"}):
            with pytest.raises(ValidationError, match="default_count"):
                FixtureConfig.from_env()

    def test_numeric_env_strings_parsed(self, clean_env):
        with patch.dict(os.environ, {"SKILLFIX_DEFAULT_COUNT": "3", "SKILLFIX_SEED": "11"}):
            config = FixtureConfig.from_env()
        assert config.default_count == 3
        assert config.seed == 11

    def test_negative_default_count_rejected(self):
        with pytest.raises(ValidationError):
            FixtureConfig(default_count=-1)

    def test_unknown_profile_rejected(self):
        with pytest.raises(ValidationError, match="Unknown profile"):
            FixtureConfig(default_profile="giant")

    def test_profile_normalized(self):
        assert FixtureConfig(default_profile="Medium").default_profile == "medium"


@pytest.mark.unit
class TestAppConfig:
    """Tests for the application configuration."""

    def test_defaults(self, clean_env):
        config = AppConfig.from_env()
        assert config.debug is False
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.fixtures, FixtureConfig)

    def test_nested_overrides_accept_dicts(self, clean_env):
        config = AppConfig.from_env(fixtures={"default_count": 3}, debug=True)
        assert config.fixtures.default_count == 3
        assert config.debug is True

    def test_debug_from_env(self, clean_env):
        with patch.dict(os.environ, {"SKILLFIX_DEBUG": "true"}):
            assert AppConfig.from_env().debug is True

    @patch("skillfix.core.logging.configure_logging")
    def test_configure_logging_uses_debug_flag(self, mock_configure, clean_env):
        AppConfig.from_env(debug=True).configure_logging()
        assert mock_configure.call_args.kwargs["debug"] is True

    def test_global_config(self, clean_env, reset_app_config):
        first = get_app_config()
        assert get_app_config() is first

        replacement = init_app_config(app_version="9.9.9")
        assert replacement.app_version == "9.9.9"
        assert get_app_config() is replacement

    def test_init_with_instance(self, clean_env, reset_app_config):
        config = AppConfig()
        assert init_app_config(config) is config

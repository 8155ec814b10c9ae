"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Configuration management for SKILLFIX.

This module provides a central location for all configuration settings. It
handles environment variables, default values, and validation of configuration
parameters for logging and fixture generation.
"""

import logging
import os
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig(BaseModel):
    """Base configuration class with common functionality."""

    ENV_PREFIX: ClassVar[str] = "SKILLFIX_"

    @classmethod
    def from_env(cls, **overrides) -> "BaseConfig":
        """
        Create a configuration instance from environment variables.

        Args:
        ----
            **overrides: Key-value pairs that override environment variables

        Returns:
        -------
            An instance of the configuration class

        """
        raise NotImplementedError("Subclasses must implement from_env method")

    @classmethod
    def get_env_var(cls, key: str, default: Any = None) -> Any:
        """
        Get an environment variable with the class prefix.

        Args:
        ----
            key: Key name without prefix
            default: Default value if environment variable is not found

        Returns:
        -------
            The environment variable value or default

        """
        env_key = f"{cls.ENV_PREFIX}{key.upper()}"
        return os.environ.get(env_key, default)


class LoggingConfig(BaseConfig):
    """Configuration for logging settings."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(
        default="%(message)s",
        description="Logging format string",
    )
    date_format: str = Field(
        default="[%X]",
        description="Date format for logging timestamps",
    )
    use_rich: bool = Field(
        default=True,
        description="Whether to use rich for logging formatting",
    )
    log_file: str | None = Field(
        default=None,
        description="Path to the log file (None for console-only logging)",
    )
    json_format: bool = Field(
        default=False,
        description="Whether to use JSON format for logs",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value):
        """Validate that the log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        value = value.upper()
        if value not in valid_levels:
            logger.warning(f"Invalid log level '{value}', defaulting to INFO")
            return "INFO"
        return value

    @classmethod
    def from_env(cls, **overrides) -> "LoggingConfig":
        """Create a logging configuration from environment variables."""
        config = {
            "level": cls.get_env_var("LOG_LEVEL", "INFO"),
            "format": cls.get_env_var("LOG_FORMAT", "%(message)s"),
            "date_format": cls.get_env_var("LOG_DATE_FORMAT", "[%X]"),
            "use_rich": _env_flag(cls.get_env_var("LOG_USE_RICH", "true")),
            "log_file": cls.get_env_var("LOG_FILE", None),
            "json_format": _env_flag(cls.get_env_var("LOG_JSON", "false")),
        }

        config.update(overrides)

        return cls(**config)

    def get_log_level_int(self) -> int:
        """Get the numeric logging level."""
        return getattr(logging, self.level)

    def configure_logging(self, debug: bool = False) -> None:
        """
        Configure logging based on the settings.

        Args:
        ----
            debug: Whether to force debug mode

        """
        from skillfix.core.logging import configure_logging as configure_contextual_logging

        configure_contextual_logging(
            level=self.get_log_level_int(),
            log_file=self.log_file,
            json_format=self.json_format,
            include_timestamp=True,
            use_rich=self.use_rich,
            debug=debug,
            format_string=self.format,
            date_format=self.date_format,
        )


class FixtureConfig(BaseConfig):
    """Configuration for fixture generation defaults."""

    default_count: int = Field(
        default=10,
        description="Number of records generated when no count is given",
        ge=0,
    )
    default_profile: str = Field(
        default="small",
        description="Profile used when no profile or count is given",
    )
    seed: int = Field(
        default=42,
        description="Seed for the random attributes of detailed records",
    )
    output_dir: str = Field(
        default_factory=lambda: os.path.join(os.getcwd(), "skillfix_output"),
        description="Directory for written fixtures and benchmark results",
    )

    @field_validator("default_profile")
    @classmethod
    def validate_profile(cls, value):
        """Validate that the default profile is registered."""
        from skillfix.profiles import PROFILES

        value = value.lower()
        if value not in PROFILES:
            raise ValueError(
                f"Unknown profile '{value}'. Expected one of: {', '.join(sorted(PROFILES))}",
            )
        return value

    @classmethod
    def from_env(cls, **overrides) -> "FixtureConfig":
        """Create a fixture configuration from environment variables."""
        config = {
            "default_count": cls.get_env_var("DEFAULT_COUNT", "10"),
            "default_profile": cls.get_env_var("DEFAULT_PROFILE", "small"),
            "seed": cls.get_env_var("SEED", "42"),
        }
        output_dir = cls.get_env_var("OUTPUT_DIR")
        if output_dir:
            config["output_dir"] = output_dir

        config.update(overrides)

        return cls(**config)


class AppConfig(BaseConfig):
    """Main application configuration that aggregates all other configurations."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    fixtures: FixtureConfig = Field(
        default_factory=FixtureConfig,
        description="Fixture generation configuration",
    )
    debug: bool = Field(
        default=False,
        description="Debug mode flag",
    )
    app_version: str = Field(
        default="0.0.0",
        description="Application version",
    )

    @classmethod
    def from_env(cls, **overrides) -> "AppConfig":
        """Create an application configuration from environment variables."""
        config = {
            "logging": LoggingConfig.from_env(),
            "fixtures": FixtureConfig.from_env(),
            "debug": _env_flag(cls.get_env_var("DEBUG", "false")),
            "app_version": cls.get_env_var("APP_VERSION", "0.0.0"),
        }

        nested = {"logging": LoggingConfig, "fixtures": FixtureConfig}
        for key, value in overrides.items():
            # Nested configs accept either a raw dict or an instance
            if key in nested and isinstance(value, dict):
                config[key] = nested[key](**value)
            else:
                config[key] = value

        return cls(**config)

    def configure_logging(self) -> None:
        """Configure logging based on the settings."""
        self.logging.configure_logging(debug=self.debug)


# Global app configuration
_app_config = None


def get_app_config() -> AppConfig:
    """
    Get the global application configuration.

    Returns
    -------
        The application configuration instance

    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.from_env()
    return _app_config


def init_app_config(config: AppConfig = None, **kwargs) -> AppConfig:
    """
    Initialize the global application configuration.

    Args:
    ----
        config: An existing AppConfig instance
        **kwargs: Key-value pairs for creating a new AppConfig

    Returns:
    -------
        The application configuration instance

    """
    global _app_config
    _app_config = config if config is not None else AppConfig.from_env(**kwargs)
    return _app_config

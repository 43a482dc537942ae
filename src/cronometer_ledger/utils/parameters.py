"""
Configuration and parameter loading using Pydantic.

This module provides centralized configuration management for the entire application.
Parameters are loaded from YAML (or the environment) and validated using Pydantic models.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cronometer_ledger.utils.exceptions import ConfigurationError
from cronometer_ledger.utils.timezone_utils import DEFAULT_TIMEZONE, resolve_timezone

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ProcessingConfig(BaseModel):
    """Data processing configuration."""

    timezone: str = Field(DEFAULT_TIMEZONE, description="Zone of the export Day/Time columns")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            resolve_timezone(value)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e
        return value


class CSVConfig(BaseModel):
    """CSV reading configuration."""

    encoding: str = "utf-8-sig"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    console: bool = True

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level: {value} (expected one of {LOG_LEVELS})")
        return level


class AppConfig(BaseSettings):
    """Main application configuration."""

    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    csv: CSVConfig = Field(default_factory=CSVConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="CRONOMETER_", env_nested_delimiter="__", case_sensitive=False
    )


class ParameterLoader:
    """
    Centralized parameter loader for the application.

    Loads and validates configuration from YAML files using Pydantic models.
    Provides type-safe access to all configuration parameters.
    """

    def __init__(self, config_path: str | None = "config/config.yaml") -> None:
        """
        Initialize parameter loader.

        Args:
            config_path: Path to the YAML configuration file, or None to use
                defaults and environment variables only.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.config: AppConfig
        self._load_config()

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        if self.config_path is None:
            try:
                self.config = AppConfig()
            except Exception as e:
                raise ConfigurationError(f"Failed to load configuration: {e}") from e
            return

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            self.config = AppConfig(**config_dict)

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def get_processing_config(self) -> ProcessingConfig:
        """Get data processing configuration."""
        return self.config.processing

    def get_csv_config(self) -> CSVConfig:
        """Get CSV reading configuration."""
        return self.config.csv

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def get_raw_config(self) -> dict[str, Any]:
        """
        Get raw configuration dictionary.

        Returns:
            Dictionary representation of the configuration.
        """
        return self.config.model_dump()

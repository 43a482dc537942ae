"""Unit tests for configuration loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from cronometer_ledger.utils.exceptions import ConfigurationError
from cronometer_ledger.utils.logging_config import setup_logging
from cronometer_ledger.utils.parameters import LoggingConfig, ParameterLoader


def test_load_yaml_config(tmp_path: Path) -> None:
    """Test loading configuration from a YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "processing:\n"
        "  timezone: America/Santiago\n"
        "csv:\n"
        "  encoding: utf-8\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  console: false\n",
        encoding="utf-8",
    )

    loader = ParameterLoader(str(config_file))

    if loader.get_processing_config().timezone != "America/Santiago":
        raise AssertionError("Expected timezone from YAML")
    if loader.get_csv_config().encoding != "utf-8":
        raise AssertionError("Expected encoding from YAML")
    if loader.get_logging_config().level != "DEBUG":
        raise AssertionError("Expected logging level from YAML")
    if loader.get_raw_config()["logging"]["console"] is not False:
        raise AssertionError("Expected console disabled in raw config")


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    """Test that an empty configuration file falls back to defaults."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("", encoding="utf-8")

    loader = ParameterLoader(str(config_file))

    if loader.get_processing_config().timezone != "UTC":
        raise AssertionError("Expected default UTC timezone")
    if loader.get_csv_config().encoding != "utf-8-sig":
        raise AssertionError("Expected default utf-8-sig encoding")


def test_defaults_and_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading without a file, overridden from the environment."""
    monkeypatch.setenv("CRONOMETER_PROCESSING__TIMEZONE", "Europe/Madrid")

    loader = ParameterLoader(None)

    if loader.get_processing_config().timezone != "Europe/Madrid":
        raise AssertionError("Expected timezone from environment")


def test_missing_config_file(tmp_path: Path) -> None:
    """Test that a missing configuration file is reported."""
    with pytest.raises(ConfigurationError, match="not found"):
        ParameterLoader(str(tmp_path / "missing.yaml"))


def test_invalid_yaml(tmp_path: Path) -> None:
    """Test that malformed YAML is a configuration error."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("processing: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ParameterLoader(str(config_file))


def test_unknown_timezone_in_config(tmp_path: Path) -> None:
    """Test that an unknown timezone fails validation."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("processing:\n  timezone: Nowhere/Special\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Nowhere/Special"):
        ParameterLoader(str(config_file))


def test_setup_logging_file_handler(tmp_path: Path) -> None:
    """Test logging setup with a file handler only."""
    log_file = tmp_path / "logs" / "ledger.log"
    config = LoggingConfig(level="debug", console=False, file=str(log_file))

    logger = setup_logging(config, "cronometer_ledger.tests")
    try:
        logger.debug("hello")

        if logger.level != logging.DEBUG:
            raise AssertionError(f"Expected DEBUG level, got {logger.level}")
        if len(logger.handlers) != 1:
            raise AssertionError(f"Expected one handler, got {logger.handlers}")

        logger.handlers[0].flush()
        if "hello" not in log_file.read_text(encoding="utf-8"):
            raise AssertionError("Expected message in log file")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_logging_level_normalized() -> None:
    """Test that level names are accepted case-insensitively."""
    config = LoggingConfig(level="warning")
    if config.level != "WARNING":
        raise AssertionError(f"Expected 'WARNING', got {config.level!r}")


def test_unknown_logging_level_in_config(tmp_path: Path) -> None:
    """Test that an unknown logging level fails validation."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  level: verbose\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="verbose"):
        ParameterLoader(str(config_file))

    with pytest.raises(ValidationError):
        LoggingConfig(level="verbose")

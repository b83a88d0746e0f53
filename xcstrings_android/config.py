"""Configuration loading and validation for the xcstrings to Android converter."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class ConversionConfig:
    """What to convert and where to put the result."""

    xcstrings_path: str = "./Localizable.xcstrings"
    output_root: str = "./app/src/main/res"
    app_name: str = ""
    only_language: str | None = None


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    """Top-level application configuration."""

    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(
    config_path: str = "config.yaml",
    required: bool = True,
    validate: bool = True,
) -> AppConfig:
    """Load configuration from a YAML file.

    Environment variables XCSTRINGS_ANDROID_OUTPUT_ROOT and
    XCSTRINGS_ANDROID_APP_NAME override the values in the config file.

    Args:
        config_path: Path to the YAML configuration file.
        required: When False, a missing file yields the defaults.
        validate: When False, the caller validates after applying its own overrides.

    Returns:
        Validated AppConfig instance.

    Raises:
        FileNotFoundError: If the config file is required and does not exist.
        ValueError: If configuration values are invalid.
    """
    path = Path(config_path)
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    elif required:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    else:
        raw = {}

    conv_raw = raw.get("conversion", {})
    conversion = ConversionConfig(
        xcstrings_path=conv_raw.get("xcstrings_path", ConversionConfig.xcstrings_path),
        output_root=conv_raw.get("output_root", ConversionConfig.output_root),
        app_name=conv_raw.get("app_name", ConversionConfig.app_name),
        only_language=conv_raw.get("only_language", ConversionConfig.only_language),
    )

    # Environment variable overrides
    env_output_root = os.environ.get("XCSTRINGS_ANDROID_OUTPUT_ROOT")
    if env_output_root:
        conversion.output_root = env_output_root

    env_app_name = os.environ.get("XCSTRINGS_ANDROID_APP_NAME")
    if env_app_name:
        conversion.app_name = env_app_name

    log_raw = raw.get("logging", {})
    logging_config = LoggingConfig(level=str(log_raw.get("level", LoggingConfig.level)).upper())

    config = AppConfig(conversion=conversion, logging=logging_config)
    if validate:
        validate_config(config)
    return config


def validate_config(config: AppConfig) -> None:
    """Validate that all required configuration values are present.

    Args:
        config: The configuration to validate.

    Raises:
        ValueError: If validation fails.
    """
    if not config.conversion.xcstrings_path:
        raise ValueError("xcstrings_path must not be empty.")

    if not config.conversion.output_root:
        raise ValueError("output_root must not be empty.")

    if config.conversion.only_language is not None and not config.conversion.only_language:
        raise ValueError("only_language must not be empty when set.")

    if not isinstance(logging.getLevelName(config.logging.level), int):
        raise ValueError(f"Unknown logging level: {config.logging.level}")

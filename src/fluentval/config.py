"""Configuration management for fluentval using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fluentval.enums import CascadeMode

CONFIG_FILE_NAME = ".fluentval.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationSettings(BaseModel):
    """Defaults applied to rule chains built by a Validator."""
    default_cascade: CascadeMode = Field(alias="defaultCascade", default=CascadeMode.CONTINUE)
    max_url_length: int = Field(alias="maxUrlLength", default=2048)

    @field_validator("max_url_length")
    @classmethod
    def validate_max_url_length(cls, v):
        if v < 1:
            raise ValueError("max_url_length must be >= 1")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class FluentValConfig(BaseModel):
    """Complete fluentval configuration model."""
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> FluentValConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .fluentval.json

    Returns:
        FluentValConfig: Loaded and validated configuration

    Raises:
        ValueError: If the configuration file is not valid JSON or holds invalid values
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return FluentValConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .fluentval.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> FluentValConfig:
    """Create default configuration."""
    return FluentValConfig()

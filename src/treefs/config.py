"""User configuration loaded from YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treefs.directory import DEFAULT_MODE

# Default configuration location
CONFIG_FILE = Path.home() / ".treefs.yaml"

# Environment variable overriding CONFIG_FILE
CONFIG_ENV = "TREEFS_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    directory_mode: int = Field(default=DEFAULT_MODE, alias="directoryMode")
    log_level: str = Field(default="WARNING", alias="logLevel")

    @field_validator("directory_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        # quoted modes arrive as octal strings
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("directory_mode")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"Invalid directory mode: {value:o}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Supported: {list(LOG_LEVELS)}")
        return level

    @classmethod
    def from_file(cls, path: Path) -> Settings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed Settings. An empty file yields the defaults.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the YAML or its values are invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, $TREEFS_CONFIG or ~/.treefs.yaml.

    An explicit path must exist; the default locations are optional.
    """
    if path is not None:
        return Settings.from_file(path)

    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Settings.from_file(Path(env_path))

    if CONFIG_FILE.exists():
        return Settings.from_file(CONFIG_FILE)
    return Settings()

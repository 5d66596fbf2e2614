"""Configuration models for worker-nodes."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load defaults from external YAML file
_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from YAML file."""
    if not _DEFAULTS_PATH.exists():
        msg = f"Defaults file not found at {_DEFAULTS_PATH}"
        raise FileNotFoundError(msg)
    with _DEFAULTS_PATH.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        msg = f"Defaults file must contain a YAML dictionary, got {type(data)}"
        raise TypeError(msg)

    return data


_DEFAULTS = _load_defaults()

# Per-field defaults of the pool options, keyed by attribute name.
POOL_DEFAULTS: dict[str, Any] = dict(_DEFAULTS["pool"])


class Constants(BaseSettings):
    """Process-wide constants.

    Values are loaded from defaults.yaml but can be overridden by environment variables
    (e.g., WORKER_NODES_MAX_CONFIG_SIZE).
    """

    model_config = SettingsConfigDict(extra="forbid", env_prefix="WORKER_NODES_")

    default_version: str = _DEFAULTS["version"]
    default_log_level: str = _DEFAULTS["log_level"]
    default_log_format: str = _DEFAULTS["log_format"]
    max_config_size: int = _DEFAULTS["max_config_size"]


CONSTANTS = Constants()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        CONSTANTS.default_log_level,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(default=CONSTANTS.default_log_format, description="Log message format")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return v.upper()

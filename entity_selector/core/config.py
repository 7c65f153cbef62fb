"""
Configuration management for entity selectors.

Provides the settings schema, validation, and loading from JSON files.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SelectorSettings(BaseModel):
    """Selector parsing and evaluation settings."""

    model_config = {"extra": "forbid", "frozen": True}  # Reject unknown fields

    player_type_id: str = Field(
        default="minecraft:player",
        description="Entity type id forced by the @a, @p and @r symbols",
    )
    default_namespace: str = Field(
        default="minecraft",
        description="Namespace prefixed onto entity type ids written without one",
    )
    hotbar_size: int = Field(
        default=9, description="Number of leading player inventory slots reported as slot.hotbar"
    )
    default_random_count: int = Field(
        default=1, description="Sample size of @r when no c argument is given"
    )
    strip_formatting: bool = Field(
        default=True, description="Strip section-sign formatting codes in formatted messages"
    )
    log_level: str = Field(default="INFO", description="Level of the entity_selector logger")
    log_file: Optional[str] = Field(default=None, description="Path to log file")

    @field_validator("player_type_id")
    @classmethod
    def validate_player_type_id(cls, v: str) -> str:
        """Validate player type id is namespaced."""
        if ":" not in v:
            raise ValueError(f"player_type_id must be namespaced, got: {v}")
        return v

    @field_validator("default_namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Validate namespace has no separator."""
        v = v.strip()
        if not v or ":" in v:
            raise ValueError(f"Invalid namespace: {v!r}")
        return v

    @field_validator("hotbar_size", "default_random_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate count-like settings."""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v_upper = v.strip().upper()
        if v_upper not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got: {v}")
        return v_upper

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


DEFAULT_SETTINGS = SelectorSettings()


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[SelectorSettings]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, error_message, settings_object)
    """
    try:
        if not config_path.exists():
            return False, f"Configuration file not found: {config_path}", None

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

        if not isinstance(config_data, dict):
            return False, "Configuration root must be a JSON object", None

        return True, None, SelectorSettings(**config_data)

    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except ValueError as e:
        return False, f"Validation error: {str(e)}", None
    except OSError as e:
        return False, f"Unreadable configuration: {str(e)}", None


def load_settings(config_path: Optional[Union[str, Path]] = None) -> SelectorSettings:
    """
    Load and validate settings.

    Args:
        config_path: Path to a JSON settings file; defaults are used when None

    Returns:
        SelectorSettings object

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    if config_path is None:
        return DEFAULT_SETTINGS
    is_valid, error, settings = validate_config(Path(config_path))
    if not is_valid or settings is None:
        raise ConfigurationError(
            error or "Invalid configuration", details={"path": str(config_path)}
        )
    return settings

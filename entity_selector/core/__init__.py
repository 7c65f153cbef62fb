"""
Core functionality for entity selectors: exceptions and configuration.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .config import DEFAULT_SETTINGS, SelectorSettings, load_settings, validate_config
from .exceptions import (
    ArgumentError,
    ConfigurationError,
    ResolutionError,
    SelectorError,
    SelectorSyntaxError,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "SelectorSettings",
    "load_settings",
    "validate_config",
    "ArgumentError",
    "ConfigurationError",
    "ResolutionError",
    "SelectorError",
    "SelectorSyntaxError",
]

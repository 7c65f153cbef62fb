"""
Unified logging package: format with importance (0-10) for selector log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from entity_selector.logging.unified_logging import (
    DEFAULT_IMPORTANCE,
    LEVEL_TO_IMPORTANCE,
    PACKAGE_LOGGER_NAME,
    UNIFIED_DATE_FMT,
    UNIFIED_FORMAT_STR,
    UnifiedFormatter,
    configure_logging,
    create_unified_formatter,
    importance_from_level,
)

__all__ = [
    "DEFAULT_IMPORTANCE",
    "LEVEL_TO_IMPORTANCE",
    "PACKAGE_LOGGER_NAME",
    "UNIFIED_DATE_FMT",
    "UNIFIED_FORMAT_STR",
    "UnifiedFormatter",
    "configure_logging",
    "create_unified_formatter",
    "importance_from_level",
]

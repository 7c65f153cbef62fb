"""
Entity Selector

Parser and evaluator for ``@e``/``@a``/``@p``/``@r``/``@s`` entity selectors
running against any entity pool that implements the world capability
interface.

Can be used as a library; an in-memory world is included for tests and
simulations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

from .core import (
    ArgumentError,
    ConfigurationError,
    ResolutionError,
    SelectorError,
    SelectorSettings,
    SelectorSyntaxError,
    load_settings,
)
from .rawtext import RawTextFormatter, format_raw_message
from .selector import (
    Coordinate,
    CountKind,
    CountSelector,
    EntitySelector,
    ExecutionContext,
    FloatRange,
    GameMode,
    IntRange,
    ItemCondition,
    ParsedSelector,
    Position,
    Query,
    Rotation,
    RotationRange,
    ScoreFilter,
    SelectorSymbol,
    Vector3,
    evaluate,
    parse_item_conditions,
    parse_selector,
)
from .world import (
    Entity,
    EntityPool,
    MemoryEntity,
    MemoryItemStack,
    MemoryScoreboard,
    Scoreboard,
    WorldServices,
    memory_world,
)

__all__ = [
    # Core
    "ArgumentError",
    "ConfigurationError",
    "ResolutionError",
    "SelectorError",
    "SelectorSettings",
    "SelectorSyntaxError",
    "load_settings",
    # Selectors
    "Coordinate",
    "CountKind",
    "CountSelector",
    "EntitySelector",
    "ExecutionContext",
    "FloatRange",
    "GameMode",
    "IntRange",
    "ItemCondition",
    "ParsedSelector",
    "Position",
    "Query",
    "Rotation",
    "RotationRange",
    "ScoreFilter",
    "SelectorSymbol",
    "Vector3",
    "evaluate",
    "parse_item_conditions",
    "parse_selector",
    # World
    "Entity",
    "EntityPool",
    "MemoryEntity",
    "MemoryItemStack",
    "MemoryScoreboard",
    "Scoreboard",
    "WorldServices",
    "memory_world",
    # Raw messages
    "RawTextFormatter",
    "format_raw_message",
]

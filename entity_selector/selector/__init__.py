"""
Entity selectors - ``@e[type=pig,r=10]``-style queries over an entity pool.

Public API:
  - parse_selector(selector: str) -> ParsedSelector
  - EntitySelector(selector: str, settings=None).get_entities(context) -> list[Entity]
  - evaluate(selector: str, context: ExecutionContext) -> list[Entity]
  - parse_item_conditions(value: str) -> tuple[ItemCondition, ...]

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .ast import (
    Coordinate,
    CountKind,
    CountSelector,
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
)
from .executor import EntitySelector, ExecutionContext, evaluate
from .item_conditions import parse_item_conditions
from .parser import parse_arguments, parse_game_mode, parse_selector
from .ranges import parse_range
from .tokenizer import split_arguments

__all__ = [
    "Coordinate",
    "CountKind",
    "CountSelector",
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
    "EntitySelector",
    "ExecutionContext",
    "evaluate",
    "parse_item_conditions",
    "parse_arguments",
    "parse_game_mode",
    "parse_selector",
    "parse_range",
    "split_arguments",
]

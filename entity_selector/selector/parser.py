"""
Selector parser: selector shape plus argument interpretation.

Supported features:
- Shapes: ``@e``/``@a``/``@p``/``@r``/``@s`` with optional ``[args]``, or bare ``[args]`` (``@e``)
- Arguments: type, name, tag, family, m, l, lm, x, y, z, dx, dy, dz, r, rm,
  c, rx, rxm, ry, rym, scores, hasitem
- ``!`` negation for type, name, tag, family, m and score ranges
- ``~`` relative coordinates for x/y/z

Notes:
- Parsing is total. A malformed selector falls back to ``@e`` with no
  constraints; a malformed argument is skipped. Both are logged as warnings.
- Values may be wrapped in double quotes.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Callable, Optional

from ..core.exceptions import ArgumentError, SelectorSyntaxError
from .ast import (
    Coordinate,
    CountSelector,
    FloatRange,
    GameMode,
    IntRange,
    ItemCondition,
    ParsedSelector,
    Position,
    Query,
    RotationRange,
    ScoreFilter,
    SelectorSymbol,
    Vector3,
)
from .item_conditions import parse_item_conditions
from .ranges import parse_float, parse_int, parse_range
from .tokenizer import split_arguments, split_assignment

logger = logging.getLogger(__name__)

_SELECTOR_RE = re.compile(r"^@([aeprs])(?:\[(.*)\])?$", re.DOTALL)
_ARGS_ONLY_RE = re.compile(r"^\[(.*)\]$", re.DOTALL)

_GAME_MODE_ALIASES = {
    "survival": GameMode.SURVIVAL,
    "s": GameMode.SURVIVAL,
    "0": GameMode.SURVIVAL,
    "default": GameMode.SURVIVAL,
    "d": GameMode.SURVIVAL,
    "5": GameMode.SURVIVAL,
    "creative": GameMode.CREATIVE,
    "c": GameMode.CREATIVE,
    "1": GameMode.CREATIVE,
    "adventure": GameMode.ADVENTURE,
    "a": GameMode.ADVENTURE,
    "2": GameMode.ADVENTURE,
    "spectator": GameMode.SPECTATOR,
    "6": GameMode.SPECTATOR,
}


def parse_game_mode(value: str) -> GameMode:
    """
    Parse a game mode literal or abbreviation.

    Raises:
        ArgumentError
    """
    mode = _GAME_MODE_ALIASES.get(value.strip().lower())
    if mode is None:
        raise ArgumentError(f"Unknown game mode: {value}", argument=value)
    return mode


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _split_negation(value: str) -> tuple[bool, str]:
    value = _unquote(value)
    if value.startswith("!"):
        return True, _unquote(value[1:].strip())
    return False, value


def _require_float(key: str, value: str) -> float:
    number = parse_float(value)
    if number is None:
        raise ArgumentError(f"'{key}' expects a number, got: {value}", argument=value)
    return number


def _require_int(key: str, value: str) -> int:
    number = parse_int(value)
    if number is None:
        raise ArgumentError(f"'{key}' expects an integer, got: {value}", argument=value)
    return number


def _parse_coordinate(key: str, value: str) -> Coordinate:
    if value.startswith("~"):
        offset = value[1:].strip()
        return Coordinate(_require_float(key, offset) if offset else 0.0, relative=True)
    return Coordinate(_require_float(key, value))


class _QueryBuilder:
    """Mutable accumulator that interprets arguments into a Query."""

    def __init__(self) -> None:
        self.type: Optional[str] = None
        self.exclude_types: list[str] = []
        self.name: Optional[str] = None
        self.exclude_names: list[str] = []
        self.tags: set[str] = set()
        self.exclude_tags: set[str] = set()
        self.families: set[str] = set()
        self.exclude_families: set[str] = set()
        self.game_mode: Optional[GameMode] = None
        self.exclude_game_modes: set[GameMode] = set()
        self.level_range = IntRange()
        self.origin: Optional[Position] = None
        self.volume: Optional[Vector3] = None
        self.distance_range = FloatRange()
        self.rotation_range = RotationRange()
        self.count_selector: Optional[CountSelector] = None
        self.score_filters: list[ScoreFilter] = []
        self.has_item_filters: list[ItemCondition] = []

        self._handlers: dict[str, Callable[[str, str], None]] = {
            "type": self._type,
            "name": self._name,
            "tag": self._tag,
            "family": self._family,
            "m": self._game_mode,
            "l": self._level,
            "lm": self._level,
            "x": self._axis,
            "y": self._axis,
            "z": self._axis,
            "dx": self._volume,
            "dy": self._volume,
            "dz": self._volume,
            "r": self._distance,
            "rm": self._distance,
            "c": self._count,
            "rx": self._rotation,
            "rxm": self._rotation,
            "ry": self._rotation,
            "rym": self._rotation,
            "scores": self._scores,
            "hasitem": self._hasitem,
        }

    def apply(self, key: str, value: str) -> None:
        handler = self._handlers.get(key)
        if handler is None:
            raise ArgumentError(f"Unsupported selector argument: {key}", argument=key)
        handler(key, value)

    def _type(self, _key: str, value: str) -> None:
        negated, value = _split_negation(value)
        if negated:
            self.exclude_types.append(value)
        else:
            self.type = value

    def _name(self, _key: str, value: str) -> None:
        negated, value = _split_negation(value)
        if negated:
            self.exclude_names.append(value)
        else:
            self.name = value

    def _tag(self, _key: str, value: str) -> None:
        negated, value = _split_negation(value)
        (self.exclude_tags if negated else self.tags).add(value)

    def _family(self, _key: str, value: str) -> None:
        negated, value = _split_negation(value)
        (self.exclude_families if negated else self.families).add(value)

    def _game_mode(self, _key: str, value: str) -> None:
        negated, value = _split_negation(value)
        mode = parse_game_mode(value)
        if negated:
            self.exclude_game_modes.add(mode)
        else:
            self.game_mode = mode

    def _level(self, key: str, value: str) -> None:
        level = _require_int(key, _unquote(value))
        if key == "l":
            self.level_range = replace(self.level_range, max=level)
        else:
            self.level_range = replace(self.level_range, min=level)

    def _axis(self, key: str, value: str) -> None:
        coordinate = _parse_coordinate(key, _unquote(value))
        self.origin = replace(self.origin or Position(), **{key: coordinate})

    def _volume(self, key: str, value: str) -> None:
        extent = _require_float(key, _unquote(value))
        self.volume = replace(self.volume or Vector3(), **{key[1]: extent})

    def _distance(self, key: str, value: str) -> None:
        distance = _require_float(key, _unquote(value))
        if key == "r":
            self.distance_range = replace(self.distance_range, max=distance)
        else:
            self.distance_range = replace(self.distance_range, min=distance)

    def _count(self, key: str, value: str) -> None:
        count = _require_int(key, _unquote(value))
        selector = CountSelector.from_signed(count)
        if selector is None:
            logger.debug("Ignoring c=0")
            return
        self.count_selector = selector

    def _rotation(self, key: str, value: str) -> None:
        angle = _require_float(key, _unquote(value))
        pitch = self.rotation_range.pitch
        yaw = self.rotation_range.yaw
        if key == "rx":
            pitch = replace(pitch, max=angle)
        elif key == "rxm":
            pitch = replace(pitch, min=angle)
        elif key == "ry":
            yaw = replace(yaw, max=angle)
        else:
            yaw = replace(yaw, min=angle)
        self.rotation_range = RotationRange(pitch=pitch, yaw=yaw)

    def _scores(self, key: str, value: str) -> None:
        if not (value.startswith("{") and value.endswith("}")):
            raise ArgumentError("scores value must be '{objective=range,...}'", argument=value)
        for entry in split_arguments(value[1:-1]):
            objective, raw_range = split_assignment(entry)
            objective = _unquote(objective)
            if not objective:
                logger.warning("Skipping malformed score entry: %s", entry)
                continue
            negated, raw_range = _split_negation(raw_range)
            score_range = parse_range(raw_range)
            if score_range is None or score_range.is_unbounded:
                logger.warning("Skipping score entry without a usable range: %s", entry)
                continue
            self.score_filters.append(
                ScoreFilter(
                    objective=objective,
                    min_score=score_range.min,
                    max_score=score_range.max,
                    exclude=negated,
                )
            )

    def _hasitem(self, _key: str, value: str) -> None:
        self.has_item_filters.extend(parse_item_conditions(value))

    def build(self) -> Query:
        return Query(
            type=self.type,
            exclude_types=tuple(self.exclude_types),
            name=self.name,
            exclude_names=tuple(self.exclude_names),
            tags=frozenset(self.tags),
            exclude_tags=frozenset(self.exclude_tags),
            families=frozenset(self.families),
            exclude_families=frozenset(self.exclude_families),
            game_mode=self.game_mode,
            exclude_game_modes=frozenset(self.exclude_game_modes),
            level_range=self.level_range,
            origin=self.origin,
            volume=self.volume,
            distance_range=self.distance_range,
            rotation_range=self.rotation_range,
            count_selector=self.count_selector,
            score_filters=tuple(self.score_filters),
            has_item_filters=tuple(self.has_item_filters),
        )


def parse_arguments(args_text: str, *, selector: str = "") -> Query:
    """
    Interpret a raw argument list (the text between the outer brackets).

    Bad arguments are logged and skipped; this never raises.
    """
    builder = _QueryBuilder()
    for token in split_arguments(args_text):
        key, value = split_assignment(token)
        if not key:
            logger.warning("Invalid selector argument %r in %s", token, selector or args_text)
            continue
        try:
            builder.apply(key, value)
        except ArgumentError as e:
            logger.warning("Skipping selector argument %r in %s: %s", token, selector or args_text, e)
    return builder.build()


def _match_shape(text: str) -> tuple[SelectorSymbol, Optional[str]]:
    match = _SELECTOR_RE.match(text)
    if match:
        return SelectorSymbol("@" + match.group(1)), match.group(2)
    match = _ARGS_ONLY_RE.match(text)
    if match:
        return SelectorSymbol.ALL, match.group(1)
    raise SelectorSyntaxError(f"Invalid selector: {text}", selector=text)


def parse_selector(selector: str) -> ParsedSelector:
    """
    Parse a selector string into its symbol and query.

    Total: an unrecognised shape yields ``@e`` without constraints.
    """
    text = (selector or "").strip()
    try:
        symbol, args_text = _match_shape(text)
    except SelectorSyntaxError as e:
        logger.warning("%s; falling back to @e", e)
        return ParsedSelector(source=text)

    query = parse_arguments(args_text, selector=text) if args_text else Query()
    return ParsedSelector(symbol=symbol, query=query, source=text)

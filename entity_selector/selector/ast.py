"""
Selector query models.

These data structures represent a parsed entity selector. All of them are
immutable: a Query is built once per selector string and shared freely
between evaluations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SelectorSymbol(str, Enum):
    """Selector prefix choosing the base candidate strategy."""

    ALL = "@e"
    PLAYER = "@a"
    NEAREST_PLAYER = "@p"
    RANDOM_PLAYER = "@r"
    SELF = "@s"


class GameMode(str, Enum):
    """Player game mode."""

    SURVIVAL = "survival"
    CREATIVE = "creative"
    ADVENTURE = "adventure"
    SPECTATOR = "spectator"


class CountKind(str, Enum):
    """Direction of a `c` count limit."""

    CLOSEST = "closest"
    FARTHEST = "farthest"


@dataclass(frozen=True)
class Vector3:
    """A point or extent in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_squared(self, other: "Vector3") -> float:
        d = self - other
        return d.x * d.x + d.y * d.y + d.z * d.z


@dataclass(frozen=True)
class Rotation:
    """Entity view rotation in degrees (pitch is vertical, yaw horizontal)."""

    pitch: float = 0.0
    yaw: float = 0.0


@dataclass(frozen=True)
class Coordinate:
    """A single origin axis: absolute value, or offset from the context (`~`)."""

    value: float = 0.0
    relative: bool = False

    def resolve(self, base: float) -> float:
        return base + self.value if self.relative else self.value


@dataclass(frozen=True)
class Position:
    """
    Origin pinned by x/y/z arguments.

    Axes that were not given stay None and are filled from the execution
    context location (or 0) when the selector is evaluated.
    """

    x: Optional[Coordinate] = None
    y: Optional[Coordinate] = None
    z: Optional[Coordinate] = None

    def resolve(self, base: Optional[Vector3]) -> Vector3:
        base = base or Vector3()
        return Vector3(
            self.x.resolve(base.x) if self.x else base.x,
            self.y.resolve(base.y) if self.y else base.y,
            self.z.resolve(base.z) if self.z else base.z,
        )


@dataclass(frozen=True)
class IntRange:
    """Inclusive integer range; an absent bound is open."""

    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class FloatRange:
    """Inclusive float range; an absent bound is open."""

    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_unbounded(self) -> bool:
        return self.min is None and self.max is None

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class RotationRange:
    """Pitch (rx/rxm) and yaw (ry/rym) bounds."""

    pitch: FloatRange = FloatRange()
    yaw: FloatRange = FloatRange()

    @property
    def is_unbounded(self) -> bool:
        return self.pitch.is_unbounded and self.yaw.is_unbounded

    def contains(self, rotation: Rotation) -> bool:
        return self.pitch.contains(rotation.pitch) and self.yaw.contains(rotation.yaw)


@dataclass(frozen=True)
class CountSelector:
    """Closest-N or farthest-N limit derived from the signed `c` argument."""

    kind: CountKind
    count: int

    @classmethod
    def from_signed(cls, value: int) -> Optional["CountSelector"]:
        if value > 0:
            return cls(CountKind.CLOSEST, value)
        if value < 0:
            return cls(CountKind.FARTHEST, -value)
        return None


@dataclass(frozen=True)
class ScoreFilter:
    """One `objective=range` entry of a scores argument."""

    objective: str
    min_score: Optional[int] = None
    max_score: Optional[int] = None
    exclude: bool = False

    def accepts(self, score: int) -> bool:
        inside = IntRange(self.min_score, self.max_score).contains(score)
        return not inside if self.exclude else inside


@dataclass(frozen=True)
class ItemCondition:
    """
    One hasitem requirement.

    `item` is an item id when namespaced (``minecraft:torch``) and an item
    tag otherwise. `data` of None or -1 accepts any durability damage.
    `slot` of None accepts any slot index.
    """

    item: Optional[str] = None
    quantity: IntRange = IntRange(min=1)
    data: Optional[int] = None
    location: Optional[str] = None
    slot: Optional[IntRange] = None


@dataclass(frozen=True)
class Query:
    """All constraints parsed from one selector string."""

    type: Optional[str] = None
    exclude_types: tuple[str, ...] = ()
    name: Optional[str] = None
    exclude_names: tuple[str, ...] = ()
    tags: frozenset[str] = frozenset()
    exclude_tags: frozenset[str] = frozenset()
    families: frozenset[str] = frozenset()
    exclude_families: frozenset[str] = frozenset()
    game_mode: Optional[GameMode] = None
    exclude_game_modes: frozenset[GameMode] = frozenset()
    level_range: IntRange = IntRange()
    origin: Optional[Position] = None
    volume: Optional[Vector3] = None
    distance_range: FloatRange = FloatRange()
    rotation_range: RotationRange = RotationRange()
    count_selector: Optional[CountSelector] = None
    score_filters: tuple[ScoreFilter, ...] = ()
    has_item_filters: tuple[ItemCondition, ...] = ()

    @property
    def needs_origin(self) -> bool:
        """True when evaluation must resolve an origin point."""
        return (
            self.origin is not None
            or self.volume is not None
            or not self.distance_range.is_unbounded
            or not self.rotation_range.is_unbounded
            or self.count_selector is not None
        )


@dataclass(frozen=True)
class ParsedSelector:
    """A selector symbol together with its query."""

    symbol: SelectorSymbol = SelectorSymbol.ALL
    query: Query = field(default_factory=Query)
    source: str = ""

"""
Entity/world capability interface required by the selector evaluator.

A host engine is adapted by implementing these abstract classes. Player-only
accessors (game mode, level) are only called after ``is_player()`` returned
True.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

if TYPE_CHECKING:
    from ..selector.ast import GameMode, Query, Rotation, Vector3


class EquipmentSlot(str, Enum):
    """Equipment slot names reported by hosts."""

    HEAD = "Head"
    CHEST = "Chest"
    LEGS = "Legs"
    FEET = "Feet"
    MAINHAND = "Mainhand"
    OFFHAND = "Offhand"
    BODY = "Body"


class ItemStack(ABC):
    """A stack of items in an inventory or equipment slot."""

    @property
    @abstractmethod
    def type_id(self) -> str:
        """Namespaced item id, e.g. ``minecraft:torch``."""

    @property
    @abstractmethod
    def amount(self) -> int:
        """Number of items in the stack."""

    @property
    @abstractmethod
    def durability_damage(self) -> Optional[int]:
        """Damage taken, or None when the item has no durability."""

    @abstractmethod
    def get_tags(self) -> Iterable[str]:
        """Item tags."""


class ScoreboardIdentity(ABC):
    """Handle correlating an entity or fake name with its scoreboard record."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Name shown for this participant."""


class Entity(ABC):
    """An entity as seen by the selector evaluator."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique entity id."""

    @property
    @abstractmethod
    def type_id(self) -> str:
        """Namespaced entity type id, e.g. ``minecraft:pig``."""

    @property
    @abstractmethod
    def name_tag(self) -> str:
        """Display name; empty when unnamed."""

    @property
    @abstractmethod
    def location(self) -> Vector3:
        """Current position."""

    @property
    @abstractmethod
    def scoreboard_identity(self) -> Optional[ScoreboardIdentity]:
        """Scoreboard handle, or None when the entity has no scoreboard record."""

    @abstractmethod
    def get_rotation(self) -> Rotation:
        """Current view rotation."""

    @abstractmethod
    def get_tags(self) -> Iterable[str]:
        """Entity tags."""

    @abstractmethod
    def has_type_family(self, family: str) -> bool:
        """Whether the entity type belongs to `family`."""

    @abstractmethod
    def is_player(self) -> bool:
        """Whether player-only accessors are available."""

    def get_game_mode(self) -> Optional[GameMode]:
        """Player game mode; None for non-players."""
        return None

    def get_level(self) -> Optional[int]:
        """Player experience level; None for non-players."""
        return None

    def inventory_slots(self) -> Sequence[Optional[ItemStack]]:
        """Inventory contents by slot index; None marks an empty slot."""
        return ()

    def equipment_slots(self) -> Iterable[tuple[str, Optional[ItemStack]]]:
        """(slot name, stack) pairs for each equipment slot."""
        return ()


class Objective(ABC):
    """A named scoreboard counter."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Objective id."""

    @abstractmethod
    def get_score(self, identity: ScoreboardIdentity) -> Optional[int]:
        """Score of `identity`, or None when it has none."""


class Scoreboard(ABC):
    """Scoreboard service."""

    @abstractmethod
    def get_objective(self, name: str) -> Optional[Objective]:
        """Objective by id, or None."""

    def get_participants(self) -> Sequence[ScoreboardIdentity]:
        """All known participants."""
        return ()


@dataclass(frozen=True)
class PoolQuery:
    """
    Constraints handed to the host pool.

    `query` never carries a count limit; ordering and truncation are
    applied by the evaluator after manual filtering. `origin` is None when
    no spatial constraint needs it.
    """

    query: Query
    origin: Optional[Vector3] = None


class EntityPool(ABC):
    """Host entity pool."""

    @abstractmethod
    def query_pool(self, pool_query: PoolQuery) -> Sequence[Entity]:
        """
        Return candidate entities in host iteration order.

        Filtering is best effort: the evaluator re-checks every constraint.
        """


@dataclass(frozen=True)
class WorldServices:
    """Host services used during one evaluation."""

    pool: EntityPool
    scoreboard: Optional[Scoreboard] = None

"""
In-memory world: a reference host for the capability interface.

Used by tests and by callers that keep their own entity snapshot (e.g. a
simulation or a replay) instead of a live game engine.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..selector.ast import GameMode, Rotation, Vector3
from .interface import (
    Entity,
    EntityPool,
    EquipmentSlot,
    ItemStack,
    Objective,
    PoolQuery,
    Scoreboard,
    ScoreboardIdentity,
    WorldServices,
)

_ids = itertools.count(1)


@dataclass(frozen=True)
class MemoryItemStack(ItemStack):
    """Item stack value object."""

    item_type: str
    count: int = 1
    tags: frozenset = frozenset()
    damage: Optional[int] = None

    @property
    def type_id(self) -> str:
        return self.item_type

    @property
    def amount(self) -> int:
        return self.count

    @property
    def durability_damage(self) -> Optional[int]:
        return self.damage

    def get_tags(self) -> Iterable[str]:
        return self.tags


@dataclass(frozen=True)
class MemoryScoreboardIdentity(ScoreboardIdentity):
    """Participant handle; fake players are identities without an entity."""

    name: str
    participant_id: int = field(default_factory=lambda: next(_ids))

    @property
    def display_name(self) -> str:
        return self.name


@dataclass(eq=False)
class MemoryEntity(Entity):
    """
    Mutable entity record.

    Set ``player=True`` to expose game mode, level and the hotbar.
    Equipment is keyed by slot name (see EquipmentSlot).
    """

    type: str
    position: Vector3 = field(default_factory=Vector3)
    rotation: Rotation = field(default_factory=Rotation)
    name: str = ""
    tags: set = field(default_factory=set)
    families: set = field(default_factory=set)
    player: bool = False
    game_mode: Optional[GameMode] = None
    xp_level: int = 0
    inventory: list = field(default_factory=list)
    equipment: dict = field(default_factory=dict)
    identity: Optional[MemoryScoreboardIdentity] = None
    entity_id: str = field(default_factory=lambda: str(next(_ids)))

    @property
    def id(self) -> str:
        return self.entity_id

    @property
    def type_id(self) -> str:
        return self.type

    @property
    def name_tag(self) -> str:
        return self.name

    @property
    def location(self) -> Vector3:
        return self.position

    @property
    def scoreboard_identity(self) -> Optional[MemoryScoreboardIdentity]:
        return self.identity

    def get_rotation(self) -> Rotation:
        return self.rotation

    def get_tags(self) -> Iterable[str]:
        return self.tags

    def has_type_family(self, family: str) -> bool:
        return family in self.families

    def is_player(self) -> bool:
        return self.player

    def get_game_mode(self) -> Optional[GameMode]:
        return self.game_mode if self.player else None

    def get_level(self) -> Optional[int]:
        return self.xp_level if self.player else None

    def inventory_slots(self) -> Sequence[Optional[ItemStack]]:
        return self.inventory

    def equipment_slots(self) -> Iterable[tuple[str, Optional[ItemStack]]]:
        for slot, stack in self.equipment.items():
            yield (slot.value if isinstance(slot, EquipmentSlot) else slot), stack

    def ensure_identity(self) -> MemoryScoreboardIdentity:
        """Create the scoreboard identity on first use."""
        if self.identity is None:
            self.identity = MemoryScoreboardIdentity(self.name or self.type)
        return self.identity


class MemoryObjective(Objective):
    """Objective storing scores per identity."""

    def __init__(self, name: str):
        self._name = name
        self._scores: dict[ScoreboardIdentity, int] = {}

    @property
    def name(self) -> str:
        return self._name

    def get_score(self, identity: ScoreboardIdentity) -> Optional[int]:
        return self._scores.get(identity)

    def set_score(self, identity: ScoreboardIdentity, score: int) -> None:
        self._scores[identity] = score

    def reset_score(self, identity: ScoreboardIdentity) -> None:
        self._scores.pop(identity, None)

    def participants(self) -> list[ScoreboardIdentity]:
        return list(self._scores)


class MemoryScoreboard(Scoreboard):
    """Scoreboard holding objectives by name."""

    def __init__(self) -> None:
        self._objectives: dict[str, MemoryObjective] = {}
        self._fake_players: dict[str, MemoryScoreboardIdentity] = {}

    def add_objective(self, name: str) -> MemoryObjective:
        if name in self._objectives:
            raise ValueError(f"Objective already exists: {name}")
        objective = MemoryObjective(name)
        self._objectives[name] = objective
        return objective

    def get_objective(self, name: str) -> Optional[MemoryObjective]:
        return self._objectives.get(name)

    def fake_player(self, name: str) -> MemoryScoreboardIdentity:
        """Identity for a named score holder without an entity."""
        if name not in self._fake_players:
            self._fake_players[name] = MemoryScoreboardIdentity(name)
        return self._fake_players[name]

    def get_participants(self) -> Sequence[ScoreboardIdentity]:
        seen: dict[ScoreboardIdentity, None] = {}
        for objective in self._objectives.values():
            for identity in objective.participants():
                seen.setdefault(identity, None)
        return list(seen)


class MemoryEntityPool(EntityPool):
    """
    Entity list in insertion order.

    Native filtering covers type, name and tags only; everything else is
    left to the evaluator.
    """

    def __init__(self, entities: Iterable[MemoryEntity] = ()):
        self._entities: list[MemoryEntity] = list(entities)

    def add(self, entity: MemoryEntity) -> MemoryEntity:
        self._entities.append(entity)
        return entity

    def remove(self, entity: MemoryEntity) -> None:
        self._entities.remove(entity)

    def __iter__(self):
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def query_pool(self, pool_query: PoolQuery) -> Sequence[MemoryEntity]:
        query = pool_query.query
        out = []
        for entity in self._entities:
            if query.type and entity.type.split(":")[-1] != query.type.split(":")[-1]:
                continue
            if query.name is not None and entity.name != query.name:
                continue
            if query.tags and not query.tags <= entity.tags:
                continue
            out.append(entity)
        return out


def memory_world(
    entities: Iterable[MemoryEntity] = (),
    scoreboard: Optional[MemoryScoreboard] = None,
) -> WorldServices:
    """Build WorldServices over an in-memory pool and scoreboard."""
    return WorldServices(
        pool=MemoryEntityPool(entities),
        scoreboard=scoreboard if scoreboard is not None else MemoryScoreboard(),
    )

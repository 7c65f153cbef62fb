"""
Host capability interface and the in-memory reference host.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

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
from .memory import (
    MemoryEntity,
    MemoryEntityPool,
    MemoryItemStack,
    MemoryObjective,
    MemoryScoreboard,
    MemoryScoreboardIdentity,
    memory_world,
)

__all__ = [
    "Entity",
    "EntityPool",
    "EquipmentSlot",
    "ItemStack",
    "Objective",
    "PoolQuery",
    "Scoreboard",
    "ScoreboardIdentity",
    "WorldServices",
    "MemoryEntity",
    "MemoryEntityPool",
    "MemoryItemStack",
    "MemoryObjective",
    "MemoryScoreboard",
    "MemoryScoreboardIdentity",
    "memory_world",
]

"""
Pytest fixtures for entity selector testing.

Provides an in-memory world with factories for players and mobs.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging
import random

import pytest

from entity_selector.selector import ExecutionContext, GameMode, Vector3
from entity_selector.world import (
    MemoryEntity,
    MemoryEntityPool,
    MemoryScoreboard,
    WorldServices,
)


def _make_mob(type_id="minecraft:pig", x=0.0, y=0.0, z=0.0, **kwargs):
    return MemoryEntity(type_id, position=Vector3(x, y, z), **kwargs)


def _make_player(name, x=0.0, y=0.0, z=0.0, **kwargs):
    kwargs.setdefault("game_mode", GameMode.SURVIVAL)
    return MemoryEntity(
        "minecraft:player",
        position=Vector3(x, y, z),
        name=name,
        player=True,
        entity_id=name,
        **kwargs,
    )


@pytest.fixture
def make_mob():
    """Factory for non-player entities."""
    return _make_mob


@pytest.fixture
def make_player():
    """Factory for players; the entity id equals the player name."""
    return _make_player


@pytest.fixture
def scoreboard():
    """Empty in-memory scoreboard."""
    return MemoryScoreboard()


@pytest.fixture
def pool():
    """Empty in-memory entity pool."""
    return MemoryEntityPool()


@pytest.fixture
def world(pool, scoreboard):
    """World services over the pool and scoreboard fixtures."""
    return WorldServices(pool=pool, scoreboard=scoreboard)


@pytest.fixture
def context(world):
    """Execution context at the world origin with a seeded generator."""
    return ExecutionContext(world=world, location=Vector3(), rng=random.Random(1234))


@pytest.fixture
def restore_package_logger():
    """Restore the entity_selector logger after a test reconfigures it."""
    package_logger = logging.getLogger("entity_selector")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield package_logger
    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)

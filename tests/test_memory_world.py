"""
Tests for the in-memory reference host.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from entity_selector.selector.ast import Query
from entity_selector.world import (
    EquipmentSlot,
    MemoryItemStack,
    MemoryScoreboard,
    PoolQuery,
    memory_world,
)


def test_memory_world_builds_services(make_mob):
    pig = make_mob()
    world = memory_world([pig])
    assert list(world.pool) == [pig]
    assert isinstance(world.scoreboard, MemoryScoreboard)


def test_pool_native_filtering(pool, make_mob, make_player):
    pig = pool.add(make_mob("minecraft:pig", tags={"a", "b"}))
    pool.add(make_mob("minecraft:cow", tags={"a"}))
    steve = pool.add(make_player("Steve"))
    assert pool.query_pool(PoolQuery(Query(type="pig"))) == [pig]
    assert pool.query_pool(PoolQuery(Query(tags=frozenset({"b"})))) == [pig]
    assert pool.query_pool(PoolQuery(Query(name="Steve"))) == [steve]
    assert len(pool.query_pool(PoolQuery(Query()))) == 3


def test_pool_add_remove(pool, make_mob):
    pig = pool.add(make_mob())
    assert len(pool) == 1
    pool.remove(pig)
    assert len(pool) == 0


def test_player_only_accessors(make_mob, make_player):
    mob = make_mob(xp_level=4)
    player = make_player("Steve", xp_level=4)
    assert mob.get_level() is None
    assert mob.get_game_mode() is None
    assert player.get_level() == 4
    assert player.get_game_mode() is not None


def test_equipment_slots_report_names(make_mob):
    helmet = MemoryItemStack("minecraft:iron_helmet")
    mob = make_mob(equipment={EquipmentSlot.HEAD: helmet, "Body": None})
    assert list(mob.equipment_slots()) == [("Head", helmet), ("Body", None)]


def test_identity_is_created_once(make_player):
    player = make_player("Steve")
    assert player.scoreboard_identity is None
    identity = player.ensure_identity()
    assert player.ensure_identity() is identity
    assert identity.display_name == "Steve"


class TestMemoryScoreboard:
    """Tests for MemoryScoreboard."""

    def test_objectives(self, scoreboard):
        kills = scoreboard.add_objective("kills")
        assert scoreboard.get_objective("kills") is kills
        assert scoreboard.get_objective("deaths") is None
        with pytest.raises(ValueError):
            scoreboard.add_objective("kills")

    def test_scores_and_participants(self, scoreboard):
        kills = scoreboard.add_objective("kills")
        deaths = scoreboard.add_objective("deaths")
        alice = scoreboard.fake_player("alice")
        assert scoreboard.fake_player("alice") is alice
        kills.set_score(alice, 2)
        deaths.set_score(alice, 1)
        assert kills.get_score(alice) == 2
        assert scoreboard.get_participants() == [alice]
        kills.reset_score(alice)
        assert kills.get_score(alice) is None

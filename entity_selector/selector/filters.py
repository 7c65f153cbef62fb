"""
Per-entity filter checks used by the selector evaluator.

Every check takes one entity and answers True/False; the evaluator composes
them. Host lookup failures (missing objective, missing score, missing
scoreboard identity) make the affected check fail instead of raising.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..core.config import DEFAULT_SETTINGS, SelectorSettings
from ..core.exceptions import ResolutionError
from ..world.interface import Entity, EquipmentSlot, ItemStack, Scoreboard
from .ast import ItemCondition, Query, ScoreFilter, Vector3

logger = logging.getLogger(__name__)

INVENTORY_LOCATION = "slot.inventory"
HOTBAR_LOCATION = "slot.hotbar"

_EQUIPMENT_LOCATIONS = {
    EquipmentSlot.HEAD.value: "slot.armor.head",
    EquipmentSlot.CHEST.value: "slot.armor.chest",
    EquipmentSlot.LEGS.value: "slot.armor.legs",
    EquipmentSlot.FEET.value: "slot.armor.feet",
    EquipmentSlot.MAINHAND.value: "slot.weapon.mainhand",
    EquipmentSlot.OFFHAND.value: "slot.weapon.offhand",
}


def normalize_type_id(type_id: str, namespace: str = DEFAULT_SETTINGS.default_namespace) -> str:
    """Prefix `namespace` onto an un-namespaced entity type id."""
    type_id = type_id.strip()
    if ":" in type_id:
        return type_id
    return f"{namespace}:{type_id}"


def matches_base_query(
    entity: Entity,
    query: Query,
    origin: Optional[Vector3] = None,
    settings: SelectorSettings = DEFAULT_SETTINGS,
) -> bool:
    """
    Check type/name/tag/family/game mode/level/rotation/distance constraints.

    Distance is only checked when `origin` is given.
    """
    namespace = settings.default_namespace
    entity_type = normalize_type_id(entity.type_id, namespace)
    if query.type and entity_type != normalize_type_id(query.type, namespace):
        return False
    if any(entity_type == normalize_type_id(t, namespace) for t in query.exclude_types):
        return False

    if query.name is not None and entity.name_tag != query.name:
        return False
    if entity.name_tag in query.exclude_names:
        return False

    if query.tags or query.exclude_tags:
        entity_tags = set(entity.get_tags())
        if not query.tags <= entity_tags:
            return False
        if query.exclude_tags & entity_tags:
            return False

    if not all(entity.has_type_family(f) for f in query.families):
        return False
    if any(entity.has_type_family(f) for f in query.exclude_families):
        return False

    if (
        query.game_mode is not None
        or query.exclude_game_modes
        or not query.level_range.is_unbounded
    ):
        if not entity.is_player():
            return False
        mode = entity.get_game_mode()
        if query.game_mode is not None and mode != query.game_mode:
            return False
        if mode in query.exclude_game_modes:
            return False
        if not query.level_range.is_unbounded:
            level = entity.get_level()
            if level is None or not query.level_range.contains(level):
                return False

    if not query.rotation_range.is_unbounded:
        if not query.rotation_range.contains(entity.get_rotation()):
            return False

    if origin is not None and not query.distance_range.is_unbounded:
        dist_sq = entity.location.distance_squared(origin)
        low, high = query.distance_range.min, query.distance_range.max
        if low is not None and dist_sq < low * low:
            return False
        if high is not None and dist_sq > high * high:
            return False

    return True


def is_within_volume(position: Vector3, origin: Vector3, volume: Vector3) -> bool:
    """
    Axis-aligned box from `origin` to `origin + volume`.

    Upper bounds are exclusive; a zero extent on an axis spans exactly one unit.
    """
    corner = origin + volume
    for axis in ("x", "y", "z"):
        start = getattr(origin, axis)
        end = getattr(corner, axis)
        low, high = min(start, end), max(start, end)
        if getattr(volume, axis) == 0:
            high = low + 1
        value = getattr(position, axis)
        if not (low <= value < high):
            return False
    return True


def _score_of(entity: Entity, score_filter: ScoreFilter, scoreboard: Optional[Scoreboard]) -> int:
    identity = entity.scoreboard_identity
    if identity is None:
        raise ResolutionError("Entity has no scoreboard identity", target=entity.id)
    if scoreboard is None:
        raise ResolutionError("No scoreboard available", target=score_filter.objective)
    objective = scoreboard.get_objective(score_filter.objective)
    if objective is None:
        raise ResolutionError(
            f"Objective not found: {score_filter.objective}", target=score_filter.objective
        )
    score = objective.get_score(identity)
    if score is None:
        raise ResolutionError(
            f"No score on {score_filter.objective}", target=identity.display_name
        )
    return score


def matches_score_filters(
    entity: Entity,
    score_filters: Sequence[ScoreFilter],
    scoreboard: Optional[Scoreboard],
) -> bool:
    """All score filters must hold; unresolvable scores fail the entity."""
    for score_filter in score_filters:
        try:
            score = _score_of(entity, score_filter, scoreboard)
        except ResolutionError as e:
            logger.debug("Score filter failed for %s: %s", entity.id, e)
            return False
        if not score_filter.accepts(score):
            return False
    return True


@dataclass(frozen=True)
class ItemSlot:
    """An occupied slot with its symbolic location and index (-1 if not indexable)."""

    stack: ItemStack
    location: str
    index: int


def equipment_location(slot_name: str) -> str:
    """Symbolic location name for an equipment slot."""
    name = slot_name.value if isinstance(slot_name, EquipmentSlot) else str(slot_name)
    return _EQUIPMENT_LOCATIONS.get(name, f"slot.equippable.{name.lower()}")


def iter_item_slots(
    entity: Entity, settings: SelectorSettings = DEFAULT_SETTINGS
) -> Iterator[ItemSlot]:
    """Yield occupied inventory slots, then occupied equipment slots."""
    is_player = entity.is_player()
    for index, stack in enumerate(entity.inventory_slots()):
        if stack is None:
            continue
        location = HOTBAR_LOCATION if is_player and index < settings.hotbar_size else INVENTORY_LOCATION
        yield ItemSlot(stack, location, index)
    for slot_name, stack in entity.equipment_slots():
        if stack is None:
            continue
        yield ItemSlot(stack, equipment_location(slot_name), -1)


def _item_matches(pattern: Optional[str], stack: ItemStack) -> bool:
    if not pattern:
        return True
    if ":" in pattern:
        return stack.type_id == pattern
    return pattern in set(stack.get_tags())


def _data_matches(data: Optional[int], stack: ItemStack) -> bool:
    if data is None or data == -1:
        return True
    damage = stack.durability_damage
    if damage is None:
        return data == 0
    return damage == data


def _slot_matches(condition: ItemCondition, slot: ItemSlot) -> bool:
    if condition.location:
        same_location = condition.location == slot.location or (
            condition.location == INVENTORY_LOCATION
            and slot.location in (INVENTORY_LOCATION, HOTBAR_LOCATION)
        )
        if not same_location:
            return False
        if condition.slot is None:
            return True
        if slot.index != -1:
            return condition.slot.contains(slot.index)
        return slot.location.startswith(("slot.armor.", "slot.weapon."))

    if condition.slot is None:
        return True
    return slot.index != -1 and condition.slot.contains(slot.index)


def slot_satisfies(condition: ItemCondition, slot: ItemSlot) -> bool:
    """Whether one occupied slot satisfies every part of `condition`."""
    return (
        _item_matches(condition.item, slot.stack)
        and condition.quantity.contains(slot.stack.amount)
        and _data_matches(condition.data, slot.stack)
        and _slot_matches(condition, slot)
    )


def matches_item_conditions(
    entity: Entity,
    conditions: Sequence[ItemCondition],
    settings: SelectorSettings = DEFAULT_SETTINGS,
) -> bool:
    """Every condition must be satisfied by at least one occupied slot."""
    if not conditions:
        return True
    slots = list(iter_item_slots(entity, settings))
    return all(any(slot_satisfies(c, s) for s in slots) for c in conditions)

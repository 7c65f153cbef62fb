"""
Selector executor: evaluates a parsed selector against a host entity pool.

Evaluation pipeline:
- apply symbol defaults (@p nearest player, @a players, @r random sample, @s executor)
- resolve the origin from x/y/z and the execution context
- fetch candidates from the host pool (native filtering is a hint only)
- re-check base constraints, then scores, volume and hasitem manually
- order/truncate by closest, farthest or random sampling

Evaluation never raises; failures are logged and give fewer or no matches.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional

from ..core.config import DEFAULT_SETTINGS, SelectorSettings
from ..core.exceptions import ResolutionError
from ..world.interface import Entity, PoolQuery, WorldServices
from .ast import CountKind, CountSelector, ParsedSelector, Query, SelectorSymbol, Vector3
from .filters import (
    is_within_volume,
    matches_base_query,
    matches_item_conditions,
    matches_score_filters,
)
from .parser import parse_selector

logger = logging.getLogger(__name__)


@dataclass
class ExecutionContext:
    """
    Per-evaluation inputs supplied by the caller.

    `location` defaults to the executor's location when omitted. `rng` is
    used for @r sampling; the module-level random generator is used when None.
    """

    world: WorldServices
    location: Optional[Vector3] = None
    executor: Optional[Entity] = None
    rng: Optional[random.Random] = None

    @property
    def base_location(self) -> Optional[Vector3]:
        if self.location is not None:
            return self.location
        if self.executor is not None:
            return self.executor.location
        return None


@lru_cache(maxsize=256)
def _parse_cached(selector: str) -> ParsedSelector:
    return parse_selector(selector)


class EntitySelector:
    """A selector parsed once and evaluated against any number of contexts."""

    def __init__(self, selector: str, settings: Optional[SelectorSettings] = None):
        self.selector = selector
        self.settings = settings or DEFAULT_SETTINGS
        self.parsed = _parse_cached(selector or "")

    @property
    def symbol(self) -> SelectorSymbol:
        return self.parsed.symbol

    @property
    def query(self) -> Query:
        return self.parsed.query

    def __repr__(self) -> str:
        return f"EntitySelector({self.selector!r})"

    def get_entities(self, context: ExecutionContext) -> list[Entity]:
        """Return matching entities in selection order (possibly empty)."""
        try:
            if self.symbol == SelectorSymbol.SELF:
                return self._evaluate_self(context)
            return self._evaluate_pool(context)
        except ResolutionError as e:
            logger.warning("Selector %s resolved to nothing: %s", self.selector, e)
            return []

    def _resolve_origin(self, query: Query, context: ExecutionContext) -> Optional[Vector3]:
        if query.origin is not None:
            return query.origin.resolve(context.base_location)
        if query.needs_origin:
            return context.base_location or Vector3()
        return None

    def _effective_query(self, query: Query) -> tuple[Query, Optional[int]]:
        """Apply symbol defaults; returns the query and the @r sample size."""
        player_type = self.settings.player_type_id
        if self.symbol == SelectorSymbol.NEAREST_PLAYER:
            count = query.count_selector or CountSelector(CountKind.CLOSEST, 1)
            return replace(query, type=player_type, count_selector=count), None
        if self.symbol == SelectorSymbol.PLAYER:
            return replace(query, type=player_type), None
        if self.symbol == SelectorSymbol.RANDOM_PLAYER:
            constrained = query.type or query.tags or query.families or query.name
            sample = (
                query.count_selector.count
                if query.count_selector
                else self.settings.default_random_count
            )
            query = replace(query, count_selector=None)
            if not constrained:
                query = replace(query, type=player_type)
            return query, sample
        return query, None

    def _passes_post_filters(
        self, entity: Entity, query: Query, origin: Optional[Vector3], world: WorldServices
    ) -> bool:
        if not matches_base_query(entity, query, origin, self.settings):
            return False
        if query.score_filters and not matches_score_filters(
            entity, query.score_filters, world.scoreboard
        ):
            return False
        if query.volume is not None and origin is not None:
            if not is_within_volume(entity.location, origin, query.volume):
                return False
        return matches_item_conditions(entity, query.has_item_filters, self.settings)

    def _evaluate_self(self, context: ExecutionContext) -> list[Entity]:
        executor = context.executor
        if executor is None:
            raise ResolutionError("@s requires an executor", target="@s")
        query = self.query
        if not matches_base_query(executor, query, None, self.settings):
            return []
        if query.score_filters and not matches_score_filters(
            executor, query.score_filters, context.world.scoreboard
        ):
            return []
        if not matches_item_conditions(executor, query.has_item_filters, self.settings):
            return []
        if query.volume is not None:
            origin = self._resolve_origin(query, context)
            if not is_within_volume(executor.location, origin, query.volume):
                return []
        return [executor]

    def _fetch_candidates(self, world: WorldServices, pool_query: PoolQuery) -> list[Entity]:
        try:
            return list(world.pool.query_pool(pool_query))
        except Exception as e:
            raise ResolutionError(f"Entity pool query failed: {e}", target="pool") from e

    def _evaluate_pool(self, context: ExecutionContext) -> list[Entity]:
        query, sample = self._effective_query(self.query)
        origin = self._resolve_origin(query, context)
        pool_query = PoolQuery(query=replace(query, count_selector=None), origin=origin)

        candidates = self._fetch_candidates(context.world, pool_query)
        matches = [
            e
            for e in candidates
            if self._passes_post_filters(e, query, origin, context.world)
        ]

        if sample is not None:
            rng = context.rng or random
            return rng.sample(matches, min(sample, len(matches)))

        count = query.count_selector
        if count is None:
            return matches
        center = origin or Vector3()
        matches.sort(
            key=lambda e: e.location.distance_squared(center),
            reverse=count.kind == CountKind.FARTHEST,
        )
        return matches[: count.count]


def evaluate(
    selector: str,
    context: ExecutionContext,
    settings: Optional[SelectorSettings] = None,
) -> list[Entity]:
    """Parse (cached) and evaluate `selector` in `context`."""
    return EntitySelector(selector, settings).get_entities(context)

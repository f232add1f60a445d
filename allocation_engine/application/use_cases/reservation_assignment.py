"""ReservationAssignmentUseCase — feeds → dedup → waterfall allocation."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter

from allocation_engine.application.ports.reservation_feed_port import ReservationFeedPort
from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.application.use_cases.engine_response import EngineResponse
from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import AssignmentResult, utc_now_iso
from allocation_engine.domain.entities.reservation import ReservationItem
from allocation_engine.domain.entities.target_selection import TargetSelection
from allocation_engine.domain.policies.deduplication import deduplicate_reservations
from allocation_engine.domain.policies.reporting import summarize_waterfall
from allocation_engine.domain.policies.target_resolution import resolve_reservation_targets
from allocation_engine.domain.policies.validation import validate_run_request
from allocation_engine.domain.policies.waterfall import WaterfallAllocator
from allocation_engine.domain.value_objects.enums import CacheKind, SourceTier
from allocation_engine.domain.value_objects.sku import index_by_sku, parse_sku_configs

logger = logging.getLogger(__name__)


class ReservationAssignmentUseCase:
    """Orchestrates the priority-waterfall regime.

    Pipeline:
    1. Resolve eligible agents (store → agent → department → office)
    2. Validate there are agents and enabled SKUs
    3. Fetch the three feeds concurrently (failed feeds count as empty)
    4. Deduplicate into one ranked queue
    5. Waterfall-assign single units to the least-loaded agent
    """

    def __init__(
        self,
        feeds: ReservationFeedPort,
        cache: AssignmentCache | None = None,
        cache_ttl: float | None = None,
        log: logging.Logger | None = None,
    ):
        self._feeds = feeds
        self._log = log or logger
        self._calculate = self._compute
        if cache is not None:
            self._calculate = cache.wrap(
                CacheKind.ASSIGNMENT_CALCULATION,
                self._compute,
                ttl=cache_ttl,
                key_params=lambda settings, agents: {
                    "settings": {k: v for k, v in settings.items() if k != "priorities"},
                    "agents": agents,
                },
            )

    async def execute(self, settings: dict, agents: list[Agent]) -> EngineResponse:
        try:
            configs = parse_sku_configs(settings.get("models") or {})
            targets = resolve_reservation_targets(
                TargetSelection.from_dict(settings.get("targets")), agents
            )
            check = validate_run_request(targets, configs)
            if not check.valid:
                self._log.warning("Reservation assignment rejected: %s", check.error)
                return EngineResponse.failure(check.error)

            result = await self._calculate(settings, agents)
            return EngineResponse.ok(result)
        except Exception as e:
            self._log.exception("Reservation assignment failed")
            return EngineResponse.failure(str(e))

    async def _fetch_all(self) -> dict[SourceTier, list[ReservationItem]]:
        tiers = list(SourceTier)
        results = await asyncio.gather(
            *(self._feeds.fetch(tier) for tier in tiers), return_exceptions=True
        )
        feeds: dict[SourceTier, list[ReservationItem]] = {}
        for tier, outcome in zip(tiers, results):
            if isinstance(outcome, Exception):
                self._log.warning("Feed %s failed, treating as empty: %s", tier.source, outcome)
                feeds[tier] = []
            else:
                feeds[tier] = outcome
        return feeds

    async def _compute(self, settings: dict, agents: list[Agent]) -> AssignmentResult:
        configs = parse_sku_configs(settings.get("models") or {})
        targets = resolve_reservation_targets(
            TargetSelection.from_dict(settings.get("targets")), agents
        )
        sku_index = index_by_sku(configs)

        feeds = await self._fetch_all()
        self._log.info(
            "Feeds collected: onSale=%d, yard=%d, site=%d",
            len(feeds[SourceTier.ON_SALE]), len(feeds[SourceTier.YARD]), len(feeds[SourceTier.SITE]),
        )

        queue = deduplicate_reservations(
            feeds[SourceTier.ON_SALE], feeds[SourceTier.YARD], feeds[SourceTier.SITE], sku_index
        )
        self._log.info("Deduplicated queue: %d customers, %d agents", len(queue), len(targets))

        timestamp = utc_now_iso()
        outcome = WaterfallAllocator(targets, sku_index).allocate(queue, timestamp=timestamp)

        if outcome.skipped:
            reasons = Counter(s.reason for s in outcome.skipped)
            self._log.warning("Skipped %d queue items: %s", len(outcome.skipped), dict(reasons))

        self._log.info("Reservation assignment complete: %d units", len(outcome.records))
        return AssignmentResult(
            assignments=tuple(outcome.records),
            summary=summarize_waterfall(outcome.records, targets, configs),
            timestamp=timestamp,
            settings=settings,
            skipped_items=tuple(outcome.skipped),
        )

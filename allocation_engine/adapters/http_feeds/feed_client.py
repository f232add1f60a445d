"""HTTP adapters for the reservation feeds and the agent/store rosters."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from allocation_engine.adapters.http_feeds.normalizer import (
    parse_agents,
    parse_reservations,
    parse_stores,
)
from allocation_engine.application.ports.reservation_feed_port import ReservationFeedPort
from allocation_engine.application.ports.roster_port import RosterPort
from allocation_engine.config import settings
from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.reservation import ReservationItem
from allocation_engine.domain.value_objects.enums import SourceTier

logger = logging.getLogger(__name__)

FEED_PATHS: dict[SourceTier, str] = {
    SourceTier.ON_SALE: "/api/reservation-data/on-sale-receipt",
    SourceTier.YARD: "/api/reservation-data/yard-receipt",
    SourceTier.SITE: "/api/reservation-data/reservation-site",
}
AGENTS_PATH = "/api/agents"
STORES_PATH = "/api/stores"


class _JsonGetter:
    """Shared GET-and-decode helper; any failure degrades to None."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.feed_timeout_seconds
        self._transport = transport

    async def _get_json(self, path: str) -> Any | None:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(path)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.warning("Fetch %s failed, continuing without it: %s", path, e)
            return None
        except ValueError:
            logger.warning("Fetch %s returned invalid JSON, continuing without it", path)
            return None


class HttpReservationFeedAdapter(_JsonGetter, ReservationFeedPort):
    async def fetch(self, tier: SourceTier) -> list[ReservationItem]:
        payload = await self._get_json(FEED_PATHS[tier])
        if payload is None:
            return []
        items = parse_reservations(payload)
        logger.info("Feed %s: %d reservations", tier.source, len(items))
        return items


class HttpRosterAdapter(_JsonGetter, RosterPort):
    async def get_agents(self) -> list[Agent]:
        payload = await self._get_json(AGENTS_PATH)
        return parse_agents(payload) if payload is not None else []

    async def get_stores(self) -> list[dict]:
        payload = await self._get_json(STORES_PATH)
        return parse_stores(payload) if payload is not None else []

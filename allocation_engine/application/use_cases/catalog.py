"""CatalogUseCase — cached roster, org structure and model catalogue."""

from __future__ import annotations

import logging

from allocation_engine.application.ports.roster_port import RosterPort
from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.org_structure import OrgStructure, build_org_structure
from allocation_engine.domain.policies.catalog import extract_available_models
from allocation_engine.domain.value_objects.enums import CacheKind

logger = logging.getLogger(__name__)


class CatalogUseCase:
    """Read-side lookups shared by both regimes, each cached under its own kind."""

    def __init__(
        self,
        roster: RosterPort,
        cache: AssignmentCache,
        ttls: dict[CacheKind, float] | None = None,
    ):
        self._roster = roster
        ttls = ttls or {}
        self.get_agents = cache.wrap(
            CacheKind.AGENTS, self._load_agents, ttl=ttls.get(CacheKind.AGENTS), key_params=dict
        )
        self.get_stores = cache.wrap(
            CacheKind.STORES, self._load_stores, ttl=ttls.get(CacheKind.STORES), key_params=dict
        )
        self.get_org_structure = cache.wrap(
            CacheKind.HIERARCHICAL_STRUCTURE,
            self._build_structure,
            ttl=ttls.get(CacheKind.HIERARCHICAL_STRUCTURE),
            key_params=dict,
        )
        self.get_available_models = cache.wrap(
            CacheKind.AVAILABLE_MODELS,
            self._extract_models,
            ttl=ttls.get(CacheKind.AVAILABLE_MODELS),
            key_params=dict,
        )

    async def _load_agents(self) -> list[Agent]:
        agents = await self._roster.get_agents()
        logger.info("Loaded %d agents", len(agents))
        return agents

    async def _load_stores(self) -> list[dict]:
        stores = await self._roster.get_stores()
        logger.info("Loaded %d stores", len(stores))
        return stores

    async def _build_structure(self) -> OrgStructure:
        return build_org_structure(await self.get_agents())

    async def _extract_models(self) -> dict:
        return extract_available_models(await self.get_stores())

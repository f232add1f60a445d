"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from allocation_engine.adapters.history.in_memory import InMemoryHistoryRepository
from allocation_engine.adapters.http_feeds.feed_client import (
    HttpReservationFeedAdapter,
    HttpRosterAdapter,
)
from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.application.use_cases.catalog import CatalogUseCase
from allocation_engine.application.use_cases.history import HistoryUseCase
from allocation_engine.application.use_cases.ratio_assignment import RatioAssignmentUseCase
from allocation_engine.application.use_cases.reservation_assignment import (
    ReservationAssignmentUseCase,
)
from allocation_engine.config import settings
from allocation_engine.domain.value_objects.enums import CacheKind

# One cache and one history store per process
_cache = AssignmentCache(
    max_size=settings.cache_max_size,
    default_ttl=settings.cache_default_ttl_seconds,
    sweep_interval=settings.cache_sweep_interval_seconds,
)
_history_repo = InMemoryHistoryRepository(max_items=settings.history_max_items)

_feed_adapter = HttpReservationFeedAdapter()
_roster_adapter = HttpRosterAdapter()

_ttls = {
    CacheKind.HIERARCHICAL_STRUCTURE: settings.ttl_hierarchical_structure_seconds,
    CacheKind.AVAILABLE_MODELS: settings.ttl_available_models_seconds,
    CacheKind.AGENTS: settings.ttl_agents_seconds,
    CacheKind.STORES: settings.ttl_stores_seconds,
    CacheKind.ASSIGNMENT_CALCULATION: settings.ttl_assignment_calculation_seconds,
}

_catalog_uc = CatalogUseCase(roster=_roster_adapter, cache=_cache, ttls=_ttls)
_reservation_uc = ReservationAssignmentUseCase(
    feeds=_feed_adapter,
    cache=_cache,
    cache_ttl=_ttls[CacheKind.ASSIGNMENT_CALCULATION],
)
_ratio_uc = RatioAssignmentUseCase(
    cache=_cache,
    cache_ttl=_ttls[CacheKind.ASSIGNMENT_CALCULATION],
)
_history_uc = HistoryUseCase(repo=_history_repo)


def get_cache() -> AssignmentCache:
    return _cache


def get_catalog_uc() -> CatalogUseCase:
    return _catalog_uc


def get_reservation_uc() -> ReservationAssignmentUseCase:
    return _reservation_uc


def get_ratio_uc() -> RatioAssignmentUseCase:
    return _ratio_uc


def get_history_uc() -> HistoryUseCase:
    return _history_uc

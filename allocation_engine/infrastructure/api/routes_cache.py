"""Cache endpoints — inspect and invalidate the assignment cache."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.domain.value_objects.enums import CacheKind
from allocation_engine.infrastructure.api.dependencies import get_cache

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get("/stats")
async def cache_stats(cache: AssignmentCache = Depends(get_cache)):
    return cache.stats()


@router.delete("")
async def clear_cache(kind: CacheKind | None = None, cache: AssignmentCache = Depends(get_cache)):
    """Clear every entry, or only one kind (e.g. ``assignmentCalculation``)."""
    removed = cache.clear(kind)
    return {"status": "ok", "kind": kind.value if kind else None, "removed": removed}

"""Health check endpoint."""

from fastapi import APIRouter, Depends

from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.infrastructure.api.dependencies import get_cache

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(cache: AssignmentCache = Depends(get_cache)):
    """Report service status and current cache occupancy."""
    return {
        "status": "ok",
        "cache_size": len(cache),
        "service": "Inventory Assignment Engine",
    }

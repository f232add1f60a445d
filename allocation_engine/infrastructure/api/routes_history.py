"""History endpoints — confirmed runs, comparison and export."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from allocation_engine.application.use_cases.history import HistoryUseCase
from allocation_engine.infrastructure.api.dependencies import get_history_uc
from allocation_engine.infrastructure.api.schemas import HistorySaveIn

router = APIRouter(prefix="/history", tags=["history"])

_MEDIA_TYPES = {"json": "application/json", "csv": "text/csv"}


@router.get("")
async def list_history(uc: HistoryUseCase = Depends(get_history_uc)):
    items = await uc.list_items()
    return {"total": len(items), "items": [i.to_dict() for i in items]}


@router.post("")
async def save_history(body: HistorySaveIn, uc: HistoryUseCase = Depends(get_history_uc)):
    """Record a confirmed assignment result."""
    item = await uc.record(body.regime, body.result.model_dump(), body.agents)
    return item.to_dict()


@router.delete("")
async def clear_history(uc: HistoryUseCase = Depends(get_history_uc)):
    await uc.clear()
    return {"status": "ok"}


@router.get("/compare")
async def compare_history(first: str, second: str, uc: HistoryUseCase = Depends(get_history_uc)):
    comparison = await uc.compare(first, second)
    if comparison is None:
        raise HTTPException(status_code=404, detail="History item not found")
    return comparison


@router.get("/{item_id}")
async def get_history_item(item_id: str, uc: HistoryUseCase = Depends(get_history_uc)):
    item = await uc.get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="History item not found")
    return item.to_dict()


@router.delete("/{item_id}")
async def delete_history_item(item_id: str, uc: HistoryUseCase = Depends(get_history_uc)):
    if not await uc.delete(item_id):
        raise HTTPException(status_code=404, detail="History item not found")
    return {"status": "ok"}


@router.get("/{item_id}/export")
async def export_history_item(
    item_id: str,
    format: str = "json",
    uc: HistoryUseCase = Depends(get_history_uc),
):
    """Download one run as JSON or CSV."""
    fmt = format.lower()
    if fmt not in _MEDIA_TYPES:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {format}")
    if await uc.get(item_id) is None:
        raise HTTPException(status_code=404, detail="History item not found")
    content = await uc.export(item_id, fmt)
    return PlainTextResponse(content or "", media_type=_MEDIA_TYPES[fmt])

"""HistoryUseCase — record, browse, compare and export confirmed runs."""

from __future__ import annotations

import logging

from allocation_engine.application.services.result_exporter import export_result
from allocation_engine.application.ports.history_repo import HistoryRepository
from allocation_engine.domain.entities.history import (
    HistoryItem,
    compare_history_items,
    create_history_item,
)
from allocation_engine.domain.value_objects.enums import Regime

logger = logging.getLogger(__name__)


class HistoryUseCase:
    def __init__(self, repo: HistoryRepository):
        self._repo = repo

    async def record(
        self,
        regime: Regime,
        result: dict,
        agents: list[dict] | None = None,
    ) -> HistoryItem:
        item = create_history_item(regime, result, agents)
        await self._repo.save(item)
        logger.info(
            "History %s saved: %s, %d units assigned",
            item.id, regime.value, item.metadata["totalAssigned"],
        )
        return item

    async def list_items(self) -> list[HistoryItem]:
        return await self._repo.get_all()

    async def get(self, item_id: str) -> HistoryItem | None:
        return await self._repo.get_by_id(item_id)

    async def delete(self, item_id: str) -> bool:
        return await self._repo.delete(item_id)

    async def clear(self) -> None:
        await self._repo.clear()

    async def compare(self, first_id: str, second_id: str) -> dict | None:
        first = await self._repo.get_by_id(first_id)
        second = await self._repo.get_by_id(second_id)
        if first is None or second is None:
            return None
        return compare_history_items(first, second)

    async def export(self, item_id: str, fmt: str) -> str | None:
        item = await self._repo.get_by_id(item_id)
        if item is None:
            return None
        return export_result(item.result, fmt)

"""In-memory assignment history — newest first, bounded."""

from __future__ import annotations

import logging

from allocation_engine.application.ports.history_repo import HistoryRepository
from allocation_engine.domain.entities.history import HistoryItem

logger = logging.getLogger(__name__)


class InMemoryHistoryRepository(HistoryRepository):
    def __init__(self, max_items: int = 50):
        self._max_items = max_items
        self._items: list[HistoryItem] = []

    async def save(self, item: HistoryItem) -> HistoryItem:
        self._items.insert(0, item)
        if len(self._items) > self._max_items:
            dropped = self._items[self._max_items:]
            del self._items[self._max_items:]
            logger.info("History full, dropped %d oldest items", len(dropped))
        return item

    async def get_by_id(self, item_id: str) -> HistoryItem | None:
        return next((i for i in self._items if i.id == item_id), None)

    async def get_all(self) -> list[HistoryItem]:
        return list(self._items)

    async def delete(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [i for i in self._items if i.id != item_id]
        return len(self._items) != before

    async def clear(self) -> None:
        self._items.clear()

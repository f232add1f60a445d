"""Port interface for assignment history storage."""

from abc import ABC, abstractmethod

from allocation_engine.domain.entities.history import HistoryItem


class HistoryRepository(ABC):
    @abstractmethod
    async def save(self, item: HistoryItem) -> HistoryItem:
        ...

    @abstractmethod
    async def get_by_id(self, item_id: str) -> HistoryItem | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[HistoryItem]:
        """Newest first."""
        ...

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        ...

    @abstractmethod
    async def clear(self) -> None:
        ...

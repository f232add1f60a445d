"""Port interface for the three reservation intake feeds."""

from abc import ABC, abstractmethod

from allocation_engine.domain.entities.reservation import ReservationItem
from allocation_engine.domain.value_objects.enums import SourceTier


class ReservationFeedPort(ABC):
    @abstractmethod
    async def fetch(self, tier: SourceTier) -> list[ReservationItem]:
        """Return every reservation reported by the feed of *tier*.

        Implementations degrade to an empty list when the feed is
        unavailable instead of raising.
        """
        ...

"""Port interface for the agent and store rosters."""

from abc import ABC, abstractmethod

from allocation_engine.domain.entities.agent import Agent


class RosterPort(ABC):
    @abstractmethod
    async def get_agents(self) -> list[Agent]:
        ...

    @abstractmethod
    async def get_stores(self) -> list[dict]:
        """Raw store records (``id``, ``name`` and optional ``inventory``)."""
        ...

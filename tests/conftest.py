"""Pytest configuration and shared fixtures."""

import pytest

from allocation_engine.domain.entities.agent import Agent


class FakeClock:
    """Manually advanced monotonic clock for cache tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def roster():
    return [
        Agent(id="a1", name="Kim", office="Seoul", department="Sales 1", store="S-Gangnam"),
        Agent(id="a2", name="Lee", office="Seoul", department="Sales 1", store="S-Jamsil"),
        Agent(id="a3", name="Park", office="Seoul", department="Sales 2", store="S-Mapo"),
        Agent(id="a4", name="Choi", office="Busan", department="Sales 3", store="B-Haeundae"),
    ]


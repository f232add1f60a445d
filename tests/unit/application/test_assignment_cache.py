"""Tests for AssignmentCache."""

from __future__ import annotations

import asyncio

import pytest

from allocation_engine.application.services.assignment_cache import AssignmentCache, CacheKeyError
from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.value_objects.enums import CacheKind


def test_key_is_order_independent():
    first = AssignmentCache.make_key("agents", {"b": 1, "a": [1, 2]})
    second = AssignmentCache.make_key("agents", {"a": [1, 2], "b": 1})
    assert first == second
    assert first.startswith("agents:a:")


def test_key_accepts_enums_and_dataclasses():
    key = AssignmentCache.make_key(
        CacheKind.ASSIGNMENT_CALCULATION,
        {"agents": [Agent(id="a1", name="Kim", office="Seoul", department="Sales 1")]},
    )
    assert key.startswith("assignmentCalculation:")
    assert '"id": "a1"' in key


def test_unserializable_key_raises():
    with pytest.raises(CacheKeyError):
        AssignmentCache.make_key("agents", {"handle": object()})


def test_get_miss_returns_none(clock):
    assert AssignmentCache(clock=clock).get("nope") is None


def test_entry_expires_at_ttl(clock):
    cache = AssignmentCache(clock=clock)
    cache.set("k", "v", ttl=10)
    clock.advance(9.9)
    assert cache.get("k") == "v"
    clock.advance(0.1)
    assert cache.get("k") is None
    assert len(cache) == 0


def test_default_ttl_applies(clock):
    cache = AssignmentCache(default_ttl=5, clock=clock)
    cache.set("k", "v")
    clock.advance(5)
    assert cache.get("k") is None


def test_full_cache_evicts_nearest_expiry(clock):
    cache = AssignmentCache(max_size=2, clock=clock)
    cache.set("long", 1, ttl=100)
    cache.set("short", 2, ttl=5)
    cache.set("new", 3, ttl=50)
    assert len(cache) == 2
    assert cache.get("short") is None
    assert cache.get("long") == 1
    assert cache.get("new") == 3


def test_overwrite_at_capacity_evicts_nothing(clock):
    cache = AssignmentCache(max_size=2, clock=clock)
    cache.set("a", 1, ttl=10)
    cache.set("b", 2, ttl=20)
    cache.set("a", 3, ttl=10)
    assert cache.get("a") == 3
    assert cache.get("b") == 2


def test_cleanup_removes_only_expired(clock):
    cache = AssignmentCache(clock=clock)
    cache.set("old", 1, ttl=1)
    cache.set("fresh", 2, ttl=60)
    clock.advance(2)
    assert cache.cleanup() == 1
    assert cache.stats()["keys"] == ["fresh"]


def test_clear_by_kind(clock):
    cache = AssignmentCache(clock=clock)
    cache.set(AssignmentCache.make_key(CacheKind.AGENTS), 1)
    cache.set(AssignmentCache.make_key(CacheKind.STORES), 2)
    cache.set(AssignmentCache.make_key(CacheKind.ASSIGNMENT_CALCULATION, {"x": 1}), 3)
    assert cache.clear(CacheKind.AGENTS) == 1
    assert len(cache) == 2
    assert cache.clear() == 2
    assert cache.stats() == {"size": 0, "max_size": 100, "keys": []}


def test_delete(clock):
    cache = AssignmentCache(clock=clock)
    cache.set("k", 1)
    cache.delete("k")
    cache.delete("missing")
    assert cache.get("k") is None


def test_max_size_must_be_positive():
    with pytest.raises(ValueError):
        AssignmentCache(max_size=0)


@pytest.mark.asyncio
async def test_wrap_memoizes_until_expiry(clock):
    cache = AssignmentCache(clock=clock)
    calls = []

    async def compute(x):
        calls.append(x)
        return x * 2

    cached = cache.wrap("double", compute, ttl=30)
    assert await cached(2) == 4
    assert await cached(2) == 4
    assert await cached(3) == 6
    assert calls == [2, 3]

    clock.advance(30)
    assert await cached(2) == 4
    assert calls == [2, 3, 2]


@pytest.mark.asyncio
async def test_wrap_coalesces_concurrent_calls(clock):
    cache = AssignmentCache(clock=clock)
    release = asyncio.Event()
    calls = 0

    async def compute():
        nonlocal calls
        calls += 1
        await release.wait()
        return "done"

    cached = cache.wrap("slow", compute, key_params=dict)
    tasks = [asyncio.create_task(cached()) for _ in range(5)]
    await asyncio.sleep(0)
    release.set()
    results = await asyncio.gather(*tasks)

    assert results == ["done"] * 5
    assert calls == 1


@pytest.mark.asyncio
async def test_wrap_does_not_cache_failures(clock):
    cache = AssignmentCache(clock=clock)
    attempts = 0

    async def flaky():
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            raise RuntimeError("upstream down")
        return "ok"

    cached = cache.wrap("flaky", flaky, key_params=dict)
    with pytest.raises(RuntimeError):
        await cached()
    assert await cached() == "ok"
    assert len(cache) == 1


@pytest.mark.asyncio
async def test_wrap_falls_back_when_key_cannot_be_built(clock):
    cache = AssignmentCache(clock=clock)
    calls = 0

    async def compute(handle):
        nonlocal calls
        calls += 1
        return "value"

    cached = cache.wrap("raw", compute)
    handle = object()
    assert await cached(handle) == "value"
    assert await cached(handle) == "value"
    assert calls == 2
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_sweeper_removes_expired_entries(clock):
    cache = AssignmentCache(sweep_interval=0.01, clock=clock)
    cache.set("k", 1, ttl=1)
    clock.advance(2)
    cache.start_sweeper()
    await asyncio.sleep(0.05)
    await cache.stop_sweeper()
    assert cache.stats()["size"] == 0

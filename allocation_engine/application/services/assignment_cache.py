"""AssignmentCache — keyed store with per-entry expiry and bounded size.

Entries expire lazily on read and are also removed by a periodic sweep.
When full, inserting a new key evicts the single entry closest to
expiry. ``wrap`` memoizes an async computation and coalesces concurrent
identical calls into one in-flight computation.
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
import threading
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class CacheKeyError(ValueError):
    """Raised when parameters cannot be serialized into a cache key."""


@dataclass
class CacheEntry:
    key: str
    payload: Any
    expires_at: float


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Unserializable cache key value of type {type(value).__name__}")


class AssignmentCache:
    def __init__(
        self,
        max_size: int = 100,
        default_ttl: float = 300.0,
        sweep_interval: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
        log: logging.Logger | None = None,
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._max_size = max_size
        self._default_ttl = default_ttl
        self._sweep_interval = sweep_interval
        self._clock = clock
        self._log = log or logger
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._in_flight: dict[str, asyncio.Future] = {}
        self._sweeper: asyncio.Task | None = None

    # ── Keys ─────────────────────────────────────────────────────────

    @staticmethod
    def make_key(kind: str | Enum, params: dict[str, Any] | None = None) -> str:
        """Build ``kind:name1:value1|name2:value2`` with names sorted.

        Raises:
            CacheKeyError: if a value cannot be serialized.
        """
        namespace = kind.value if isinstance(kind, Enum) else str(kind)
        params = params or {}
        try:
            parts = [
                f"{name}:{json.dumps(params[name], sort_keys=True, default=_encode, ensure_ascii=False)}"
                for name in sorted(params)
            ]
        except (TypeError, ValueError) as e:
            raise CacheKeyError(str(e)) from e
        return f"{namespace}:{'|'.join(parts)}"

    # ── Basic operations ─────────────────────────────────────────────

    def _lookup(self, key: str) -> CacheEntry | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                self._log.debug("Cache expired: %s", key)
                return None
            return entry

    def get(self, key: str) -> Any | None:
        entry = self._lookup(key)
        return entry.payload if entry else None

    def set(self, key: str, payload: Any, ttl: float | None = None) -> None:
        ttl = self._default_ttl if ttl is None else ttl
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_size:
                self._evict_nearest_expiry()
            self._entries[key] = CacheEntry(key=key, payload=payload, expires_at=self._clock() + ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def _evict_nearest_expiry(self) -> None:
        victim = min(self._entries.values(), key=lambda e: e.expires_at, default=None)
        if victim is not None:
            del self._entries[victim.key]
            self._log.debug("Cache evicted: %s", victim.key)

    def cleanup(self) -> int:
        """Remove every expired entry; return how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, e in self._entries.items() if now >= e.expires_at]
            for key in expired:
                del self._entries[key]
        if expired:
            self._log.debug("Cache sweep removed %d entries", len(expired))
        return len(expired)

    def clear(self, kind: str | Enum | None = None) -> int:
        """Clear everything, or only entries of one kind. Returns the count removed."""
        with self._lock:
            if kind is None:
                removed = len(self._entries)
                self._entries.clear()
            else:
                prefix = f"{kind.value if isinstance(kind, Enum) else kind}:"
                keys = [k for k in self._entries if k.startswith(prefix)]
                for key in keys:
                    del self._entries[key]
                removed = len(keys)
        self._log.info("Cache cleared (%s): %d entries", kind or "all", removed)
        return removed

    def stats(self) -> dict:
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self._max_size,
                "keys": list(self._entries),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # ── Memoization ──────────────────────────────────────────────────

    def wrap(
        self,
        kind: str | Enum,
        compute: Callable[..., Awaitable[Any]],
        ttl: float | None = None,
        key_params: Callable[..., dict[str, Any]] | None = None,
    ) -> Callable[..., Awaitable[Any]]:
        """Memoize *compute* under *kind*.

        Args:
            kind: namespace for the keys, so unrelated computations never collide.
            compute: coroutine function to memoize.
            ttl: entry lifetime in seconds (defaults to the cache default).
            key_params: maps the call arguments to the key parameters;
                defaults to ``{"args": args, **kwargs}``.
        """

        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            params = key_params(*args, **kwargs) if key_params else {"args": list(args), **kwargs}
            try:
                key = self.make_key(kind, params)
            except CacheKeyError:
                self._log.warning("Cannot build cache key for %s, computing uncached", kind)
                return await compute(*args, **kwargs)

            entry = self._lookup(key)
            if entry is not None:
                self._log.debug("Cache hit: %s", key)
                return entry.payload

            pending = self._in_flight.get(key)
            if pending is not None:
                self._log.debug("Joining in-flight computation: %s", key)
                return await asyncio.shield(pending)

            self._log.debug("Cache miss: %s", key)
            future = asyncio.get_running_loop().create_future()
            self._in_flight[key] = future
            try:
                result = await compute(*args, **kwargs)
            except asyncio.CancelledError:
                future.cancel()
                raise
            except Exception as e:
                future.set_exception(e)
                future.exception()  # mark retrieved when nobody joined
                raise
            else:
                self.set(key, result, ttl)
                future.set_result(result)
                return result
            finally:
                self._in_flight.pop(key, None)

        return wrapper

    # ── Background sweep ─────────────────────────────────────────────

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            self.cleanup()

    def start_sweeper(self) -> None:
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.get_running_loop().create_task(self._sweep_forever())

    async def stop_sweeper(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

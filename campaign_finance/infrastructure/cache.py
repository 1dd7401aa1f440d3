"""In-memory TTL cache with single-flight loading for parsed record batches"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

from campaign_finance.infrastructure.observability.metrics import cache_hit_counter, cache_miss_counter


def _consume_exception(task: asyncio.Future) -> None:
    """Mark a failed load as retrieved even when every waiter was cancelled"""
    if not task.cancelled():
        task.exception()


@dataclass
class _Entry:
    value: Any
    loaded_at: float


class RecordCache:
    """
    Holds loaded values per key for ``ttl_seconds``.

    Concurrent ``get_or_load`` calls for the same key share one in-flight
    load. A failed load is not cached; every waiter sees the exception and
    the next call retries.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._inflight: Dict[str, asyncio.Future] = {}

    def _fresh(self, key: str) -> Optional[_Entry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.loaded_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return entry

    async def get_or_load(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        entry = self._fresh(key)
        if entry is not None:
            cache_hit_counter.inc()
            return entry.value

        inflight = self._inflight.get(key)
        if inflight is None:
            cache_miss_counter.inc()
            inflight = asyncio.ensure_future(self._load(key, loader))
            inflight.add_done_callback(_consume_exception)
            self._inflight[key] = inflight

        # Shield so one cancelled request does not abort the shared load
        return await asyncio.shield(inflight)

    async def _load(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        try:
            value = await loader()
            self._entries[key] = _Entry(value=value, loaded_at=self._clock())
            return value
        finally:
            self._inflight.pop(key, None)

    def invalidate(self, key: Optional[str] = None) -> None:
        """Drop one key, or everything when no key is given"""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

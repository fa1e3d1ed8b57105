# render/cache.py

from __future__ import annotations

import asyncio
import logging
import time
from collections import OrderedDict
from typing import Callable, Dict, Hashable, Optional, Tuple, TypeVar

from .types import PaginatedResponse

logger = logging.getLogger(__name__)

# (conversation_id, message_id)
CacheKey = Tuple[Hashable, Hashable]
T = TypeVar("T")


class ResponseCache:
    """
    Live paginated responses keyed by the message that shows them.

    - One asyncio lock guards the whole map, never held across message I/O.
    - No eviction unless `max_entries` (LRU) or `ttl_seconds` (sliding,
      refreshed on every access) is given.
    - Not persisted; a restart forgets every response.
    """

    def __init__(self, max_entries: Optional[int] = None, ttl_seconds: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        # key -> (response, expires_at)
        self._items: "OrderedDict[CacheKey, Tuple[PaginatedResponse, float]]" = OrderedDict()

    def _expires_at(self) -> float:
        if self.ttl_seconds is None:
            return float("inf")
        return self._clock() + self.ttl_seconds

    def _lookup_unlocked(self, key: CacheKey) -> Optional[PaginatedResponse]:
        item = self._items.get(key)
        if item is None:
            return None
        response, expires_at = item
        if expires_at <= self._clock():
            del self._items[key]
            logger.debug("Expired cached response %s", key)
            return None
        self._items[key] = (response, self._expires_at())
        self._items.move_to_end(key)
        return response

    def _evict_unlocked(self) -> None:
        if self.max_entries is None:
            return
        while len(self._items) > self.max_entries:
            key, _ = self._items.popitem(last=False)
            logger.debug("Evicted cached response %s", key)

    async def insert(self, key: CacheKey, response: PaginatedResponse) -> None:
        async with self._lock:
            self._items[key] = (response, self._expires_at())
            self._items.move_to_end(key)
            self._evict_unlocked()

    async def get(self, key: CacheKey) -> Optional[PaginatedResponse]:
        async with self._lock:
            return self._lookup_unlocked(key)

    async def with_entry(self, key: CacheKey, fn: Callable[[PaginatedResponse], T]) -> Optional[T]:
        """Run `fn` on the entry under the lock. Missing keys are a no-op returning None."""
        async with self._lock:
            response = self._lookup_unlocked(key)
            if response is None:
                return None
            return fn(response)

    async def remove(self, key: CacheKey) -> bool:
        async with self._lock:
            return self._items.pop(key, None) is not None

    async def snapshot(self) -> Dict[CacheKey, int]:
        """Current index of every live entry."""
        async with self._lock:
            return {k: r.current_index for k, (r, _) in self._items.items()}

    def __len__(self) -> int:
        return len(self._items)

# tests/test_cache.py
# Response cache: round trip, entry mutation and optional eviction.

import asyncio

import pytest

from paxbot.render.cache import ResponseCache
from paxbot.render.types import PaginatedResponse, RenderablePage


def _response(n=3):
    return PaginatedResponse(pages=[RenderablePage(f"page {i}") for i in range(n)], query="q")


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_insert_then_get_round_trip():
    async def run():
        cache = ResponseCache()
        resp = _response()
        await cache.insert(("c1", 1), resp)
        got = await cache.get(("c1", 1))
        assert got.pages == resp.pages
        assert got.current_index == 0
    asyncio.run(run())


def test_with_entry_mutates_under_lock_and_misses_are_noop():
    async def run():
        cache = ResponseCache()
        await cache.insert(("c1", 1), _response())

        def bump(r):
            r.current_index = 2
            return r.current_index

        assert await cache.with_entry(("c1", 1), bump) == 2
        assert (await cache.get(("c1", 1))).current_index == 2
        assert await cache.with_entry(("c1", 99), bump) is None
    asyncio.run(run())


def test_insert_overwrites():
    async def run():
        cache = ResponseCache()
        await cache.insert(("c1", 1), _response(3))
        await cache.insert(("c1", 1), _response(1))
        assert len(await cache.get(("c1", 1))) == 1
        assert len(cache) == 1
    asyncio.run(run())


def test_unbounded_by_default():
    async def run():
        cache = ResponseCache()
        for i in range(500):
            await cache.insert(("c", i), _response(1))
        assert len(cache) == 500
    asyncio.run(run())


def test_lru_bound_evicts_least_recently_used():
    async def run():
        cache = ResponseCache(max_entries=2)
        await cache.insert(("c", 1), _response())
        await cache.insert(("c", 2), _response())
        await cache.get(("c", 1))  # 2 is now the oldest
        await cache.insert(("c", 3), _response())
        assert await cache.get(("c", 2)) is None
        assert await cache.get(("c", 1)) is not None
        assert set((await cache.snapshot()).keys()) == {("c", 1), ("c", 3)}
    asyncio.run(run())


def test_ttl_expires_idle_entries():
    async def run():
        clock = FakeClock()
        cache = ResponseCache(ttl_seconds=10, clock=clock)
        await cache.insert(("c", 1), _response())
        clock.now = 8
        assert await cache.get(("c", 1)) is not None  # refreshes
        clock.now = 17
        assert await cache.get(("c", 1)) is not None
        clock.now = 30
        assert await cache.get(("c", 1)) is None
        assert len(cache) == 0
    asyncio.run(run())


def test_remove():
    async def run():
        cache = ResponseCache()
        await cache.insert(("c", 1), _response())
        assert await cache.remove(("c", 1)) is True
        assert await cache.remove(("c", 1)) is False
    asyncio.run(run())


def test_empty_response_is_rejected():
    with pytest.raises(ValueError):
        PaginatedResponse(pages=[])
    with pytest.raises(ValueError):
        PaginatedResponse(pages=[RenderablePage("x")], current_index=1)

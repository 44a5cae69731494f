"""Tests for ChildrenCache -- LRU caching proxy for children loaders.

Covers:
- Cache miss: loader is called, result stored
- Cache hit: loader is NOT called again
- LRU eviction with a small max_size
- Failures are not cached
- invalidate() and clear()
- Protocol conformance of the cache itself
"""

from __future__ import annotations

import asyncio

import pytest

from explorer_tree.cache import ChildrenCache
from explorer_tree.errors import ChildrenNotFoundError
from explorer_tree.loaders.static import StaticChildrenLoader
from explorer_tree.protocols import ChildDescriptor, ChildrenLoader
from explorer_tree.tree.nodes import NodeKind

LISTING = {
    "root": [ChildDescriptor("folder1", "Documents", NodeKind.CONTAINER, has_children=True)],
    "folder1": [ChildDescriptor("file1", "resume.pdf", NodeKind.LEAF)],
    "folder2": [],
}


@pytest.fixture
def loader() -> StaticChildrenLoader:
    return StaticChildrenLoader(LISTING)


class TestHitsAndMisses:
    def test_miss_calls_loader(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)
        children = asyncio.run(cache.load_children("root"))
        assert [c.node_id for c in children] == ["folder1"]
        assert loader.calls == ["root"]
        assert "root" in cache

    def test_hit_skips_loader(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)

        async def twice() -> None:
            await cache.load_children("folder1")
            await cache.load_children("folder1")

        asyncio.run(twice())
        assert loader.calls == ["folder1"]
        assert cache.curr_size == 1

    def test_empty_listing_is_cached(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)

        async def twice() -> None:
            assert await cache.load_children("folder2") == ()
            assert await cache.load_children("folder2") == ()

        asyncio.run(twice())
        assert loader.calls == ["folder2"]

    def test_failure_not_cached(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)
        for _ in range(2):
            with pytest.raises(ChildrenNotFoundError):
                asyncio.run(cache.load_children("nope"))
        assert loader.calls == ["nope", "nope"]
        assert "nope" not in cache


class TestEviction:
    def test_lru_eviction(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader, max_size=2)

        async def run() -> None:
            await cache.load_children("root")
            await cache.load_children("folder1")
            await cache.load_children("root")  # refresh root
            await cache.load_children("folder2")  # evicts folder1

        asyncio.run(run())
        assert cache.max_size == 2
        assert cache.curr_size == 2
        assert "root" in cache
        assert "folder1" not in cache


class TestInvalidation:
    def test_invalidate_forces_reload(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)
        asyncio.run(cache.load_children("root"))
        cache.invalidate("root")
        assert "root" not in cache
        asyncio.run(cache.load_children("root"))
        assert loader.calls == ["root", "root"]

    def test_invalidate_unknown_is_silent(self, loader: StaticChildrenLoader) -> None:
        ChildrenCache(loader).invalidate("nope")

    def test_clear(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)
        asyncio.run(cache.load_children("root"))
        cache.clear()
        assert cache.curr_size == 0


class TestConcurrentLoads:
    def test_concurrent_misses_share_one_loader_call(self) -> None:
        loader = StaticChildrenLoader(LISTING, delay=0.01)
        cache = ChildrenCache(loader)

        async def run() -> list[tuple[ChildDescriptor, ...]]:
            return await asyncio.gather(
                cache.load_children("root"),
                cache.load_children("root"),
                cache.load_children("root"),
            )

        first, second, third = asyncio.run(run())
        assert loader.calls == ["root"]
        assert first == second == third
        assert "root" in cache

    def test_concurrent_failure_reaches_every_caller(self, loader: StaticChildrenLoader) -> None:
        cache = ChildrenCache(loader)

        async def run() -> list[object]:
            return await asyncio.gather(
                cache.load_children("nope"),
                cache.load_children("nope"),
                return_exceptions=True,
            )

        results = asyncio.run(run())
        assert all(isinstance(r, ChildrenNotFoundError) for r in results)
        assert loader.calls == ["nope"]

    def test_cancelled_caller_does_not_cancel_the_other(self) -> None:
        loader = StaticChildrenLoader(LISTING, delay=0.01)
        cache = ChildrenCache(loader)

        async def run() -> tuple[bool, tuple[ChildDescriptor, ...]]:
            first = asyncio.ensure_future(cache.load_children("folder1"))
            second = asyncio.ensure_future(cache.load_children("folder1"))
            await asyncio.sleep(0)
            first.cancel()
            children = await second
            await asyncio.sleep(0)
            return first.cancelled(), children

        first_cancelled, children = asyncio.run(run())
        assert first_cancelled
        assert [c.node_id for c in children] == ["file1"]
        assert loader.calls == ["folder1"]

    def test_timed_out_load_is_started_again(self) -> None:
        loader = StaticChildrenLoader(LISTING, delay=0.05)
        cache = ChildrenCache(loader)

        async def run() -> tuple[ChildDescriptor, ...]:
            with pytest.raises(TimeoutError):
                await asyncio.wait_for(cache.load_children("root"), timeout=0.001)
            return await cache.load_children("root")

        children = asyncio.run(run())
        assert [c.node_id for c in children] == ["folder1"]
        assert loader.calls == ["root", "root"]


class TestProtocol:
    def test_cache_is_a_children_loader(self, loader: StaticChildrenLoader) -> None:
        assert isinstance(ChildrenCache(loader), ChildrenLoader)

"""ChildrenCache: LRU-backed caching proxy for any ChildrenLoader.

Wraps any ChildrenLoader-conformant object and keeps the children fetched
per container id in memory.  Cached ids bypass the loader on subsequent
``load_children()`` calls.  LRU eviction occurs silently when ``max_size``
is exceeded; no error is raised.

Failed loads are never cached, so a retry for the same container reaches
the loader again.  Concurrent first loads of one container wait on a single
loader call.

Example::

    from explorer_tree.cache import ChildrenCache
    from explorer_tree.loaders import StaticChildrenLoader

    cache = ChildrenCache(StaticChildrenLoader(listing), max_size=128)

    # First call hits the loader
    children = await cache.load_children("folder1")

    # Second call is served from memory
    children_again = await cache.load_children("folder1")
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from explorer_tree.protocols import ChildDescriptor, ChildrenLoader

__all__ = ["ChildrenCache"]


@dataclass(slots=True)
class _Pending:
    """A loader call in flight and the number of callers awaiting it."""

    task: asyncio.Future[tuple[ChildDescriptor, ...]]
    waiters: int = 0


class ChildrenCache:
    """LRU-backed caching proxy around any ChildrenLoader.

    Satisfies the ``ChildrenLoader`` Protocol structurally (no inheritance
    required).  Each instance maintains its own ``LRUCache``; no cross-instance
    sharing.

    Args:
        loader: Any object satisfying the ``ChildrenLoader`` Protocol.
        max_size: Maximum number of containers whose children are held in
            memory.  Defaults to 256.
    """

    def __init__(self, loader: ChildrenLoader, max_size: int = 256) -> None:
        self._loader: Any = loader
        self._cache: LRUCache[str, tuple[ChildDescriptor, ...]] = LRUCache(
            maxsize=max_size
        )
        self._pending: dict[str, _Pending] = {}

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # ChildrenLoader Protocol surface
    # ------------------------------------------------------------------

    async def load_children(self, container_id: str) -> tuple[ChildDescriptor, ...]:
        """Return the children of ``container_id``; only cache misses reach the loader.

        Concurrent misses for the same id share one loader call.  When every
        caller waiting on that call has been cancelled (e.g. by a timeout),
        the call itself is cancelled so a retry starts a fresh one.
        """
        cached = self._cache.get(container_id)
        if cached is not None:
            return cached

        pending = self._pending.get(container_id)
        if pending is None:
            pending = _Pending(asyncio.ensure_future(self._fetch(container_id)))
            self._pending[container_id] = pending
        pending.waiters += 1
        try:
            return await asyncio.shield(pending.task)
        finally:
            pending.waiters -= 1
            if pending.waiters == 0:
                if not pending.task.done():
                    pending.task.cancel()
                if self._pending.get(container_id) is pending:
                    del self._pending[container_id]

    async def _fetch(self, container_id: str) -> tuple[ChildDescriptor, ...]:
        children = tuple(await self._loader.load_children(container_id))
        self._cache[container_id] = children
        return children

    # ------------------------------------------------------------------
    # Invalidation
    # ------------------------------------------------------------------

    def __contains__(self, container_id: object) -> bool:
        return container_id in self._cache

    def invalidate(self, container_id: str) -> None:
        """Forget the cached children of ``container_id``, if any."""
        self._cache.pop(container_id, None)

    def clear(self) -> None:
        self._cache.clear()

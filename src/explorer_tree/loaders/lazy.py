"""LazyTreeLoader: fetches children of unloaded containers and splices them in.

Wraps any ``ChildrenLoader`` with an LRU ``ChildrenCache`` and retries
transient failures with jittered exponential backoff via ``tenacity``.  Once
the children arrive they are attached through ``TreeEngine.attach``, so the
result is a new snapshot and the input tree is never touched.

A failed load raises ``LoadError``.  Because nothing was attached, the caller
still holds a valid snapshot and may simply retry the same container later.

Retried:      ``TimeoutError`` (including the per-attempt timeout),
              ``ConnectionError``, and ``LoadError``.
Not retried:  ``ChildrenNotFoundError``; the container is unknown to the
              loader and asking again will not help.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_random_exponential,
)

from explorer_tree.algorithm.config import LoaderConfig
from explorer_tree.cache import ChildrenCache
from explorer_tree.engine import TreeEngine
from explorer_tree.errors import ChildrenNotFoundError, LoadError, NodeNotFoundError
from explorer_tree.tree.index import TreeIndex

if TYPE_CHECKING:
    from explorer_tree.protocols import ChildDescriptor, ChildrenLoader
    from explorer_tree.tree.nodes import Node

__all__ = ["LazyTreeLoader"]

logger = logging.getLogger(__name__)


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, ChildrenNotFoundError):
        return False
    return isinstance(exc, TimeoutError | ConnectionError | LoadError)


class LazyTreeLoader:
    """Loads children on demand for containers marked ``loaded=False``.

    Example::

        from explorer_tree.loaders import LazyTreeLoader, StaticChildrenLoader

        lazy = LazyTreeLoader(StaticChildrenLoader(listing, delay=1.0))
        tree = TreeBuilder().build({"id": "root", "name": "Root",
                                    "type": "folder", "hasChildren": True})
        if lazy.needs_load(tree, "root"):
            tree = await lazy.load(tree, "root")

    Args:
        loader: Any object satisfying the ``ChildrenLoader`` Protocol.  Wrapped
            in a ``ChildrenCache`` unless it already is one.
        config: Retry, timeout and cache settings.  Defaults to ``LoaderConfig()``.
        engine: Engine used to attach the children.  Defaults to ``TreeEngine()``.
    """

    def __init__(
        self,
        loader: ChildrenLoader,
        config: LoaderConfig | None = None,
        engine: TreeEngine | None = None,
    ) -> None:
        self._config: LoaderConfig = config if config is not None else LoaderConfig()
        self._engine = engine if engine is not None else TreeEngine()
        self._cache: ChildrenCache = (
            loader
            if isinstance(loader, ChildrenCache)
            else ChildrenCache(loader, max_size=self._config.cache_size)
        )

        _retry = retry(
            retry=retry_if_exception(_is_transient),
            wait=wait_random_exponential(
                multiplier=self._config.wait_min,
                min=self._config.wait_min,
                max=self._config.wait_max,
            ),
            stop=stop_after_attempt(self._config.max_attempts),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        self._call_loader: Any = _retry(self._raw_call)

    @property
    def cache(self) -> ChildrenCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def needs_load(self, tree: Node, container_id: str) -> bool:
        """True when ``container_id`` is a container whose children are not loaded.

        Raises:
            NodeNotFoundError: ``container_id`` is not in ``tree``.
        """
        node = TreeIndex(tree).node(container_id)
        if node is None:
            raise NodeNotFoundError(container_id)
        return node.is_container and not node.loaded

    async def load(self, tree: Node, container_id: str) -> Node:
        """Return a snapshot in which ``container_id`` has its children loaded.

        Leaves and already loaded containers are returned unchanged without
        calling the loader.

        Raises:
            NodeNotFoundError: ``container_id`` is not in ``tree``.
            LoadError: The children could not be fetched or attached.  ``tree``
                is unchanged and the load can be retried.
        """
        if not self.needs_load(tree, container_id):
            return tree
        return await self._fetch_and_attach(tree, container_id)

    async def refresh(self, tree: Node, container_id: str) -> Node:
        """Fetch the children of ``container_id`` again, bypassing the cache.

        The container's current children are replaced by the fresh listing.

        Raises:
            NodeNotFoundError: ``container_id`` is not in ``tree``.
            LoadError: As for ``load``.
        """
        node = TreeIndex(tree).node(container_id)
        if node is None:
            raise NodeNotFoundError(container_id)
        if not node.is_container:
            return tree
        self._cache.invalidate(container_id)
        return await self._fetch_and_attach(tree, container_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch_and_attach(self, tree: Node, container_id: str) -> Node:
        children = await self._fetch(container_id)
        result = self._engine.attach(tree, container_id, children)
        if result.error is not None:
            self._cache.invalidate(container_id)
            logger.warning(
                f"Could not attach children of {container_id}: {result.error}"
            )
            raise LoadError(container_id, str(result.error)) from result.error
        return result.tree

    async def _fetch(self, container_id: str) -> Sequence[ChildDescriptor]:
        try:
            children: Sequence[ChildDescriptor] = await self._call_loader(container_id)
        except LoadError:
            logger.warning(f"Failed to load children of {container_id}")
            raise
        except (TimeoutError, ConnectionError) as exc:
            logger.warning(f"Failed to load children of {container_id}: {exc!r}")
            raise LoadError(container_id) from exc
        return children

    async def _raw_call(self, container_id: str) -> Sequence[ChildDescriptor]:
        """One load attempt, bounded by the per-attempt timeout; retried via ``_call_loader``."""
        return await asyncio.wait_for(
            self._cache.load_children(container_id),
            timeout=self._config.timeout,
        )

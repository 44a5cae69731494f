"""StaticChildrenLoader: in-memory children listing with simulated latency.

Serves children from a ``container id -> descriptors`` mapping after an
optional delay, standing in for a remote folder-contents endpoint in demos
and tests.  Unknown container ids raise ``ChildrenNotFoundError``.

This loader satisfies the ChildrenLoader Protocol structurally without
inheriting from it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence

from explorer_tree.errors import ChildrenNotFoundError
from explorer_tree.protocols import ChildDescriptor

__all__ = ["StaticChildrenLoader"]


class StaticChildrenLoader:
    """Children loader backed by a plain mapping.

    Example::

        from explorer_tree.loaders import StaticChildrenLoader
        from explorer_tree.protocols import ChildDescriptor
        from explorer_tree.tree import NodeKind

        loader = StaticChildrenLoader(
            {"root": [ChildDescriptor("folder1", "Documents", NodeKind.CONTAINER, True)]},
            delay=1.0,
        )
        await loader.load_children("root")     # after one second
        await loader.load_children("nope")     # raises ChildrenNotFoundError

    Args:
        listing: Children per container id, in display order.
        delay:   Seconds to sleep before answering (>= 0).  Defaults to 0.
    """

    def __init__(
        self,
        listing: Mapping[str, Sequence[ChildDescriptor]],
        delay: float = 0.0,
    ) -> None:
        if delay < 0.0:
            raise ValueError(f"delay must be >= 0.0, got {delay}")
        self._listing = {key: tuple(value) for key, value in listing.items()}
        self._delay = delay
        self.calls: list[str] = []

    def __repr__(self) -> str:
        return f"StaticChildrenLoader(containers={len(self._listing)}, delay={self._delay})"

    async def load_children(self, container_id: str) -> tuple[ChildDescriptor, ...]:
        """Return the children of ``container_id`` after the configured delay.

        Raises:
            ChildrenNotFoundError: ``container_id`` is not in the listing.
        """
        self.calls.append(container_id)
        if self._delay:
            await asyncio.sleep(self._delay)
        try:
            return self._listing[container_id]
        except KeyError:
            raise ChildrenNotFoundError(container_id) from None

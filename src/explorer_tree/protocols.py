"""ChildrenLoader Protocol for the lazy-loading extension point.

Defines the structural interface every children loader must satisfy.  Users
can plug in their own data source without inheriting from any base class:
any class with a conformant async ``load_children`` method passes
``isinstance`` checks.

Example::

    from explorer_tree.protocols import ChildDescriptor, ChildrenLoader
    from explorer_tree.tree import NodeKind

    class MyLoader:
        async def load_children(self, container_id: str) -> list[ChildDescriptor]:
            return [ChildDescriptor("a", "a.txt", NodeKind.LEAF)]

    assert isinstance(MyLoader(), ChildrenLoader)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from explorer_tree.tree.nodes import Node, NodeKind

__all__ = ["ChildDescriptor", "ChildrenLoader"]


@dataclass(frozen=True, slots=True)
class ChildDescriptor:
    """A partial node returned by a loader for one child of a container.

    Attributes:
        node_id:      Id of the child.
        name:         Display name.
        kind:         CONTAINER or LEAF.
        has_children: For containers, True when the child has children of its
                      own that must be fetched later.  Ignored for leaves.
    """

    node_id: str
    name: str
    kind: NodeKind
    has_children: bool = False

    def to_node(self) -> Node:
        """Build the Node this descriptor stands for.

        A container flagged ``has_children`` becomes unloaded; any other
        container is loaded and empty.
        """
        kind = NodeKind(self.kind)
        loaded = not (kind == NodeKind.CONTAINER and self.has_children)
        return Node(node_id=self.node_id, name=self.name, kind=kind, loaded=loaded)


@runtime_checkable
class ChildrenLoader(Protocol):
    """Structural protocol for children loaders.

    ``load_children`` must:
    - Return the immediate children of ``container_id`` in display order.
    - Raise ``ChildrenNotFoundError`` when the container is unknown.
    - Raise ``TimeoutError``, ``ConnectionError`` or ``LoadError`` for
      transient failures; these are retried by ``LazyTreeLoader``.
    """

    async def load_children(self, container_id: str) -> Sequence[ChildDescriptor]: ...

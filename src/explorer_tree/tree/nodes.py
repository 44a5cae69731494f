"""Node dataclass and NodeKind StrEnum for the explorer tree.

Nodes are frozen: every edit builds new nodes along the path from the root to
the changed node and reuses all other subtrees by reference.  There are no
parent back-references; parent lookup is done by traversal or through
``TreeIndex``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum, auto


class NodeKind(StrEnum):
    """The two kinds of node in an explorer tree.

    - CONTAINER -> "container" : a folder, may hold children
    - LEAF      -> "leaf"      : a file, never holds children
    """

    CONTAINER = auto()
    LEAF = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """A node in the explorer tree.

    Attributes:
        node_id:  Opaque unique identifier.  Assigned at creation, never changed.
        name:     Display name.  Not required to be unique among siblings.
        kind:     CONTAINER or LEAF.  Immutable after creation.
        children: Ordered child nodes.  Always empty for LEAF nodes.
        loaded:   False for a container whose children have not been fetched
                  yet.  An unloaded container has no children.
    """

    node_id: str
    name: str
    kind: NodeKind
    children: tuple[Node, ...] = ()
    loaded: bool = True

    @property
    def is_container(self) -> bool:
        return self.kind == NodeKind.CONTAINER

    @property
    def is_leaf(self) -> bool:
        return self.kind == NodeKind.LEAF

    def iter_nodes(self) -> Iterator[Node]:
        """Yield this node and every descendant in pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def container(
    node_id: str,
    name: str,
    children: Iterable[Node] = (),
    loaded: bool = True,
) -> Node:
    """Build a CONTAINER node."""
    return Node(
        node_id=node_id,
        name=name,
        kind=NodeKind.CONTAINER,
        children=tuple(children),
        loaded=loaded,
    )


def leaf(node_id: str, name: str) -> Node:
    """Build a LEAF node."""
    return Node(node_id=node_id, name=name, kind=NodeKind.LEAF)

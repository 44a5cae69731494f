"""TreeIndex: derived id lookups over a single tree snapshot.

Nodes carry no parent pointers.  When an edit needs parent or ancestry
information it builds a ``TreeIndex`` from the snapshot it is about to edit,
so every lookup made for one operation sees the same tree.  The index is
read-only and can be rebuilt from the tree at any time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from explorer_tree.tree.nodes import Node

__all__ = ["TreeIndex"]


class TreeIndex:
    """Id -> node and id -> parent-id maps for one tree snapshot.

    When the tree contains duplicate ids the first occurrence in pre-order
    wins; use ``validation.check_tree`` to reject such trees up front.

    Example::

        index = TreeIndex(root)
        index.parent_id("file1")      # "folder1"
        index.path_to("file1")        # ("root", "folder1")
    """

    def __init__(self, root: Node) -> None:
        self.root = root
        self._nodes: dict[str, Node] = {}
        self._parents: dict[str, str | None] = {}

        stack: list[tuple[Node, str | None]] = [(root, None)]
        while stack:
            node, parent_id = stack.pop()
            if node.node_id in self._nodes:
                continue
            self._nodes[node.node_id] = node
            self._parents[node.node_id] = parent_id
            stack.extend((child, node.node_id) for child in reversed(node.children))

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def node(self, node_id: str) -> Node | None:
        """Return the node with ``node_id``, or None when absent."""
        return self._nodes.get(node_id)

    def parent_id(self, node_id: str) -> str | None:
        """Return the parent id of ``node_id``; None for the root or unknown ids."""
        return self._parents.get(node_id)

    def path_to(self, node_id: str) -> tuple[str, ...]:
        """Return the ancestor ids of ``node_id``, root first, excluding the node.

        Returns an empty tuple for the root and for unknown ids.
        """
        path: list[str] = []
        current = self._parents.get(node_id)
        while current is not None:
            path.append(current)
            current = self._parents.get(current)
        path.reverse()
        return tuple(path)

    def depth(self, node_id: str) -> int:
        """Number of ancestors of ``node_id`` (0 for the root)."""
        return len(self.path_to(node_id))

    def is_descendant(self, node_id: str, ancestor_id: str) -> bool:
        """True when ``ancestor_id`` is a strict ancestor of ``node_id``."""
        current = self._parents.get(node_id)
        while current is not None:
            if current == ancestor_id:
                return True
            current = self._parents.get(current)
        return False

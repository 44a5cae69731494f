"""Structural invariant checks for explorer trees.

A valid tree has unique ids, leaves without children, and unloaded
containers without children.  Single root and acyclicity hold by
construction because nodes own their children and hold no parent pointers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from explorer_tree.errors import InvalidTreeError

if TYPE_CHECKING:
    from explorer_tree.tree.nodes import Node

__all__ = ["check_tree", "find_problems"]


def find_problems(root: Node) -> list[str]:
    """Return one message per invariant violation, in pre-order.

    Args:
        root: Root of the tree to inspect.

    Returns:
        An empty list for a valid tree.
    """
    problems: list[str] = []
    seen: set[str] = set()

    for node in root.iter_nodes():
        if node.node_id in seen:
            problems.append(f"duplicate id {node.node_id!r}")
        seen.add(node.node_id)

        if node.is_leaf and node.children:
            problems.append(f"leaf {node.node_id!r} has children")
        if node.is_leaf and not node.loaded:
            problems.append(f"leaf {node.node_id!r} is marked unloaded")
        if node.is_container and not node.loaded and node.children:
            problems.append(f"unloaded container {node.node_id!r} has children")

    return problems


def check_tree(root: Node) -> None:
    """Raise ``InvalidTreeError`` when ``root`` violates any invariant."""
    problems = find_problems(root)
    if problems:
        raise InvalidTreeError(problems)

"""Public API functions for explorer-tree.

This module provides the user-facing functions.  Each call creates a fresh
``TreeEngine`` to guarantee zero state shared between calls, apart from the
process-wide id generator that keeps created ids unique.

The tree-returning functions (``create_node``, ``rename_node``,
``delete_node``, ``move_node``, ``attach_children``) return the input tree
unchanged when the edit is rejected, or raise the rejection error when
``TreeConfig(strict=True)`` is passed.  Use ``apply`` to get a tagged
``EditResult`` instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from explorer_tree.actions import (
    Action,
    AttachChildren,
    CreateNode,
    DeleteNode,
    MoveNode,
    RenameNode,
)
from explorer_tree.algorithm.config import TreeConfig
from explorer_tree.algorithm.search import SearchMatch
from explorer_tree.algorithm.search import (
    expanded_containers_for_matches as _expanded_containers_for_matches,
)
from explorer_tree.engine import TreeEngine
from explorer_tree.protocols import ChildDescriptor
from explorer_tree.result import EditResult, SearchResult
from explorer_tree.tree.nodes import Node, NodeKind

__all__ = [
    "apply",
    "attach_children",
    "create_node",
    "delete_node",
    "expanded_containers_for_matches",
    "move_node",
    "rename_node",
    "search",
    "search_tree",
]


def apply(tree: Node, action: Action, config: TreeConfig | None = None) -> EditResult:
    """Apply one operation descriptor and return the tagged outcome.

    Args:
        tree:   Root of the latest snapshot.
        action: ``CreateNode``, ``RenameNode``, ``DeleteNode``, ``MoveNode``
                or ``AttachChildren``.
        config: Engine behaviour.  Defaults to ``TreeConfig()`` when None.

    Returns:
        An ``EditResult``; ``result.tree is tree`` whenever the edit was rejected.
    """
    return TreeEngine(config=config).apply(tree, action)


def _tree_of(tree: Node, action: Action, config: TreeConfig | None) -> Node:
    result = apply(tree, action, config=config)
    if result.error is not None and config is not None and config.strict:
        raise result.error
    return result.tree


def create_node(
    tree: Node,
    parent_id: str,
    name: str,
    kind: NodeKind,
    config: TreeConfig | None = None,
) -> Node:
    """Append a new node to the children of container ``parent_id``.

    The new node gets a fresh unique id and, for containers, no children.
    Returns ``tree`` unchanged when ``parent_id`` is missing or not a container.
    """
    return _tree_of(tree, CreateNode(parent_id, name, kind), config)


def rename_node(
    tree: Node,
    node_id: str,
    new_name: str,
    config: TreeConfig | None = None,
) -> Node:
    """Rename ``node_id`` (the root included).  No-op for unknown ids."""
    return _tree_of(tree, RenameNode(node_id, new_name), config)


def delete_node(tree: Node, node_id: str, config: TreeConfig | None = None) -> Node:
    """Remove ``node_id`` and its subtree.  No-op for the root and unknown ids."""
    return _tree_of(tree, DeleteNode(node_id), config)


def move_node(
    tree: Node,
    node_id: str,
    source_parent_id: str,
    target_parent_id: str,
    config: TreeConfig | None = None,
) -> Node:
    """Move ``node_id`` from ``source_parent_id`` to the end of ``target_parent_id``.

    No-op when the node is the root, when any id is unknown, when the target is
    the node or one of its descendants, when the target is not a container,
    or when ``source_parent_id`` is not the node's parent.
    """
    return _tree_of(tree, MoveNode(node_id, source_parent_id, target_parent_id), config)


def attach_children(
    tree: Node,
    container_id: str,
    children: Sequence[ChildDescriptor],
    config: TreeConfig | None = None,
) -> Node:
    """Set the children of ``container_id`` from loaded descriptors and mark it loaded."""
    return _tree_of(tree, AttachChildren(container_id, tuple(children)), config)


def search(tree: Node, query: str, config: TreeConfig | None = None) -> list[SearchMatch]:
    """Return search records for ``query``.

    Matching is a case-insensitive substring test on node names unless
    ``config.case_sensitive`` is set.  An empty query returns an empty list
    unless ``config.empty_query_matches_all`` is set.
    """
    return TreeEngine(config=config).search(tree, query)


def search_tree(tree: Node, query: str, config: TreeConfig | None = None) -> SearchResult:
    """Search and return records together with the matched and to-expand ids."""
    return TreeEngine(config=config).search_tree(tree, query)


def expanded_containers_for_matches(records: Iterable[SearchMatch]) -> frozenset[str]:
    """Return the container ids to expand so that every record is visible."""
    return _expanded_containers_for_matches(records)

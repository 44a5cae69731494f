"""Helpers for the expand/collapse map kept beside the tree.

The map (``node id -> expanded``) belongs to the presentation layer; the
engine never reads or writes it.  These helpers take a map and return a new
dict, leaving the input untouched.  Ids missing from a map count as
collapsed.

Typical flow::

    state = {"root": True}
    result = search_tree(tree, "pdf")
    state = expand(state, result.expanded_ids)      # reveal every match
    tree = delete_node(tree, "folder1")
    state = prune(state, tree)                      # forget deleted folders
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from explorer_tree.tree.nodes import Node

__all__ = ["collapse_all", "expand", "is_expanded", "prune", "toggle"]

ExpandState = Mapping[str, bool]


def is_expanded(state: ExpandState, node_id: str) -> bool:
    return bool(state.get(node_id, False))


def toggle(state: ExpandState, node_id: str) -> dict[str, bool]:
    """Flip the expanded flag of ``node_id``."""
    return {**state, node_id: not is_expanded(state, node_id)}


def expand(state: ExpandState, node_ids: Iterable[str]) -> dict[str, bool]:
    """Mark every id in ``node_ids`` expanded; other entries are kept."""
    return {**state, **dict.fromkeys(node_ids, True)}


def collapse_all(state: ExpandState, keep: Iterable[str] = ()) -> dict[str, bool]:
    """Collapse every entry except the ids in ``keep``, which stay expanded."""
    kept = set(keep)
    return {node_id: node_id in kept for node_id in state}


def prune(state: ExpandState, tree: Node) -> dict[str, bool]:
    """Drop entries whose id no longer exists in ``tree``.

    Moves keep ids, so only deletes (and reloads of a container) make
    entries go stale.
    """
    present = {node.node_id for node in tree.iter_nodes()}
    return {node_id: flag for node_id, flag in state.items() if node_id in present}

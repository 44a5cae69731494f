"""Substring search over node names with auto-expand support.

``search`` walks the whole tree and returns a record for every node whose own
name matches and for every container that has a matching descendant.  The
latter are included only so the caller can reveal the matches; they carry
``is_match=False`` unless their own name matches too.

Records come in pre-order: a container always precedes the records of its
descendants.  ``expanded_containers_for_matches`` turns the records into the
set of container ids to expand so that every match becomes visible.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from explorer_tree.tree.nodes import Node, NodeKind

__all__ = [
    "SearchMatch",
    "expanded_containers_for_matches",
    "matched_ids",
    "search",
]


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """One search record.

    Attributes:
        node_id:  Id of the node.
        name:     Name of the node at search time.
        kind:     CONTAINER or LEAF.
        is_match: True only when the node's own name contains the query.
        path:     Ancestor container ids from the root down to, but not
                  including, this node.
    """

    node_id: str
    name: str
    kind: NodeKind
    is_match: bool
    path: tuple[str, ...]


def search(
    tree: Node,
    query: str,
    *,
    case_sensitive: bool = False,
    empty_query_matches_all: bool = False,
) -> list[SearchMatch]:
    """Return match records for ``query`` over the whole tree.

    Args:
        tree:  Root of the snapshot to search.
        query: Substring to look for in node names.
        case_sensitive: Match case-sensitively.  Default False.
        empty_query_matches_all: When False (default) an empty query returns
            an empty list; when True every node matches.

    Returns:
        Records in pre-order; see ``SearchMatch``.
    """
    if not query and not empty_query_matches_all:
        return []
    needle = query if case_sensitive else query.casefold()

    def matches(name: str) -> bool:
        return needle in (name if case_sensitive else name.casefold())

    # Flatten in pre-order; parents[i] is the position of node i's parent.
    nodes: list[Node] = []
    parents: list[int] = []
    stack: list[tuple[Node, int]] = [(tree, -1)]
    while stack:
        node, parent = stack.pop()
        position = len(nodes)
        nodes.append(node)
        parents.append(parent)
        stack.extend((child, position) for child in reversed(node.children))

    hits = [matches(node.name) for node in nodes]

    # Keep every match and its ancestors; stop at the first ancestor already kept.
    keep = [False] * len(nodes)
    for position, hit in enumerate(hits):
        current = position if hit else -1
        while current != -1 and not keep[current]:
            keep[current] = True
            current = parents[current]

    records: list[SearchMatch] = []
    paths: dict[int, tuple[str, ...]] = {}
    for position, node in enumerate(nodes):
        if not keep[position]:
            continue
        parent = parents[position]
        path = () if parent == -1 else (*paths[parent], nodes[parent].node_id)
        paths[position] = path
        records.append(
            SearchMatch(
                node_id=node.node_id,
                name=node.name,
                kind=node.kind,
                is_match=hits[position],
                path=path,
            )
        )
    return records


def expanded_containers_for_matches(records: Iterable[SearchMatch]) -> frozenset[str]:
    """Union of every ancestor id found in the records' paths."""
    return frozenset(node_id for record in records for node_id in record.path)


def matched_ids(records: Iterable[SearchMatch]) -> frozenset[str]:
    """Ids of the records whose own name matched."""
    return frozenset(record.node_id for record in records if record.is_match)

"""EditResult and SearchResult dataclasses returned by the engine.

EditResult is the tagged outcome of one edit: either the new tree, or the
unchanged input tree together with the error that rejected the edit.
SearchResult bundles the search records with the ids derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from explorer_tree.algorithm.search import SearchMatch
    from explorer_tree.errors import ErrorReason, TreeEditError
    from explorer_tree.tree.nodes import Node

__all__ = ["EditResult", "SearchResult"]


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of ``TreeEngine.apply``.

    Attributes:
        tree:    The new root when applied; the input root, untouched, when not.
        node_id: Id of the node the edit created or affected.  For a rejected
                 edit, the id the rejection is about.
        error:   The rejection, or None when the edit was applied.
    """

    tree: Node
    node_id: str
    error: TreeEditError | None = None

    @property
    def applied(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> ErrorReason | None:
        return self.error.reason if self.error is not None else None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Rich result of a ``search_tree()`` call.

    Attributes:
        query: The query that was searched for.
        matches: Records in pre-order (see ``SearchMatch``).
        matched_ids: Ids of the nodes whose own name matched.
        expanded_ids: Container ids to expand so every match is visible.
        computation_time_ms: Wall-clock duration of the search in milliseconds.
    """

    query: str
    matches: list[SearchMatch]
    matched_ids: frozenset[str]
    expanded_ids: frozenset[str]
    computation_time_ms: float

    @property
    def match_count(self) -> int:
        return len(self.matched_ids)

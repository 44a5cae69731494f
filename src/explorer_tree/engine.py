"""TreeEngine: orchestrator that wires configuration, id generation and edits.

This is the layer between the raw edit functions and the public API.  It
dispatches operation descriptors to ``explorer_tree.algorithm.edits``,
validates names against ``TreeConfig``, draws ids for created nodes, and
turns a raised ``TreeEditError`` into a failed ``EditResult``.

Architecture:
- The engine holds no tree.  Each ``apply`` call takes the caller's latest
  snapshot and returns a new one; a caller that applies actions one at a time
  to the latest snapshot never loses an update.
- A rejected edit returns the input tree object itself, so
  ``result.tree is tree`` holds for every failure.
- Create and rename resolve their target before checking the name, so an
  unknown id is NOT_FOUND whatever the name.  Ids are drawn only for creates
  that passed every check.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from explorer_tree.actions import (
    Action,
    AttachChildren,
    CreateNode,
    DeleteNode,
    MoveNode,
    RenameNode,
)
from explorer_tree.algorithm import edits
from explorer_tree.algorithm.config import TreeConfig
from explorer_tree.algorithm.ids import default_id_generator
from explorer_tree.algorithm.search import (
    SearchMatch,
    expanded_containers_for_matches,
    matched_ids,
    search,
)
from explorer_tree.errors import InvalidNameError, TreeEditError
from explorer_tree.protocols import ChildDescriptor
from explorer_tree.result import EditResult, SearchResult
from explorer_tree.tree.nodes import Node, NodeKind

__all__ = ["TreeEngine"]

logger = logging.getLogger(__name__)


class TreeEngine:
    """Applies edit and search operations to immutable tree snapshots.

    Two engines share nothing but, by default, the process-wide id generator,
    so ids they create never collide.

    Example::

        from explorer_tree.engine import TreeEngine
        from explorer_tree.actions import CreateNode
        from explorer_tree.tree import NodeKind, container

        engine = TreeEngine()
        root = container("root", "Root")
        result = engine.apply(root, CreateNode("root", "notes.txt", NodeKind.LEAF))
        result.applied              # True
        result.tree.children[0]     # Node(node_id=result.node_id, name="notes.txt", ...)
    """

    def __init__(
        self,
        config: TreeConfig | None = None,
        id_generator: Callable[[], str] | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Edit and search behaviour.  Defaults to ``TreeConfig()``.
            id_generator: Zero-argument callable returning a fresh id per call.
                Defaults to the shared process-wide ``IdGenerator``.
        """
        self._config: TreeConfig = config if config is not None else TreeConfig()
        self._new_id = id_generator if id_generator is not None else default_id_generator

    @property
    def config(self) -> TreeConfig:
        return self._config

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def apply(self, tree: Node, action: Action) -> EditResult:
        """Apply one operation descriptor to ``tree``.

        Args:
            tree:   Root of the latest snapshot.
            action: One of the descriptors in ``explorer_tree.actions``.

        Returns:
            An ``EditResult``.  On rejection ``result.tree is tree`` and
            ``result.error`` holds the reason.

        Raises:
            TypeError: If ``action`` is not a known descriptor.
        """
        try:
            new_tree, node_id = self._dispatch(tree, action)
        except TreeEditError as exc:
            logger.debug(f"Rejected {type(action).__name__}: {exc}")
            return EditResult(tree=tree, node_id=exc.node_id, error=exc)
        return EditResult(tree=new_tree, node_id=node_id)

    def create(self, tree: Node, parent_id: str, name: str, kind: NodeKind) -> EditResult:
        return self.apply(tree, CreateNode(parent_id, name, kind))

    def rename(self, tree: Node, node_id: str, new_name: str) -> EditResult:
        return self.apply(tree, RenameNode(node_id, new_name))

    def delete(self, tree: Node, node_id: str) -> EditResult:
        return self.apply(tree, DeleteNode(node_id))

    def move(
        self,
        tree: Node,
        node_id: str,
        source_parent_id: str,
        target_parent_id: str,
    ) -> EditResult:
        return self.apply(tree, MoveNode(node_id, source_parent_id, target_parent_id))

    def attach(
        self,
        tree: Node,
        container_id: str,
        children: Sequence[ChildDescriptor],
    ) -> EditResult:
        return self.apply(tree, AttachChildren(container_id, tuple(children)))

    def _dispatch(self, tree: Node, action: Action) -> tuple[Node, str]:
        if isinstance(action, CreateNode):
            edits.require_container(tree, action.parent_id)
            self._check_name(action.name, action.parent_id)
            node_id = self._new_id()
            new_tree = edits.create_node(
                tree, action.parent_id, action.name, action.kind, node_id
            )
            return new_tree, node_id

        if isinstance(action, RenameNode):
            edits.require_node(tree, action.node_id)
            self._check_name(action.new_name, action.node_id)
            return edits.rename_node(tree, action.node_id, action.new_name), action.node_id

        if isinstance(action, DeleteNode):
            return edits.delete_node(tree, action.node_id), action.node_id

        if isinstance(action, MoveNode):
            new_tree = edits.move_node(
                tree, action.node_id, action.source_parent_id, action.target_parent_id
            )
            return new_tree, action.node_id

        if isinstance(action, AttachChildren):
            children = [descriptor.to_node() for descriptor in action.children]
            new_tree = edits.attach_children(tree, action.container_id, children)
            return new_tree, action.container_id

        raise TypeError(f"Unsupported action: {action!r}")

    def _check_name(self, name: str, node_id: str) -> None:
        if not name:
            raise InvalidNameError(node_id, "name must not be empty")
        limit = self._config.max_name_length
        if limit is not None and len(name) > limit:
            raise InvalidNameError(
                node_id, f"name is {len(name)} characters, limit is {limit}"
            )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, tree: Node, query: str) -> list[SearchMatch]:
        """Return the match records for ``query``; see ``algorithm.search``."""
        return search(
            tree,
            query,
            case_sensitive=self._config.case_sensitive,
            empty_query_matches_all=self._config.empty_query_matches_all,
        )

    def search_tree(self, tree: Node, query: str) -> SearchResult:
        """Search and derive the matched and to-expand id sets in one call."""
        t0 = time.perf_counter()
        records = self.search(tree, query)
        result_matched = matched_ids(records)
        expanded = expanded_containers_for_matches(records)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return SearchResult(
            query=query,
            matches=records,
            matched_ids=result_matched,
            expanded_ids=expanded,
            computation_time_ms=elapsed_ms,
        )

"""explorer-tree - immutable folder/file tree editing and search."""

from __future__ import annotations

from explorer_tree.actions import (
    AttachChildren,
    CreateNode,
    DeleteNode,
    MoveNode,
    RenameNode,
)
from explorer_tree.algorithm.config import LoaderConfig, TreeConfig
from explorer_tree.algorithm.search import SearchMatch
from explorer_tree.api import (
    apply,
    attach_children,
    create_node,
    delete_node,
    expanded_containers_for_matches,
    move_node,
    rename_node,
    search,
    search_tree,
)
from explorer_tree.engine import TreeEngine
from explorer_tree.errors import ErrorReason, LoadError, TreeEditError
from explorer_tree.protocols import ChildDescriptor
from explorer_tree.result import EditResult, SearchResult
from explorer_tree.tree.nodes import Node, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "AttachChildren",
    "ChildDescriptor",
    "CreateNode",
    "DeleteNode",
    "EditResult",
    "ErrorReason",
    "LoadError",
    "LoaderConfig",
    "MoveNode",
    "Node",
    "NodeKind",
    "RenameNode",
    "SearchMatch",
    "SearchResult",
    "TreeConfig",
    "TreeEditError",
    "TreeEngine",
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

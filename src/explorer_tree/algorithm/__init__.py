"""algorithm subpackage: edit operations, search and configuration.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from explorer_tree.algorithm import create_node, search
    from explorer_tree.tree import NodeKind, container

    root = container("root", "Root")
    root = create_node(root, "root", "notes.txt", NodeKind.LEAF, node_id="n1")
    [record.node_id for record in search(root, "notes")]   # ["root", "n1"]
"""

from __future__ import annotations

from explorer_tree.algorithm.config import LoaderConfig, TreeConfig
from explorer_tree.algorithm.edits import (
    attach_children,
    create_node,
    delete_node,
    move_node,
    rename_node,
)
from explorer_tree.algorithm.ids import IdGenerator, default_id_generator
from explorer_tree.algorithm.search import (
    SearchMatch,
    expanded_containers_for_matches,
    matched_ids,
    search,
)

__all__ = [
    "IdGenerator",
    "LoaderConfig",
    "SearchMatch",
    "TreeConfig",
    "attach_children",
    "create_node",
    "default_id_generator",
    "delete_node",
    "expanded_containers_for_matches",
    "matched_ids",
    "move_node",
    "rename_node",
    "search",
]

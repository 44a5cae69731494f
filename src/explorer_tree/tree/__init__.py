"""Tree subpackage: node types and snapshot helpers.

Re-exports the public API for the tree module:
- Node: frozen dataclass representing a folder or file
- NodeKind: StrEnum of the two node kinds (CONTAINER, LEAF)
- TreeBuilder: converts nested mappings to Node trees and back
- TreeIndex: derived id -> node / id -> parent lookups for one snapshot
- check_tree / find_problems: structural invariant checks
"""

from explorer_tree.tree.builder import TreeBuilder
from explorer_tree.tree.index import TreeIndex
from explorer_tree.tree.nodes import Node, NodeKind, container, leaf
from explorer_tree.tree.validation import check_tree, find_problems

__all__ = [
    "Node",
    "NodeKind",
    "TreeBuilder",
    "TreeIndex",
    "check_tree",
    "container",
    "find_problems",
    "leaf",
]

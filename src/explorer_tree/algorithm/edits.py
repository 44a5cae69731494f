"""Path-copying edit operations over immutable Node trees.

Every operation indexes the snapshot it receives once, validates the request
against that index, then rebuilds only the nodes on the paths from the root
to the edited containers.  Every other subtree of the result is the very same
object as in the input, and the input is never mutated.

Rejections raise a ``TreeEditError`` subclass before anything is rebuilt, so
an edit is either applied completely or not at all.

Architecture:
- ``_rewrite`` takes a mapping of node id -> edit function.  The affected set
  is those ids plus all their ancestors; only affected nodes are rebuilt,
  deepest first, and edit functions receive the node together with its
  already rebuilt children.  The rebuild loops over the affected ids instead
  of recursing, so tree depth is bounded by memory, not the call stack.
- Move is a single ``_rewrite`` with two edits (detach at the source parent,
  append at the target) computed against one index, so the detach and the
  attach can never observe different snapshots.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace

from explorer_tree.errors import (
    DuplicateIdError,
    InvalidMoveError,
    InvalidTargetError,
    NodeNotFoundError,
    RootProtectedError,
)
from explorer_tree.tree.index import TreeIndex
from explorer_tree.tree.nodes import Node, NodeKind

__all__ = [
    "attach_children",
    "create_node",
    "delete_node",
    "move_node",
    "rename_node",
    "require_container",
    "require_node",
]

Edit = Callable[[Node, tuple[Node, ...]], Node]


def _rewrite(index: TreeIndex, edits: Mapping[str, Edit]) -> Node:
    """Rebuild the tree of ``index`` applying ``edits`` by node id."""
    depths: dict[str, int] = {}
    for node_id in edits:
        path = index.path_to(node_id)
        depths[node_id] = len(path)
        for level, ancestor_id in enumerate(path):
            depths[ancestor_id] = level

    rebuilt: dict[str, Node] = {}
    for node_id in sorted(depths, key=depths.__getitem__, reverse=True):
        node = _require_node(index, node_id)
        children = tuple(rebuilt.get(child.node_id, child) for child in node.children)
        edit = edits.get(node_id)
        rebuilt[node_id] = (
            edit(node, children) if edit is not None else replace(node, children=children)
        )
    return rebuilt[index.root.node_id]


def require_node(tree: Node, node_id: str) -> Node:
    """Return the node with ``node_id``.

    Raises:
        NodeNotFoundError: ``node_id`` is not in the tree.
    """
    return _require_node(TreeIndex(tree), node_id)


def require_container(tree: Node, node_id: str) -> Node:
    """Return ``node_id`` if it is a loaded container that can take new children.

    Raises:
        NodeNotFoundError:  ``node_id`` is not in the tree.
        InvalidTargetError: ``node_id`` is a leaf or an unloaded container.
    """
    return _require_container(TreeIndex(tree), node_id)


def _require_node(index: TreeIndex, node_id: str) -> Node:
    node = index.node(node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    return node


def _require_container(index: TreeIndex, node_id: str) -> Node:
    node = _require_node(index, node_id)
    if not node.is_container:
        raise InvalidTargetError(node_id, f"{node_id!r} is not a container")
    if not node.loaded:
        raise InvalidTargetError(
            node_id, f"children of {node_id!r} have not been loaded yet"
        )
    return node


def create_node(
    tree: Node,
    parent_id: str,
    name: str,
    kind: NodeKind,
    node_id: str,
) -> Node:
    """Append a new node named ``name`` to the children of ``parent_id``.

    Args:
        tree:      Root of the snapshot to edit.
        parent_id: Id of a loaded container.
        name:      Display name of the new node.
        kind:      CONTAINER (created empty and loaded) or LEAF.
        node_id:   Fresh id for the new node.

    Returns:
        The new root.

    Raises:
        NodeNotFoundError:  ``parent_id`` is not in the tree.
        InvalidTargetError: ``parent_id`` is a leaf or an unloaded container.
        DuplicateIdError:   ``node_id`` is already used in the tree.
    """
    index = TreeIndex(tree)
    _require_container(index, parent_id)
    if node_id in index:
        raise DuplicateIdError(node_id)

    new_node = Node(node_id=node_id, name=name, kind=NodeKind(kind))
    return _rewrite(
        index,
        {parent_id: lambda node, children: replace(node, children=(*children, new_node))},
    )


def rename_node(tree: Node, node_id: str, new_name: str) -> Node:
    """Replace the name of ``node_id`` (the root included); the id is kept.

    Raises:
        NodeNotFoundError: ``node_id`` is not in the tree.
    """
    index = TreeIndex(tree)
    _require_node(index, node_id)
    return _rewrite(
        index,
        {node_id: lambda node, children: replace(node, name=new_name, children=children)},
    )


def delete_node(tree: Node, node_id: str) -> Node:
    """Remove ``node_id`` and its whole subtree.

    Raises:
        RootProtectedError: ``node_id`` is the root.
        NodeNotFoundError:  ``node_id`` is not in the tree.
    """
    if node_id == tree.node_id:
        raise RootProtectedError(node_id)
    index = TreeIndex(tree)
    _require_node(index, node_id)
    parent_id = index.parent_id(node_id)
    if parent_id is None:
        raise NodeNotFoundError(node_id)

    def detach(node: Node, children: tuple[Node, ...]) -> Node:
        return replace(
            node, children=tuple(c for c in children if c.node_id != node_id)
        )

    return _rewrite(index, {parent_id: detach})


def move_node(
    tree: Node,
    node_id: str,
    source_parent_id: str,
    target_parent_id: str,
) -> Node:
    """Detach ``node_id`` from ``source_parent_id`` and append it to ``target_parent_id``.

    The moved subtree is reused as is.  Moving a node within its own parent
    re-appends it at the end of the children.

    Raises:
        RootProtectedError: ``node_id`` is the root.
        NodeNotFoundError:  the node, the source or the target is not in the tree.
        InvalidMoveError:   the target is the node itself or one of its descendants.
        InvalidTargetError: the target is a leaf or unloaded container, or
                            ``source_parent_id`` is not the node's parent.
    """
    if node_id == tree.node_id:
        raise RootProtectedError(node_id)
    index = TreeIndex(tree)
    moved = _require_node(index, node_id)
    _require_node(index, source_parent_id)
    _require_node(index, target_parent_id)

    if target_parent_id == node_id or index.is_descendant(target_parent_id, node_id):
        raise InvalidMoveError(
            node_id,
            f"cannot move {node_id!r} into itself or its descendant {target_parent_id!r}",
        )
    _require_container(index, target_parent_id)
    if index.parent_id(node_id) != source_parent_id:
        raise InvalidTargetError(
            source_parent_id,
            f"{source_parent_id!r} is not the parent of {node_id!r}",
        )

    def without_moved(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(c for c in children if c.node_id != node_id)

    if source_parent_id == target_parent_id:
        return _rewrite(
            index,
            {
                target_parent_id: lambda node, children: replace(
                    node, children=(*without_moved(children), moved)
                )
            },
        )

    return _rewrite(
        index,
        {
            source_parent_id: lambda node, children: replace(
                node, children=without_moved(children)
            ),
            target_parent_id: lambda node, children: replace(
                node, children=(*children, moved)
            ),
        },
    )


def attach_children(tree: Node, container_id: str, children: Sequence[Node]) -> Node:
    """Replace the children of ``container_id`` with ``children`` and mark it loaded.

    This is the bulk form of create used once lazily fetched children arrive.
    The container may be loaded already, in which case its previous children
    are dropped.

    Raises:
        NodeNotFoundError:  ``container_id`` is not in the tree.
        InvalidTargetError: ``container_id`` is a leaf.
        DuplicateIdError:   a new id repeats, or is used outside the container.
    """
    index = TreeIndex(tree)
    target = _require_node(index, container_id)
    if not target.is_container:
        raise InvalidTargetError(container_id, f"{container_id!r} is not a container")

    replaced = {
        node.node_id for child in target.children for node in child.iter_nodes()
    }
    taken = {node.node_id for node in tree.iter_nodes()} - replaced
    for child in children:
        for node in child.iter_nodes():
            if node.node_id in taken:
                raise DuplicateIdError(node.node_id)
            taken.add(node.node_id)

    new_children = tuple(children)
    return _rewrite(
        index,
        {
            container_id: lambda node, _: replace(
                node, children=new_children, loaded=True
            )
        },
    )

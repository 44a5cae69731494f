"""TreeBuilder: converts plain nested mappings to and from Node trees.

The mapping shape is the one file-explorer front ends exchange::

    {
        "id": "root",
        "name": "Root",
        "type": "folder",
        "children": [
            {"id": "file1", "name": "resume.pdf", "type": "file"},
            {"id": "folder2", "name": "Images", "type": "folder", "hasChildren": True},
        ],
    }

``type`` accepts "folder"/"container" and "file"/"leaf".  A folder with no
``children`` key and ``hasChildren: true`` becomes an unloaded container
whose children are fetched later.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

from explorer_tree.tree.nodes import Node, NodeKind
from explorer_tree.tree.validation import check_tree

__all__ = ["TreeBuilder", "parse_kind"]

_KIND_ALIASES: dict[str, NodeKind] = {
    "folder": NodeKind.CONTAINER,
    "container": NodeKind.CONTAINER,
    "file": NodeKind.LEAF,
    "leaf": NodeKind.LEAF,
}

_DUMP_NAMES: dict[NodeKind, str] = {
    NodeKind.CONTAINER: "folder",
    NodeKind.LEAF: "file",
}


def parse_kind(value: Any) -> NodeKind:
    """Map a kind name (or NodeKind) to a NodeKind.

    Raises:
        ValueError: If ``value`` is not a known kind name.
    """
    if isinstance(value, NodeKind):
        return value
    if isinstance(value, str) and value.lower() in _KIND_ALIASES:
        return _KIND_ALIASES[value.lower()]
    raise ValueError(f"Unknown node type: {value!r}")


@dataclass
class TreeBuilder:
    """Converts nested mappings into Node trees and back.

    Example::

        builder = TreeBuilder()
        root = builder.build({"id": "root", "name": "Root", "type": "folder"})
        builder.dump(root)
        # {"id": "root", "name": "Root", "type": "folder", "children": []}
    """

    def build(self, data: Mapping[str, Any]) -> Node:
        """Convert a nested mapping to a Node tree.

        Args:
            data: Root mapping with ``id``, ``name``, ``type`` and optionally
                  ``children`` / ``hasChildren``.

        Returns:
            The root Node.

        Raises:
            TypeError:  If a node or its children have the wrong Python type.
            ValueError: If a kind is unknown, a leaf has children, or ids repeat.
        """
        # Parse in pre-order, then attach children deepest first.
        parsed: list[Node] = []
        child_positions: list[list[int]] = []
        stack: list[tuple[Any, int]] = [(data, -1)]
        while stack:
            item, parent = stack.pop()
            node, raw_children = self._parse_node(item)
            position = len(parsed)
            parsed.append(node)
            child_positions.append([])
            if parent != -1:
                child_positions[parent].append(position)
            stack.extend((child, position) for child in reversed(raw_children))

        built: dict[int, Node] = {}
        for position in reversed(range(len(parsed))):
            node = parsed[position]
            if child_positions[position]:
                children = tuple(built.pop(child) for child in child_positions[position])
                node = replace(node, children=children)
            built[position] = node

        root = built[0]
        check_tree(root)
        return root

    def _parse_node(self, data: Any) -> tuple[Node, Sequence[Any]]:
        """Build ``data`` without its children; also return the raw children."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping for a tree node, got {type(data)!r}")

        node_id = data.get("id")
        name = data.get("name")
        if not isinstance(node_id, str) or not isinstance(name, str):
            raise TypeError(f"Node 'id' and 'name' must be strings: {dict(data)!r}")
        kind = parse_kind(data.get("type"))

        raw_children = data.get("children")
        if kind == NodeKind.LEAF:
            if raw_children:
                raise ValueError(f"File node {node_id!r} cannot have children")
            return Node(node_id=node_id, name=name, kind=kind), ()

        if raw_children is None:
            # No children key: an unloaded folder when the source says more exist.
            loaded = not data.get("hasChildren", False)
            return Node(node_id=node_id, name=name, kind=kind, loaded=loaded), ()

        if not isinstance(raw_children, list | tuple):
            raise TypeError(
                f"'children' of {node_id!r} must be a list, got {type(raw_children)!r}"
            )
        return Node(node_id=node_id, name=name, kind=kind), raw_children

    def dump(self, node: Node) -> dict[str, Any]:
        """Convert a Node tree back to a nested mapping.

        Leaves carry no ``children`` key.  Loaded containers always carry a
        ``children`` list; unloaded ones carry ``hasChildren: True`` instead.
        """
        root = self._dump_fields(node)
        stack: list[tuple[Node, dict[str, Any]]] = [(node, root)]
        while stack:
            current, data = stack.pop()
            if not current.is_container:
                continue
            if not current.loaded:
                data["hasChildren"] = True
                continue
            children = [self._dump_fields(child) for child in current.children]
            data["children"] = children
            stack.extend(zip(current.children, children, strict=True))
        return root

    @staticmethod
    def _dump_fields(node: Node) -> dict[str, Any]:
        return {
            "id": node.node_id,
            "name": node.name,
            "type": _DUMP_NAMES[NodeKind(node.kind)],
        }

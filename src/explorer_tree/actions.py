"""Operation descriptors accepted by ``TreeEngine.apply``.

Each descriptor is a frozen dataclass carrying the fields of one operation.
A caller keeps the latest tree snapshot and feeds descriptors through
``apply`` one at a time, like a reducer.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from explorer_tree.protocols import ChildDescriptor
from explorer_tree.tree.nodes import NodeKind

__all__ = [
    "Action",
    "AttachChildren",
    "CreateNode",
    "DeleteNode",
    "MoveNode",
    "RenameNode",
]


@dataclass(frozen=True, slots=True)
class CreateNode:
    parent_id: str
    name: str
    kind: NodeKind


@dataclass(frozen=True, slots=True)
class RenameNode:
    node_id: str
    new_name: str


@dataclass(frozen=True, slots=True)
class DeleteNode:
    node_id: str


@dataclass(frozen=True, slots=True)
class MoveNode:
    node_id: str
    source_parent_id: str
    target_parent_id: str


@dataclass(frozen=True, slots=True)
class AttachChildren:
    """Splice freshly fetched children into an unloaded container."""

    container_id: str
    children: Sequence[ChildDescriptor]


Action = CreateNode | RenameNode | DeleteNode | MoveNode | AttachChildren

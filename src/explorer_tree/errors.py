"""Exception types raised by tree edits and child loading.

Edit operations raise a ``TreeEditError`` subclass when they reject an
operation.  ``TreeEngine.apply`` converts the raised error into a failed
``EditResult`` so that callers can surface feedback without catching.

Loading errors are separate: a ``LoadError`` is recoverable and a retry for
the same container id may succeed.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = [
    "ChildrenNotFoundError",
    "DuplicateIdError",
    "ErrorReason",
    "InvalidMoveError",
    "InvalidNameError",
    "InvalidTargetError",
    "InvalidTreeError",
    "LoadError",
    "NodeNotFoundError",
    "RootProtectedError",
    "TreeEditError",
]


class ErrorReason(StrEnum):
    """Why an edit was rejected.

    - NOT_FOUND:      A referenced node id does not exist in the tree.
    - INVALID_TARGET: The target is not a container, or the source parent
                      given for a move is not the node's parent.
    - INVALID_MOVE:   The move target is the node itself or a descendant.
    - ROOT_PROTECTED: Attempt to delete or move the root.
    - DUPLICATE_ID:   Attached children reuse an id already in the tree.
    - INVALID_NAME:   Empty name, or longer than the configured maximum.
    """

    NOT_FOUND = auto()
    INVALID_TARGET = auto()
    INVALID_MOVE = auto()
    ROOT_PROTECTED = auto()
    DUPLICATE_ID = auto()
    INVALID_NAME = auto()


class TreeEditError(Exception):
    """Base class for rejected tree edits.

    Attributes:
        node_id: The id the rejection is about.
        reason:  Machine-readable rejection reason.
    """

    reason: ErrorReason

    def __init__(self, node_id: str, message: str | None = None) -> None:
        self.node_id = node_id
        super().__init__(message or f"{self.reason}: {node_id!r}")


class NodeNotFoundError(TreeEditError):
    reason = ErrorReason.NOT_FOUND


class InvalidTargetError(TreeEditError):
    reason = ErrorReason.INVALID_TARGET


class InvalidMoveError(TreeEditError):
    reason = ErrorReason.INVALID_MOVE


class RootProtectedError(TreeEditError):
    reason = ErrorReason.ROOT_PROTECTED


class DuplicateIdError(TreeEditError):
    reason = ErrorReason.DUPLICATE_ID


class InvalidNameError(TreeEditError):
    reason = ErrorReason.INVALID_NAME


class InvalidTreeError(ValueError):
    """A tree snapshot violates the structural invariants.

    Attributes:
        problems: One human-readable line per violation.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("invalid tree: " + "; ".join(problems))


class LoadError(Exception):
    """Fetching the children of a container failed.

    The tree snapshot the load was started from is left untouched, so the
    same load can be retried.
    """

    def __init__(self, container_id: str, message: str | None = None) -> None:
        self.container_id = container_id
        super().__init__(message or f"failed to load children of {container_id!r}")


class ChildrenNotFoundError(LoadError):
    """The loader has no descriptor for the requested container id."""

    def __init__(self, container_id: str) -> None:
        super().__init__(container_id, f"folder with id {container_id!r} not found")

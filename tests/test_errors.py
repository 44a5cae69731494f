"""Tests for the exception hierarchy and ErrorReason values."""

from __future__ import annotations

import pytest

from explorer_tree.errors import (
    ChildrenNotFoundError,
    DuplicateIdError,
    ErrorReason,
    InvalidMoveError,
    InvalidNameError,
    InvalidTargetError,
    LoadError,
    NodeNotFoundError,
    RootProtectedError,
    TreeEditError,
)


class TestTreeEditError:
    @pytest.mark.parametrize(
        ("cls", "reason"),
        [
            (NodeNotFoundError, ErrorReason.NOT_FOUND),
            (InvalidTargetError, ErrorReason.INVALID_TARGET),
            (InvalidMoveError, ErrorReason.INVALID_MOVE),
            (RootProtectedError, ErrorReason.ROOT_PROTECTED),
            (DuplicateIdError, ErrorReason.DUPLICATE_ID),
            (InvalidNameError, ErrorReason.INVALID_NAME),
        ],
    )
    def test_subclass_reason(self, cls: type[TreeEditError], reason: ErrorReason) -> None:
        error = cls("x")
        assert isinstance(error, TreeEditError)
        assert error.reason == reason
        assert error.node_id == "x"

    def test_default_message(self) -> None:
        assert str(NodeNotFoundError("file9")) == "not_found: 'file9'"

    def test_custom_message(self) -> None:
        assert str(InvalidNameError("f", "name must not be empty")) == "name must not be empty"

    def test_reason_is_string(self) -> None:
        assert ErrorReason.ROOT_PROTECTED == "root_protected"


class TestLoadError:
    def test_default_message(self) -> None:
        error = LoadError("folder1")
        assert error.container_id == "folder1"
        assert "folder1" in str(error)

    def test_children_not_found_is_load_error(self) -> None:
        error = ChildrenNotFoundError("nope")
        assert isinstance(error, LoadError)
        assert str(error) == "folder with id 'nope' not found"

    def test_load_error_is_not_edit_error(self) -> None:
        assert not issubclass(LoadError, TreeEditError)

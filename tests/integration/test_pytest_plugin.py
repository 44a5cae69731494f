"""Integration tests for the explorer-tree pytest plugin.

These tests verify that the assert_valid_tree fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require explorer-tree to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from explorer_tree import move_node
from explorer_tree.tree import Node, NodeKind, container, leaf


def test_fixture_passes_valid_tree(assert_valid_tree: Any, documents_tree: Node) -> None:
    """A tree built from a valid mapping passes."""
    assert_valid_tree(documents_tree)


def test_fixture_passes_after_move(assert_valid_tree: Any, documents_tree: Node) -> None:
    """Edits keep the invariants and the id set."""
    tree = move_node(documents_tree, "folder1", "root", "folder2")
    assert_valid_tree(
        tree,
        expected_ids={"root", "folder1", "folder2", "file1", "file2", "file3"},
    )


def test_fixture_fails_duplicate_ids(assert_valid_tree: Any) -> None:
    """Duplicate ids are reported."""
    tree = container("root", "Root", [leaf("x", "a"), leaf("x", "b")])
    with pytest.raises(AssertionError, match=r"duplicate id 'x'"):
        assert_valid_tree(tree)


def test_fixture_fails_leaf_with_children(assert_valid_tree: Any) -> None:
    bad = Node(node_id="f", name="a", kind=NodeKind.LEAF, children=(leaf("g", "b"),))
    with pytest.raises(AssertionError, match=r"leaf 'f' has children"):
        assert_valid_tree(container("root", "Root", [bad]))


def test_fixture_error_message_lists_id_differences(
    assert_valid_tree: Any, documents_tree: Node
) -> None:
    """AssertionError message should list missing and unexpected ids."""
    with pytest.raises(AssertionError) as exc_info:
        assert_valid_tree(documents_tree, expected_ids={"root", "folder9"})

    error_message = str(exc_info.value)
    assert error_message.startswith("Tree is not valid:")
    assert "missing ids: ['folder9']" in error_message
    assert "unexpected ids:" in error_message
    assert "file1" in error_message


def test_fixture_returns_callable(assert_valid_tree: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_valid_tree)


def test_plugin_discovery() -> None:
    """Verify assert_valid_tree appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).parent.parent.parent),
    )
    assert "assert_valid_tree" in result.stdout, (
        f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
    )

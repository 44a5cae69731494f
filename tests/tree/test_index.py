"""Tests for TreeIndex lookups over one snapshot."""

from __future__ import annotations

from explorer_tree.tree.index import TreeIndex
from explorer_tree.tree.nodes import Node, container, leaf


class TestLookups:
    def test_len_counts_every_node(self, documents_tree: Node) -> None:
        assert len(TreeIndex(documents_tree)) == 6

    def test_contains(self, documents_tree: Node) -> None:
        index = TreeIndex(documents_tree)
        assert "file3" in index
        assert "missing" not in index

    def test_node_returns_same_object(self, documents_tree: Node) -> None:
        index = TreeIndex(documents_tree)
        assert index.node("folder1") is documents_tree.children[0]
        assert index.node("root") is documents_tree
        assert index.node("missing") is None

    def test_parent_id(self, documents_tree: Node) -> None:
        index = TreeIndex(documents_tree)
        assert index.parent_id("file1") == "folder1"
        assert index.parent_id("folder2") == "root"
        assert index.parent_id("root") is None
        assert index.parent_id("missing") is None


class TestAncestry:
    def test_path_to_is_root_first(self, nested_tree: Node) -> None:
        index = TreeIndex(nested_tree)
        assert index.path_to("C") == ("root", "A", "B")
        assert index.path_to("root") == ()
        assert index.path_to("missing") == ()

    def test_depth(self, nested_tree: Node) -> None:
        index = TreeIndex(nested_tree)
        assert index.depth("root") == 0
        assert index.depth("A") == 1
        assert index.depth("C") == 3

    def test_is_descendant(self, nested_tree: Node) -> None:
        index = TreeIndex(nested_tree)
        assert index.is_descendant("C", "A")
        assert index.is_descendant("C", "root")
        assert not index.is_descendant("A", "C")
        assert not index.is_descendant("A", "A")
        assert not index.is_descendant("D", "A")


class TestDuplicates:
    def test_first_occurrence_in_pre_order_wins(self) -> None:
        first = leaf("x", "first")
        second = leaf("x", "second")
        tree = container("root", "Root", [container("a", "A", [first]), second])
        index = TreeIndex(tree)
        assert index.node("x") is first
        assert index.parent_id("x") == "a"

"""``assert_valid_tree`` fixture for projects that keep explorer trees.

Registered under the ``explorer_tree`` name in the ``pytest11`` entry-point
group, so any test session with explorer-tree installed can request the
fixture without importing this module.  The check is ``find_problems`` plus
an optional comparison of the tree's id set against the ids a test expects.
"""

from __future__ import annotations

from typing import Any

import pytest

from explorer_tree.tree.nodes import Node
from explorer_tree.tree.validation import find_problems


@pytest.fixture(scope="session")
def assert_valid_tree() -> Any:
    """Fixture that returns a callable tree-invariant asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_move_keeps_tree_valid(assert_valid_tree):
            tree = move_node(tree, "folder1", "root", "folder2")
            assert_valid_tree(tree)

        def test_expected_ids(assert_valid_tree):
            assert_valid_tree(tree, expected_ids={"root", "folder1", "file1"})

    Returns:
        A callable ``_assert(tree, expected_ids=None) -> None`` that raises
        ``AssertionError`` listing every problem found.
    """

    def _assert(tree: Node, expected_ids: set[str] | None = None) -> None:
        """Assert that ``tree`` satisfies the structural invariants.

        Args:
            tree:         Root of the tree to check.
            expected_ids: When given, the exact set of ids the tree must hold.

        Raises:
            AssertionError: With one line per invariant violation, plus the
                missing and unexpected ids when ``expected_ids`` is given.
        """
        problems = find_problems(tree)
        if expected_ids is not None:
            actual = {node.node_id for node in tree.iter_nodes()}
            missing = sorted(expected_ids - actual)
            unexpected = sorted(actual - expected_ids)
            if missing:
                problems.append(f"missing ids: {missing}")
            if unexpected:
                problems.append(f"unexpected ids: {unexpected}")
        if problems:
            raise AssertionError(
                "Tree is not valid:\n" + "\n".join(f"  - {p}" for p in problems)
            )

    return _assert

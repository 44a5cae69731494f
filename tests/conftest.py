"""Shared tree fixtures.

All trees are built from fixed mappings.  No random values.

- ``documents_tree``: root -> {Documents -> {resume.pdf, cover-letter.docx},
  Images -> {profile.jpg}}
- ``nested_tree``:    root -> {A -> {B -> {C}}, D}
- ``lazy_tree``:      a root whose children have not been loaded yet
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from explorer_tree.tree import Node, TreeBuilder

DOCUMENTS: dict[str, Any] = {
    "id": "root",
    "name": "Root",
    "type": "folder",
    "children": [
        {
            "id": "folder1",
            "name": "Documents",
            "type": "folder",
            "children": [
                {"id": "file1", "name": "resume.pdf", "type": "file"},
                {"id": "file2", "name": "cover-letter.docx", "type": "file"},
            ],
        },
        {
            "id": "folder2",
            "name": "Images",
            "type": "folder",
            "children": [
                {"id": "file3", "name": "profile.jpg", "type": "file"},
            ],
        },
    ],
}

NESTED: dict[str, Any] = {
    "id": "root",
    "name": "Root",
    "type": "folder",
    "children": [
        {
            "id": "A",
            "name": "A",
            "type": "folder",
            "children": [
                {
                    "id": "B",
                    "name": "B",
                    "type": "folder",
                    "children": [{"id": "C", "name": "C", "type": "folder", "children": []}],
                }
            ],
        },
        {"id": "D", "name": "D", "type": "folder", "children": []},
    ],
}

LAZY: dict[str, Any] = {"id": "root", "name": "Root", "type": "folder", "hasChildren": True}


@pytest.fixture
def documents_tree() -> Node:
    return TreeBuilder().build(DOCUMENTS)


@pytest.fixture
def nested_tree() -> Node:
    return TreeBuilder().build(NESTED)


@pytest.fixture
def lazy_tree() -> Node:
    return TreeBuilder().build(LAZY)


@pytest.fixture
def documents_mapping() -> dict[str, Any]:
    return copy.deepcopy(DOCUMENTS)

"""Loaders subpackage for explorer-tree.

- ``StaticChildrenLoader``: in-memory listing with simulated latency.
- ``LazyTreeLoader``: cached, retried loading that splices fetched children
  into a tree snapshot.

Both work with any object satisfying the ``ChildrenLoader`` Protocol.
"""

from explorer_tree.loaders.lazy import LazyTreeLoader
from explorer_tree.loaders.static import StaticChildrenLoader

__all__ = ["LazyTreeLoader", "StaticChildrenLoader"]

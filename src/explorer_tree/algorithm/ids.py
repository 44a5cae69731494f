"""IdGenerator: collision-free node ids for the lifetime of the process.

Ids are ``"<prefix>-<n>"`` where ``n`` comes from a monotonic counter.  The
default prefix is a random token drawn once per generator, so two generators
never hand out the same id either.
"""

from __future__ import annotations

import itertools
import uuid

__all__ = ["IdGenerator", "default_id_generator"]


class IdGenerator:
    """Monotonic id source.

    ``itertools.count`` advances atomically under the GIL, so one generator
    can be shared between threads.

    Example::

        ids = IdGenerator(prefix="node")
        ids()   # "node-1"
        ids()   # "node-2"
    """

    def __init__(self, prefix: str | None = None) -> None:
        self._prefix = prefix if prefix is not None else uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)

    @property
    def prefix(self) -> str:
        return self._prefix

    def __call__(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


# Shared by every engine that is not given its own generator.
default_id_generator = IdGenerator()

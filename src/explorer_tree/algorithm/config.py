"""TreeConfig and LoaderConfig for engine and lazy-loading configuration.

Both are frozen (immutable) dataclasses validated on construction.
TreeConfig governs edit and search behaviour; LoaderConfig governs how
children are fetched for unloaded containers.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LoaderConfig", "TreeConfig"]


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for edits and search.

    Attributes:
        case_sensitive: When True, search matches names case-sensitively.
            Default False (case-insensitive substring match).
        empty_query_matches_all: When True, an empty query matches every node.
            Default False: an empty query returns no records.
        strict: When True, the tree-returning API functions raise the
            rejection error instead of returning the input tree unchanged.
        max_name_length: Optional upper bound on node names for create and
            rename.  None disables the check.  Empty names are always rejected.
    """

    case_sensitive: bool = False
    empty_query_matches_all: bool = False
    strict: bool = False
    max_name_length: int | None = None

    def __post_init__(self) -> None:
        if self.max_name_length is not None and self.max_name_length < 1:
            msg = f"max_name_length must be >= 1, got {self.max_name_length}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Immutable configuration for fetching children of unloaded containers.

    Attributes:
        max_attempts: Attempts per load, including the first (>= 1).
        wait_min: Lower bound of the jittered exponential backoff, seconds.
        wait_max: Upper bound of the backoff, seconds (>= wait_min).
        timeout: Per-attempt timeout in seconds, or None for no timeout.
        cache_size: Number of containers whose fetched children are kept in
            the LRU cache (>= 1).
    """

    max_attempts: int = 3
    wait_min: float = 0.1
    wait_max: float = 2.0
    timeout: float | None = 10.0
    cache_size: int = 256

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {self.max_attempts}"
            raise ValueError(msg)
        if self.wait_min < 0.0:
            msg = f"wait_min must be >= 0.0, got {self.wait_min}"
            raise ValueError(msg)
        if self.wait_max < self.wait_min:
            msg = f"wait_max must be >= wait_min, got {self.wait_max} < {self.wait_min}"
            raise ValueError(msg)
        if self.timeout is not None and self.timeout <= 0.0:
            msg = f"timeout must be > 0.0, got {self.timeout}"
            raise ValueError(msg)
        if self.cache_size < 1:
            msg = f"cache_size must be >= 1, got {self.cache_size}"
            raise ValueError(msg)

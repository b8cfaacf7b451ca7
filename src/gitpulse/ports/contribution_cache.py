"""Contribution cache interface."""

from typing import Protocol

from gitpulse.core.cache import CacheInfo, CacheLookup
from gitpulse.core.contributions import ContributionDay


class CacheError(Exception):
    """Raised when the cache directory cannot be cleared or recreated."""

    pass


class ContributionCache(Protocol):
    """Interface for per-user contribution caching."""

    def lookup(self, username: str) -> CacheLookup:
        """Classify the user's cache entry, returning its days when fresh."""
        ...

    def store(self, username: str, days: list[ContributionDay]) -> None:
        """Write the user's entry. Raises OSError on failure."""
        ...

    def clear(self) -> None:
        """Remove every entry. Raises CacheError on failure."""
        ...

    def clear_user(self, username: str) -> None:
        """Remove one user's entry. Missing entries are not an error."""
        ...

    def info(self, username: str) -> CacheInfo:
        """Describe the user's entry."""
        ...

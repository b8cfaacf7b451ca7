"""Pure cache freshness logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

from .contributions import ContributionDay


class CacheState(Enum):
    """Outcome of checking a user's cache file."""

    FRESH = "fresh"
    STALE = "stale"
    ABSENT = "absent"
    CORRUPT = "corrupt"


@dataclass
class CacheLookup:
    """Cache-check result. `days` is only set when the state is FRESH."""

    state: CacheState
    days: list[ContributionDay] | None = None


@dataclass
class CacheInfo:
    """Diagnostics for one user's cache file."""

    exists: bool
    age_seconds: float | None = None
    size_bytes: int | None = None
    days_count: int | None = None
    is_fresh: bool = False


def is_fresh(age_seconds: float, ttl_seconds: int) -> bool:
    """
    True while a cache entry is within its time-to-live.

    An age of exactly ttl_seconds is still fresh. A negative age (file
    modified in the future, e.g. after a clock change) also counts as fresh.
    """
    return age_seconds <= ttl_seconds


def is_valid_username(username: str) -> bool:
    """A username must be usable as a single file name component."""
    if not username or not isinstance(username, str):
        return False
    if username in (".", "..") or username != username.strip():
        return False
    return not any(sep in username for sep in ("/", "\\", "\0"))

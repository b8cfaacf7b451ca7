"""Functional core - pure business logic with no I/O."""

from .contributions import (
    ContributionDay,
    FetchResult,
    InvalidResponseError,
    flatten_calendar,
    total_contributions,
    intensity_level,
    group_into_weeks,
)
from .cache import CacheState, CacheLookup, CacheInfo, is_fresh, is_valid_username

__all__ = [
    # Contributions
    "ContributionDay",
    "FetchResult",
    "InvalidResponseError",
    "flatten_calendar",
    "total_contributions",
    "intensity_level",
    "group_into_weeks",
    # Cache
    "CacheState",
    "CacheLookup",
    "CacheInfo",
    "is_fresh",
    "is_valid_username",
]

"""GitPulse - GitHub contribution calendar backend."""

from .commands import (
    cache_info,
    clear_cache,
    clear_user_cache,
    delete_github_token,
    fetch_contributions,
    get_github_token,
    save_github_token,
)
from .core.contributions import ContributionDay, FetchResult

__all__ = [
    "fetch_contributions",
    "clear_cache",
    "clear_user_cache",
    "cache_info",
    "save_github_token",
    "get_github_token",
    "delete_github_token",
    "ContributionDay",
    "FetchResult",
]

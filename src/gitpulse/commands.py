"""Operations exposed to the desktop host.

Each command builds its collaborators from config unless the caller
injects them, runs one unit of work, and returns a plain value the host
can render. Credential and cache-clear failures raise; fetch failures
come back inside the FetchResult.
"""

import logging

from .adapters.file_cache import FileContributionCache
from .adapters.github_graphql import FetchError, GitHubGraphQLAdapter
from .adapters.keyring_store import KeyringCredentialStore
from .config import Config, load_config
from .core.cache import CacheInfo, CacheState, is_valid_username
from .core.contributions import FetchResult
from .ports.contribution_cache import ContributionCache
from .ports.contribution_source import ContributionSource
from .ports.credential_store import CredentialStore

logger = logging.getLogger(__name__)

CACHE_CLEARED_MESSAGE = "Cache cleared successfully"
INVALID_USERNAME_MESSAGE = "Invalid username provided"


def get_cache(config: Config) -> FileContributionCache:
    """Resolve the contribution cache from config."""
    return FileContributionCache(config.cache_dir, ttl_seconds=config.cache_ttl_seconds)


def get_source(config: Config) -> GitHubGraphQLAdapter:
    """Resolve the remote contribution source from config."""
    return GitHubGraphQLAdapter(config)


def get_store() -> KeyringCredentialStore:
    """Resolve the platform credential store."""
    return KeyringCredentialStore()


# ============== Contributions ==============


def fetch_contributions(
    username: str,
    token: str | None = None,
    *,
    config: Config | None = None,
    cache: ContributionCache | None = None,
    source: ContributionSource | None = None,
) -> FetchResult:
    """Return the user's contribution days, from cache when fresh."""
    if not is_valid_username(username):
        return FetchResult.failure(INVALID_USERNAME_MESSAGE)

    config = config or load_config()
    cache = cache or get_cache(config)

    lookup = cache.lookup(username)
    match lookup.state:
        case CacheState.FRESH:
            return FetchResult.success(lookup.days)
        case CacheState.CORRUPT:
            logger.info(f"Cache for {username} is corrupt, refetching")
        case CacheState.STALE:
            logger.debug(f"Cache for {username} is stale, refetching")
        case CacheState.ABSENT:
            logger.debug(f"No cache for {username}, fetching")

    source = source or get_source(config)
    try:
        days = source.fetch_calendar(username, token)
    except FetchError as e:
        logger.warning(f"Fetch failed for {username}: {e}")
        return FetchResult.failure(str(e))

    try:
        cache.store(username, days)
    except OSError as e:
        logger.warning(f"Failed to write cache for {username}: {e}")

    return FetchResult.success(days)


def clear_cache(*, config: Config | None = None, cache: ContributionCache | None = None) -> str:
    """Empty the cache directory. Raises CacheError on filesystem failure."""
    cache = cache or get_cache(config or load_config())
    cache.clear()
    return CACHE_CLEARED_MESSAGE


def clear_user_cache(
    username: str,
    *,
    config: Config | None = None,
    cache: ContributionCache | None = None,
) -> None:
    """Drop one user's cache file."""
    if not is_valid_username(username):
        raise ValueError(INVALID_USERNAME_MESSAGE)
    cache = cache or get_cache(config or load_config())
    cache.clear_user(username)


def cache_info(
    username: str,
    *,
    config: Config | None = None,
    cache: ContributionCache | None = None,
) -> CacheInfo:
    """Describe one user's cache file."""
    if not is_valid_username(username):
        raise ValueError(INVALID_USERNAME_MESSAGE)
    cache = cache or get_cache(config or load_config())
    return cache.info(username)


# ============== GitHub Token ==============


def save_github_token(
    token: str,
    *,
    config: Config | None = None,
    store: CredentialStore | None = None,
) -> None:
    """Store the GitHub token in the credential store."""
    config = config or load_config()
    store = store or get_store()
    store.save(config.keyring_service, config.keyring_user, token)


def get_github_token(*, config: Config | None = None, store: CredentialStore | None = None) -> str:
    """Read the GitHub token. Raises NotFound when none is stored."""
    config = config or load_config()
    store = store or get_store()
    return store.get(config.keyring_service, config.keyring_user)


def delete_github_token(*, config: Config | None = None, store: CredentialStore | None = None) -> None:
    """Remove the GitHub token. Raises NotFound when none is stored."""
    config = config or load_config()
    store = store or get_store()
    store.delete(config.keyring_service, config.keyring_user)

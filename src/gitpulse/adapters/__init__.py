"""Adapters - I/O implementations of ports."""

from .github_graphql import GitHubGraphQLAdapter, FetchError
from .file_cache import FileContributionCache
from .keyring_store import KeyringCredentialStore

__all__ = [
    "GitHubGraphQLAdapter",
    "FetchError",
    "FileContributionCache",
    "KeyringCredentialStore",
]

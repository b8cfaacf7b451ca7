"""Ports - interfaces/protocols for external dependencies."""

from .credential_store import (
    CredentialStore,
    CredentialStoreError,
    NotFound,
    StoreUnavailable,
    WriteFailed,
)
from .contribution_source import ContributionSource
from .contribution_cache import CacheError, ContributionCache

__all__ = [
    "CredentialStore",
    "CredentialStoreError",
    "NotFound",
    "StoreUnavailable",
    "WriteFailed",
    "ContributionSource",
    "ContributionCache",
    "CacheError",
]

"""Credential store interface."""

from typing import Protocol


class CredentialStoreError(Exception):
    """Base class for credential store failures. str() is the platform message."""

    pass


class StoreUnavailable(CredentialStoreError):
    """Raised when the platform store cannot be opened."""

    pass


class WriteFailed(CredentialStoreError):
    """Raised when the platform store rejects a write."""

    pass


class NotFound(CredentialStoreError):
    """Raised when no secret exists for the (service, user) pair."""

    pass


class CredentialStore(Protocol):
    """Interface for one-secret-per-(service, user) storage."""

    def save(self, service: str, user: str, secret: str) -> None:
        """Create or overwrite the secret."""
        ...

    def get(self, service: str, user: str) -> str:
        """Return the secret. Raises NotFound if there is none."""
        ...

    def delete(self, service: str, user: str) -> None:
        """Remove the secret. Raises NotFound if there is none."""
        ...

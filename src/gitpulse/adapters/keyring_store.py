"""OS credential store adapter backed by the keyring library."""

import logging

import keyring
from keyring.errors import KeyringError, PasswordDeleteError, PasswordSetError

from gitpulse.ports.credential_store import NotFound, StoreUnavailable, WriteFailed

logger = logging.getLogger(__name__)


class KeyringCredentialStore:
    """
    Keyring-backed credential store.

    Implements CredentialStore protocol. Every call goes straight to the
    platform backend; nothing is kept in memory between calls.
    """

    def save(self, service: str, user: str, secret: str) -> None:
        """Create or overwrite the secret."""
        try:
            keyring.set_password(service, user, secret)
        except PasswordSetError as e:
            raise WriteFailed(str(e)) from e
        except KeyringError as e:
            raise StoreUnavailable(str(e)) from e
        logger.info(f"Saved credential {service}/{user}")

    def get(self, service: str, user: str) -> str:
        """Return the secret. Raises NotFound if there is none."""
        try:
            secret = keyring.get_password(service, user)
        except KeyringError as e:
            raise StoreUnavailable(str(e)) from e
        if secret is None:
            raise NotFound(f"No credential stored for {service}/{user}")
        return secret

    def delete(self, service: str, user: str) -> None:
        """Remove the secret. Raises NotFound if there is none."""
        try:
            keyring.delete_password(service, user)
        except PasswordDeleteError as e:
            raise NotFound(str(e) or f"No credential stored for {service}/{user}") from e
        except KeyringError as e:
            raise StoreUnavailable(str(e)) from e
        logger.info(f"Deleted credential {service}/{user}")

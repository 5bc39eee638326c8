"""
Vault Secret Store

Lenient facade over VaultClient for application code that treats a missing
or unreachable secret as "no value" instead of an exception.
"""
import logging
from typing import Optional

from vaultkit.secrets.exceptions import SecretNotFoundError, VaultError
from vaultkit.secrets.vault_client import VaultClient

logger = logging.getLogger(__name__)


class VaultSecretStore:
    """Resolve, store and delete secrets, logging failures."""

    def __init__(self, client: VaultClient):
        self.client = client

    def resolve_secret(self, key: str) -> Optional[str]:
        """
        Resolve a secret value.

        Returns:
            The secret value, or None if it is absent or Vault failed
        """
        try:
            return self.client.get_secret(key).value
        except SecretNotFoundError:
            logger.debug(f"Secret {key} not found in Vault")
            return None
        except VaultError as e:
            logger.error(f"Failed to resolve secret {key} from Vault: {e}")
            return None

    def store_secret(self, key: str, value: str) -> bool:
        """Store a secret. Returns True if Vault accepted the write."""
        try:
            self.client.set_secret(key, value)
            return True
        except VaultError as e:
            logger.error(f"Failed to store secret {key} in Vault: {e}")
            return False

    def delete_secret(self, key: str) -> bool:
        """Destroy a secret. Returns True if Vault accepted the deletion."""
        try:
            return self.client.destroy_secret(key)
        except VaultError as e:
            logger.error(f"Failed to delete secret {key} from Vault: {e}")
            return False

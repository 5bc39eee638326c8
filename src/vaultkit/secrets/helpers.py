"""
Vault Helper Functions

Helper functions for integrating Vault with application code.
"""
import logging
from typing import Optional

from vaultkit.secrets.config import VaultClientConfig
from vaultkit.secrets.exceptions import ConfigurationError
from vaultkit.secrets.health_check import VaultHealthCheck
from vaultkit.secrets.vault_client import VaultClient

logger = logging.getLogger(__name__)

# Global Vault client instance (lazy initialization)
_vault_client: Optional[VaultClient] = None


def get_vault_client() -> Optional[VaultClient]:
    """
    Get or create the Vault client instance.

    Returns:
        VaultClient instance or None if Vault is not configured
    """
    global _vault_client

    if _vault_client is not None:
        return _vault_client

    try:
        config = VaultClientConfig.from_env()
    except ConfigurationError as e:
        logger.debug(f"Vault not configured: {e}")
        return None

    _vault_client = VaultClient(config)
    logger.info(f"Vault client initialized: {config.vault_url}")
    return _vault_client


def get_health_check() -> Optional[VaultHealthCheck]:
    """
    Get a health check bound to the Vault client.

    Returns:
        VaultHealthCheck or None if Vault is not configured
    """
    vault = get_vault_client()
    if not vault:
        return None
    return VaultHealthCheck(vault)


def reset_vault_client() -> None:
    """Close and drop the cached Vault client."""
    global _vault_client
    if _vault_client is not None:
        _vault_client.close()
    _vault_client = None

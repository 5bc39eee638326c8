"""
Vaultkit Secrets Management

HashiCorp Vault KV v2 client, health classification and health probes.
"""

from vaultkit.secrets.config import VaultClientConfig
from vaultkit.secrets.exceptions import (
    ConfigurationError,
    SecretNotFoundError,
    VaultError,
    VaultProtocolError,
    VaultResponseError,
    VaultTransportError,
)
from vaultkit.secrets.health import HealthCode, classify_health
from vaultkit.secrets.models import HealthPayload, HealthResult, SecretEntry, SecretWriteResult
from vaultkit.secrets.vault_client import VaultClient
from vaultkit.secrets.health_check import HealthCheckResult, VaultHealthCheck
from vaultkit.secrets.store import VaultSecretStore
from vaultkit.secrets.helpers import get_health_check, get_vault_client, reset_vault_client

__all__ = [
    'VaultClient',
    'VaultClientConfig',
    'ConfigurationError',
    'SecretNotFoundError',
    'VaultError',
    'VaultProtocolError',
    'VaultResponseError',
    'VaultTransportError',
    'HealthCode',
    'classify_health',
    'HealthPayload',
    'HealthResult',
    'SecretEntry',
    'SecretWriteResult',
    'HealthCheckResult',
    'VaultHealthCheck',
    'VaultSecretStore',
    'get_health_check',
    'get_vault_client',
    'reset_vault_client',
]

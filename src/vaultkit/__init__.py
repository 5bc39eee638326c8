"""
Vaultkit - HashiCorp Vault client

Modules:
- secrets: KV v2 secret client, health classification and probes
- encryption: AES key material validation
- api: FastAPI health probe routes
"""

__version__ = "0.1.0"

from vaultkit.encryption import AesKey, CryptoKeyFactory, InvalidKeyLengthError
from vaultkit.secrets import (
    ConfigurationError,
    HealthCode,
    HealthResult,
    SecretEntry,
    SecretNotFoundError,
    VaultClient,
    VaultClientConfig,
    VaultError,
    VaultHealthCheck,
    VaultProtocolError,
    VaultTransportError,
)

__all__ = [
    "__version__",
    # Encryption
    "AesKey",
    "CryptoKeyFactory",
    "InvalidKeyLengthError",
    # Secrets
    "ConfigurationError",
    "HealthCode",
    "HealthResult",
    "SecretEntry",
    "SecretNotFoundError",
    "VaultClient",
    "VaultClientConfig",
    "VaultError",
    "VaultHealthCheck",
    "VaultProtocolError",
    "VaultTransportError",
]

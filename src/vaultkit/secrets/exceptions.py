"""
Vault client exceptions.

Every client failure derives from VaultError. An unhealthy vault is not an
error; see vaultkit.secrets.health.
"""
from typing import List, Optional


class ConfigurationError(ValueError):
    """Raised when the Vault client configuration is missing or invalid."""
    pass


class VaultError(Exception):
    """Base class for Vault client failures."""

    def __init__(self, message: str, operation: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.path = path


class VaultTransportError(VaultError):
    """Raised when the Vault server cannot be reached or the request times out."""
    pass


class VaultProtocolError(VaultError):
    """Raised when a Vault response body does not have the expected shape."""
    pass


class SecretNotFoundError(VaultError):
    """Raised when Vault reports that a secret key does not exist."""

    def __init__(self, key: str, operation: Optional[str] = None, path: Optional[str] = None):
        super().__init__(f"Secret not found: {key}", operation=operation, path=path)
        self.key = key


class VaultResponseError(VaultError):
    """Raised when Vault answers a secret request with an unexpected status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: Optional[List[str]] = None,
        operation: Optional[str] = None,
        path: Optional[str] = None,
    ):
        super().__init__(message, operation=operation, path=path)
        self.status_code = status_code
        self.errors = errors or []

"""
Vault Configuration

Configuration management for HashiCorp Vault integration.
"""
import math
import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Union
from urllib.parse import quote, urlparse

from vaultkit.secrets.exceptions import ConfigurationError

DEFAULT_SECRET_PATH = "v1/secret"
DEFAULT_HEALTH_PATH = "v1/sys/health"
DEFAULT_TIMEOUT_SECONDS = 30.0

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}")


@dataclass(frozen=True)
class VaultClientConfig:
    """
    Vault connection configuration.

    Immutable once built. Construction fails with ConfigurationError when a
    required value is missing or invalid. The token is excluded from repr().
    """

    vault_url: str
    token: str = field(repr=False)
    secret_path: str = DEFAULT_SECRET_PATH  # KV v2 mount, relative to vault_url
    health_path: str = DEFAULT_HEALTH_PATH
    health_standby_ok: bool = False  # Drives both standbyok and perfstandbyok
    timeout: Union[float, timedelta] = DEFAULT_TIMEOUT_SECONDS  # Seconds
    namespace: Optional[str] = None  # Vault Enterprise namespace
    verify: bool = True  # Verify SSL certificates
    health_check_enabled: bool = True

    def __post_init__(self):
        if not self.vault_url or not self.vault_url.strip():
            raise ConfigurationError("vault_url is required")
        parsed = urlparse(self.vault_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"vault_url must be an absolute http(s) URL, got {self.vault_url!r}"
            )
        if not self.token:
            raise ConfigurationError("token is required")
        # Sent verbatim as a header value: visible ASCII only, never echoed back
        if not isinstance(self.token, str) or not all("!" <= c <= "~" for c in self.token):
            raise ConfigurationError(
                "token must contain only visible ASCII characters "
                "(no surrounding whitespace, newlines or control characters)"
            )
        if self.namespace is not None and not all("!" <= c <= "~" for c in self.namespace):
            raise ConfigurationError("namespace must contain only visible ASCII characters")
        if not self.secret_path or not self.secret_path.strip("/ "):
            raise ConfigurationError("secret_path is required")
        if not self.health_path or not self.health_path.strip("/ "):
            raise ConfigurationError("health_path is required")

        timeout = self.timeout
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigurationError(f"timeout must be a number of seconds, got {timeout!r}")
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigurationError(f"timeout must be a positive, finite number of seconds, got {timeout}")
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "timeout", float(timeout))
        object.__setattr__(self, "vault_url", self.vault_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "VaultClientConfig":
        """Create VaultClientConfig from environment variables."""
        return cls(
            vault_url=os.getenv("VAULT_ADDR", ""),
            token=os.getenv("VAULT_TOKEN", ""),
            secret_path=os.getenv("VAULT_API_SECRET_PATH", DEFAULT_SECRET_PATH),
            health_path=os.getenv("VAULT_API_HEALTH_PATH", DEFAULT_HEALTH_PATH),
            health_standby_ok=_env_bool("VAULT_HEALTH_STANDBY_OK", False),
            timeout=_env_float("VAULT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            namespace=os.getenv("VAULT_NAMESPACE") or None,
            verify=_env_bool("VAULT_VERIFY", True),
            health_check_enabled=_env_bool("VAULT_HEALTH_CHECK_ENABLED", True),
        )

    def _url(self, *segments: str) -> str:
        parts = [self.vault_url] + [s.strip("/") for s in segments]
        return "/".join(parts)

    def get_secret_data_url(self, key: str) -> str:
        """Get the KV v2 data URL for a secret key."""
        return self._url(self.secret_path, "data", quote(key, safe="/"))

    def get_secret_metadata_url(self, key: str) -> str:
        """Get the KV v2 metadata URL for a secret key."""
        return self._url(self.secret_path, "metadata", quote(key, safe="/"))

    def get_health_url(self) -> str:
        """Get the Vault health endpoint URL."""
        return self._url(self.health_path)

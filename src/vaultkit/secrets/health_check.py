"""
Vault Health Check

Readiness, liveness and startup probe built on VaultClient.get_health().
Only an initialized, unsealed and active vault passes. Every other state, and
any failure to determine the state, fails with a descriptive message.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from vaultkit.secrets.exceptions import VaultError
from vaultkit.secrets.health import HealthCode
from vaultkit.secrets.vault_client import VaultClient

logger = logging.getLogger(__name__)

HEALTH_CHECK_ERROR_TEMPLATE = "HashiCorp Vault HealthCheck unsuccessful. {} {}"

_FAILURE_REASONS = {
    HealthCode.UNSEALED_AND_STANDBY: "Vault is in standby",
    HealthCode.DISASTER_RECOVERY_MODE_REPLICATION_SECONDARY_AND_ACTIVE: "Vault is in recovery mode",
    HealthCode.PERFORMANCE_STANDBY: "Vault is in performance standby",
    HealthCode.NOT_INITIALIZED: "Vault is not initialized",
    HealthCode.SEALED: "Vault is sealed",
}


@dataclass(frozen=True)
class HealthCheckResult:
    """Pass/fail outcome of a probe."""

    is_healthy: bool
    failure_message: Optional[str] = None

    @classmethod
    def success(cls) -> "HealthCheckResult":
        return cls(is_healthy=True)

    @classmethod
    def failed(cls, message: str) -> "HealthCheckResult":
        return cls(is_healthy=False, failure_message=message)


class VaultHealthCheck:
    """Probe reporting whether Vault can serve secrets."""

    def __init__(self, client: VaultClient):
        self.client = client

    def check(self) -> HealthCheckResult:
        try:
            result = self.client.get_health()
        except VaultError as e:
            message = HEALTH_CHECK_ERROR_TEMPLATE.format(f"{type(e).__name__}: {e}", "").rstrip()
            logger.error(message)
            return HealthCheckResult.failed(message)

        if result.health_code is HealthCode.INITIALIZED_UNSEALED_AND_ACTIVE:
            logger.debug(f"HashiCorp Vault HealthCheck successful. {result.payload}")
            return HealthCheckResult.success()

        reason = _FAILURE_REASONS.get(
            result.health_code,
            f"Unspecified response from vault. Code: {result.code}",
        )
        message = HEALTH_CHECK_ERROR_TEMPLATE.format(reason, result.payload)
        logger.warning(message)
        return HealthCheckResult.failed(message)

    def readiness(self) -> HealthCheckResult:
        return self.check()

    def liveness(self) -> HealthCheckResult:
        return self.check()

    def startup(self) -> HealthCheckResult:
        return self.check()

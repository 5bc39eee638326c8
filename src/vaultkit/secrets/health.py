"""
Vault health classification.

Vault encodes its operational state in the status code of sys/health, so the
classification is status-code-first. The payload is only carried along for
diagnostics.
"""
from enum import Enum
from typing import Any, Optional


class HealthCode(Enum):
    """Vault operational state as reported by sys/health."""
    INITIALIZED_UNSEALED_AND_ACTIVE = 200
    UNSEALED_AND_STANDBY = 429
    DISASTER_RECOVERY_MODE_REPLICATION_SECONDARY_AND_ACTIVE = 472
    PERFORMANCE_STANDBY = 473
    NOT_INITIALIZED = 501
    SEALED = 503
    UNSPECIFIED = -1


_CODES_BY_STATUS = {
    code.value: code for code in HealthCode if code is not HealthCode.UNSPECIFIED
}


def classify_health(status_code: int, payload: Optional[Any] = None) -> HealthCode:
    """
    Map a sys/health HTTP status code to a HealthCode.

    Args:
        status_code: HTTP status returned by sys/health
        payload: Parsed health body (unused for classification)

    Returns:
        The matching HealthCode, UNSPECIFIED for any unknown status
    """
    return _CODES_BY_STATUS.get(status_code, HealthCode.UNSPECIFIED)

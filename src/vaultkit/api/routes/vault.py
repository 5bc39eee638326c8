"""
Vault Health and Probe API Routes

Exposes the Vault health probe to orchestrators (readiness, liveness and
startup) and a detailed health view for operators.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Response
from pydantic import BaseModel

from vaultkit.secrets.exceptions import VaultError
from vaultkit.secrets.health_check import HealthCheckResult
from vaultkit.secrets.helpers import get_health_check, get_vault_client

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_CONFIGURED = "Vault not configured (missing VAULT_ADDR or VAULT_TOKEN)"


class VaultHealthResponse(BaseModel):
    """Vault health response."""
    healthy: bool
    code: Optional[int] = None
    health_code: Optional[str] = None
    initialized: Optional[bool] = None
    sealed: Optional[bool] = None
    standby: Optional[bool] = None
    performance_standby: Optional[bool] = None
    version: Optional[str] = None
    cluster_name: Optional[str] = None
    error: Optional[str] = None


class ProbeResponse(BaseModel):
    """Probe outcome."""
    status: str
    message: Optional[str] = None


def _run_probe(response: Response) -> ProbeResponse:
    vault = get_vault_client()
    if vault is not None and not vault.config.health_check_enabled:
        return ProbeResponse(status="pass", message="Vault health check disabled")

    health_check = get_health_check()
    if health_check is None:
        response.status_code = 503
        return ProbeResponse(status="fail", message=NOT_CONFIGURED)

    result: HealthCheckResult = health_check.check()
    if result.is_healthy:
        return ProbeResponse(status="pass")
    response.status_code = 503
    return ProbeResponse(status="fail", message=result.failure_message)


@router.get("/vault/health", response_model=VaultHealthResponse)
def get_vault_health(response: Response):
    """
    Check Vault health and report the classified state.

    Returns:
        Vault health status (503 unless Vault is initialized, unsealed and active)
    """
    vault = get_vault_client()
    if not vault:
        response.status_code = 503
        return VaultHealthResponse(healthy=False, error=NOT_CONFIGURED)

    try:
        result = vault.get_health()
    except VaultError as e:
        logger.error(f"Vault health check failed: {e}")
        response.status_code = 503
        return VaultHealthResponse(healthy=False, error=str(e))

    if not result.is_healthy:
        response.status_code = 503

    payload = result.payload
    return VaultHealthResponse(
        healthy=result.is_healthy,
        code=result.code,
        health_code=result.health_code.name,
        initialized=payload.initialized if payload else None,
        sealed=payload.sealed if payload else None,
        standby=payload.standby if payload else None,
        performance_standby=payload.performance_standby if payload else None,
        version=payload.version if payload else None,
        cluster_name=payload.cluster_name if payload else None,
    )


@router.get("/vault/health/readiness", response_model=ProbeResponse)
def readiness(response: Response):
    """Readiness probe."""
    return _run_probe(response)


@router.get("/vault/health/liveness", response_model=ProbeResponse)
def liveness(response: Response):
    """Liveness probe."""
    return _run_probe(response)


@router.get("/vault/health/startup", response_model=ProbeResponse)
def startup(response: Response):
    """Startup probe."""
    return _run_probe(response)

"""
Vault data models.

Wire shapes for the KV v2 secret API and the sys/health API.
"""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict

from vaultkit.secrets.health import HealthCode


class SecretEntry(BaseModel):
    """A secret read from (or written to) Vault."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    def __repr__(self) -> str:
        return f"SecretEntry(key={self.key!r})"

    __str__ = __repr__


class SecretWriteResult(BaseModel):
    """Acknowledgement returned by a KV v2 write (version metadata)."""

    version: Optional[int] = None
    created_time: Optional[str] = None
    deletion_time: Optional[str] = None
    destroyed: bool = False


class HealthPayload(BaseModel):
    """Body of a sys/health response."""

    model_config = ConfigDict(frozen=True)

    initialized: bool = False
    sealed: bool = False
    standby: bool = False
    performance_standby: bool = False
    replication_performance_mode: Optional[str] = None
    replication_dr_mode: Optional[str] = None
    server_time_utc: Optional[int] = None
    version: Optional[str] = None
    cluster_name: Optional[str] = None
    cluster_id: Optional[str] = None


@dataclass(frozen=True)
class HealthResult:
    """Outcome of a single health query."""

    code: int
    health_code: HealthCode
    payload: Optional[HealthPayload] = None

    @property
    def is_healthy(self) -> bool:
        return self.health_code is HealthCode.INITIALIZED_UNSEALED_AND_ACTIVE

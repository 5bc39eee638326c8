"""
HashiCorp Vault HTTP Client

Provides a Python interface to the Vault KV v2 secret API and the sys/health
API over plain HTTP. Requests are issued through a requests.Session which owns
connection pooling and TLS; this client holds no other state, so a single
instance can be shared between threads.

No retries are performed. A failed attempt is surfaced immediately as a
VaultError subclass.
"""
import json
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from vaultkit.secrets.config import VaultClientConfig
from vaultkit.secrets.exceptions import (
    SecretNotFoundError,
    VaultProtocolError,
    VaultResponseError,
    VaultTransportError,
)
from vaultkit.secrets.health import classify_health
from vaultkit.secrets.models import HealthPayload, HealthResult, SecretEntry, SecretWriteResult

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Vault-Token"
NAMESPACE_HEADER = "X-Vault-Namespace"
VALUE_FIELD = "value"


class VaultClient:
    """
    HashiCorp Vault client.

    Example:
        >>> config = VaultClientConfig(vault_url="https://vault:8200", token="s.xxx")
        >>> client = VaultClient(config)
        >>> client.set_secret("db-password", "hunter2")
        >>> client.get_secret("db-password").value
        'hunter2'
    """

    def __init__(
        self,
        config: Optional[VaultClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Vault client.

        Args:
            config: Vault configuration. If None, loads from environment.
            session: HTTP session used to issue requests. A new
                requests.Session is created when omitted.
        """
        self.config = config or VaultClientConfig.from_env()
        self.session = session if session is not None else requests.Session()
        logger.debug(f"Vault client initialized: {self.config.vault_url}")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "VaultClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {
            TOKEN_HEADER: self.config.token,
            'Accept': 'application/json',
        }
        if self.config.namespace:
            headers[NAMESPACE_HEADER] = self.config.namespace
        return headers

    def _request(
        self,
        operation: str,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Issue a single request against Vault.

        Raises:
            VaultTransportError: On connection failure or timeout
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._headers(),
                params=params,
                json=data,
                timeout=self.config.timeout,
                verify=self.config.verify,
            )
        except requests.exceptions.Timeout as e:
            error_msg = f"{operation}: request to Vault timed out after {self.config.timeout}s ({method} {url})"
            logger.error(error_msg)
            raise VaultTransportError(error_msg, operation=operation, path=url) from e
        except requests.exceptions.RequestException as e:
            error_msg = f"{operation}: request to Vault failed ({method} {url}): {type(e).__name__}"
            logger.error(error_msg)
            raise VaultTransportError(error_msg, operation=operation, path=url) from e

        logger.debug(f"{operation}: {method} {url} -> {response.status_code}")
        return response

    @staticmethod
    def _decode(response: requests.Response, operation: str, url: str) -> Any:
        """Decode a JSON body. Returns None for an empty body."""
        content = response.content
        if not content or not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError as e:
            error_msg = f"{operation}: response from {url} is not valid JSON: {e}"
            logger.error(error_msg)
            raise VaultProtocolError(error_msg, operation=operation, path=url) from e

    def _check_status(self, response: requests.Response, operation: str, key: str, url: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        if status == 404:
            logger.debug(f"{operation}: secret not found at {url}")
            raise SecretNotFoundError(key, operation=operation, path=url)

        errors: List[str] = []
        try:
            body = self._decode(response, operation, url)
        except VaultProtocolError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("errors"), list):
            errors = [str(error) for error in body["errors"]]

        detail = "; ".join(errors) if errors else "No error details provided"
        error_msg = f"{operation}: Vault returned {status} for {url}: {detail}"
        logger.error(error_msg)
        raise VaultResponseError(error_msg, status, errors=errors, operation=operation, path=url)

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key.strip("/"):
            raise ValueError("Secret key must be a non-empty string")
        segments = key.strip("/").split("/")
        if any(segment in ("", ".", "..") for segment in segments):
            raise ValueError(f"Secret key has an invalid path segment: {key!r}")

    def get_secret(self, key: str) -> SecretEntry:
        """
        Read the latest version of a secret.

        Args:
            key: Secret key (relative to the configured secret path)

        Returns:
            SecretEntry with the stored value

        Raises:
            SecretNotFoundError: If the key does not exist
            VaultProtocolError: If the body is not a KV v2 envelope
            VaultTransportError: On connection failure or timeout
        """
        operation = "get_secret"
        self._check_key(key)
        url = self.config.get_secret_data_url(key)

        response = self._request(operation, "GET", url)
        self._check_status(response, operation, key, url)
        body = self._decode(response, operation, url)

        if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
            raise VaultProtocolError(
                f"{operation}: response from {url} has no 'data' object",
                operation=operation,
                path=url,
            )

        # KV v2 nests the secret one level deeper: {"data": {"data": {...}, "metadata": {...}}}
        data = body["data"]
        if "data" in data:
            data = data["data"]
            if not isinstance(data, dict):
                raise VaultProtocolError(
                    f"{operation}: response from {url} has a malformed 'data' envelope",
                    operation=operation,
                    path=url,
                )

        value = data.get(VALUE_FIELD)
        if not isinstance(value, str):
            raise VaultProtocolError(
                f"{operation}: response from {url} has no string '{VALUE_FIELD}' field",
                operation=operation,
                path=url,
            )

        logger.debug(f"Secret read from {url}")
        return SecretEntry(key=key, value=value)

    def set_secret(self, key: str, value: str) -> SecretWriteResult:
        """
        Create or update a secret. Each write creates a new version on Vault.

        Args:
            key: Secret key (relative to the configured secret path)
            value: Secret value

        Returns:
            SecretWriteResult with the version metadata reported by Vault
        """
        operation = "set_secret"
        self._check_key(key)
        if not isinstance(value, str):
            raise TypeError(f"Secret value must be a string, got {type(value).__name__}")
        url = self.config.get_secret_data_url(key)

        response = self._request(operation, "POST", url, data={"data": {VALUE_FIELD: value}})
        self._check_status(response, operation, key, url)
        body = self._decode(response, operation, url)

        if body is None:
            logger.debug(f"Secret written to {url}")
            return SecretWriteResult()
        if not isinstance(body, dict):
            raise VaultProtocolError(
                f"{operation}: response from {url} is not a JSON object",
                operation=operation,
                path=url,
            )

        try:
            result = SecretWriteResult.model_validate(body.get("data") or {})
        except ValidationError as e:
            raise VaultProtocolError(
                f"{operation}: unexpected write acknowledgement from {url}: {e}",
                operation=operation,
                path=url,
            ) from e

        logger.debug(f"Secret written to {url} (version {result.version})")
        return result

    def destroy_secret(self, key: str) -> bool:
        """
        Delete a secret's metadata and every stored version.

        Returns:
            True if Vault acknowledged the deletion

        Raises:
            SecretNotFoundError: If Vault reports the key as absent
        """
        operation = "destroy_secret"
        self._check_key(key)
        url = self.config.get_secret_metadata_url(key)

        response = self._request(operation, "DELETE", url)
        self._check_status(response, operation, key, url)

        logger.debug(f"Secret destroyed at {url}")
        return True

    def get_health(self) -> HealthResult:
        """
        Query sys/health and classify the result.

        An unhealthy vault is returned as a HealthResult, not raised.

        Returns:
            HealthResult with the HTTP status, payload and HealthCode

        Raises:
            VaultProtocolError: If the body cannot be parsed
            VaultTransportError: On connection failure or timeout
        """
        operation = "get_health"
        url = self.config.get_health_url()
        standby_ok = str(self.config.health_standby_ok).lower()
        params = {
            "standbyok": standby_ok,
            "perfstandbyok": standby_ok,
        }

        response = self._request(operation, "GET", url, params=params)
        body = self._decode(response, operation, url)
        if not isinstance(body, dict):
            raise VaultProtocolError(
                f"{operation}: health response from {url} is not a JSON object "
                f"(status {response.status_code})",
                operation=operation,
                path=url,
            )

        try:
            payload = HealthPayload.model_validate(body)
        except ValidationError as e:
            raise VaultProtocolError(
                f"{operation}: unexpected health payload from {url}: {e}",
                operation=operation,
                path=url,
            ) from e

        health_code = classify_health(response.status_code, payload)
        logger.debug(f"Vault health: {response.status_code} {health_code.name}")
        return HealthResult(code=response.status_code, health_code=health_code, payload=payload)

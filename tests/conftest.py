"""
Shared test fixtures.

Vault is simulated at the requests.Session boundary: either a MagicMock
returning canned responses, or FakeKvSession, an in-memory KV v2 store.
"""

import json
import uuid
from datetime import timedelta
from typing import Any, Dict, Optional
from unittest.mock import MagicMock
from urllib.parse import unquote, urlparse

import pytest
import requests

from vaultkit.secrets import VaultClient, VaultClientConfig
from vaultkit.secrets import helpers

VAULT_URL = "https://mock.url"
SECRET_PATH = "v1/test/secret"
HEALTH_PATH = "sys/health"

HEALTHY_BODY = {
    "initialized": True,
    "sealed": False,
    "standby": False,
    "performance_standby": False,
    "replication_performance_mode": "mode",
    "replication_dr_mode": "mode",
    "server_time_utc": 100,
    "version": "1.0.0",
    "cluster_name": "name",
    "cluster_id": "id",
}


def make_response(status_code: int = 200, body: Any = None, raw: Optional[bytes] = None) -> requests.Response:
    """Build a real requests.Response with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


class FakeKvSession:
    """In-memory stand-in for a Vault KV v2 mount, answering like a requests.Session."""

    def __init__(self, secret_path: str = SECRET_PATH):
        self.prefix = "/" + secret_path.strip("/")
        self.store: Dict[str, Dict[str, Any]] = {}
        self.calls = []

    def request(self, method, url, headers=None, params=None, json=None, timeout=None, verify=True):
        self.calls.append((method, url))
        path = unquote(urlparse(url).path)
        if path.startswith(self.prefix + "/data/"):
            key = path[len(self.prefix + "/data/"):]
            if method == "GET":
                if key not in self.store:
                    return make_response(404, {"errors": []})
                entry = self.store[key]
                return make_response(200, {
                    "data": {"data": entry["data"], "metadata": {"version": entry["version"]}},
                })
            if method in ("POST", "PUT"):
                version = self.store.get(key, {}).get("version", 0) + 1
                self.store[key] = {"data": json["data"], "version": version}
                return make_response(200, {
                    "data": {
                        "created_time": "2024-01-01T00:00:00Z",
                        "deletion_time": "",
                        "destroyed": False,
                        "version": version,
                    },
                })
        if path.startswith(self.prefix + "/metadata/") and method == "DELETE":
            key = path[len(self.prefix + "/metadata/"):]
            if key not in self.store:
                return make_response(404, {"errors": []})
            del self.store[key]
            return make_response(204)
        return make_response(404, {"errors": []})

    def close(self):
        pass


@pytest.fixture
def vault_token():
    return str(uuid.uuid4())


@pytest.fixture
def vault_config(vault_token):
    """Create Vault config for testing."""
    return VaultClientConfig(
        vault_url=VAULT_URL,
        token=vault_token,
        secret_path=SECRET_PATH,
        health_path=HEALTH_PATH,
        health_standby_ok=False,
        timeout=timedelta(seconds=30),
    )


@pytest.fixture
def mock_session():
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def vault_client(vault_config, mock_session):
    """Vault client backed by a mocked session."""
    return VaultClient(vault_config, session=mock_session)


@pytest.fixture
def fake_session():
    return FakeKvSession()


@pytest.fixture
def fake_vault_client(vault_config, fake_session):
    """Vault client backed by an in-memory KV v2 store."""
    return VaultClient(vault_config, session=fake_session)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Vault env vars that leak between tests."""
    for key in [
        "VAULT_ADDR",
        "VAULT_TOKEN",
        "VAULT_API_SECRET_PATH",
        "VAULT_API_HEALTH_PATH",
        "VAULT_HEALTH_STANDBY_OK",
        "VAULT_TIMEOUT",
        "VAULT_NAMESPACE",
        "VAULT_VERIFY",
        "VAULT_HEALTH_CHECK_ENABLED",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_cached_client():
    """Drop the process-wide client cached by vaultkit.secrets.helpers."""
    helpers._vault_client = None
    yield
    helpers._vault_client = None

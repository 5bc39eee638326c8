"""
Vaultkit API

FastAPI routes exposing the Vault health probes.
"""

from vaultkit.api.app import create_app

__all__ = ["create_app"]

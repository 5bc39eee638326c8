"""
FastAPI Application Factory

Serves the Vault health probes.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
import logging

from vaultkit import __version__
from vaultkit.api.routes import vault

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Vaultkit Health API",
        description="HashiCorp Vault readiness, liveness and startup probes",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.include_router(vault.router, tags=["Vault"])

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": "See server logs for details"},
        )

    return app

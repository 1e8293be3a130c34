"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from surface_contracts import __version__
from surface_contracts.core.config import configure_logging, get_settings
from surface_contracts.verification import router as verify_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Interface path: {settings.interface_path}")
    logger.info(f"Contracts path: {settings.contracts_path}")

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Structural consistency checks for package interfaces",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(verify_router)  # /verify

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "endpoints": {
                "verify": "/verify - Verify rules against a posted interface",
                "verify-configured": "/verify/configured - Verify the configured contract file",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()

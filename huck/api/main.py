"""FastAPI application for the Huck heat-map backend."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from huck import __version__
from huck.api.routers import game_router, heatmap_router, positioning_router
from huck.config import ServerConfig, get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Huck API starting up (default grid size %.2f yd)", get_config().default_grid_size)
    yield
    logger.info("Huck API shutting down")


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Raises:
        ValueError: If the configuration does not validate.
    """
    config = config or get_config()
    errors = config.validate()
    if errors:
        raise ValueError("Invalid server configuration: " + "; ".join(errors))

    app = FastAPI(
        title="Huck API",
        description="Ultimate tactics heat maps and AI positioning",
        version=__version__,
        lifespan=lifespan,
    )

    # Allow any origin by default so the static frontend can be opened
    # straight from the file system or any local dev server.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(heatmap_router, prefix="/api")
    app.include_router(positioning_router, prefix="/api")
    app.include_router(game_router, prefix="/api")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Huck API",
            "version": __version__,
            "description": "Ultimate tactics heat maps and AI positioning",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()


def run_api(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Run the API server."""
    config = get_config()
    uvicorn.run(
        "huck.api.main:app",
        host=host or config.host,
        port=port or config.port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)

#!/usr/bin/env python3
"""
Findr Rewards API.

Serves profile completeness, reward points and membership tiers for
job-seekers and employers, plus checkout redemption quotes.

Usage:
    uv run python -m web.backend.app

Swagger UI is served at /docs and ReDoc at /redoc on the configured
host/port (config.yaml `web` section, WEB_HOST / WEB_PORT).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import get_config
from .dependencies import get_rewards_service
from .exceptions import register_exception_handlers
from .routers import rewards_router

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "findr-rewards"


def shutdown_rewards_service() -> None:
    """Close the shared service's profile client, if one was ever built."""
    if get_rewards_service.cache_info().currsize:
        get_rewards_service().close()
        get_rewards_service.cache_clear()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info(f"Shutting down {SERVICE_NAME}")
    shutdown_rewards_service()


def create_app() -> FastAPI:
    """Build the FastAPI application with error handlers and the rewards router."""
    app = FastAPI(
        title="Findr Rewards API",
        description="Profile completeness, reward points and membership tiers",
        version="1.0.0",
        lifespan=lifespan
    )
    register_exception_handlers(app)
    app.include_router(rewards_router)

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "service": SERVICE_NAME}

    return app


app = create_app()


def main():
    import uvicorn

    web = get_config().web
    logger.info(f"Starting {SERVICE_NAME} on {web.host}:{web.port} (docs at /docs)")
    uvicorn.run("web.backend.app:app", host=web.host, port=web.port, log_level="info")


if __name__ == "__main__":
    main()

"""
Application lifecycle event handlers for the rollout target service.

Startup announces the identity of the instance; everything it needs has
already been built by the application factory, so there is nothing to drain
on shutdown beyond what the server does itself.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from rollout_target.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Logs startup and shutdown of the service instance.

    Args:
        app: The FastAPI application instance.
    """
    identity = app.state.identity
    logger.info(
        "Starting server",
        version=identity.version,
        behavior=identity.behavior.value,
        hostname=identity.hostname,
    )
    yield
    logger.info("Application shutdown complete")

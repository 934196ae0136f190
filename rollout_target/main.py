"""
Application entrypoint for the rollout target service.

This module serves as the application factory and server launcher. It wires
the behavior engine, response builder and metrics recorder around one
immutable service identity, installs the middleware and exception handlers,
and runs the app under uvicorn.
"""

import random
import sys
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from rollout_target.api.middleware import (
    CorrelationIdMiddleware,
    MetricsMiddleware,
    RequestLoggingMiddleware,
)
from rollout_target.api.routes import router
from rollout_target.core.config import READ_TIMEOUT_SECONDS, Settings, get_settings
from rollout_target.core.events import lifespan
from rollout_target.core.logging import get_logger, setup_structured_logging
from rollout_target.interfaces.random_interface import IRandomSource
from rollout_target.monitoring.prometheus import MetricsRecorder
from rollout_target.services.behavior import BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder
from rollout_target.utils.error_codes import ErrorCode, ErrorMessages
from rollout_target.utils.exceptions import (
    ConfigurationError,
    InjectedFailureError,
    ServerStartupError,
    ServiceError,
)

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    random_source: Optional[IRandomSource] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    content_random_source: Optional[IRandomSource] = None,
) -> FastAPI:
    """Creates and configures a FastAPI application instance.

    The service identity is built exactly once here and shared by every
    component through ``app.state``.

    Args:
        settings: Settings to build the app from. Loaded from the environment
            when omitted.
        random_source: Random source of the behavior engine. A
            ``random.Random`` seeded with ``BEHAVIOR_SEED`` is used when
            omitted.
        sleep: Coroutine function the behavior engine pauses with.
        content_random_source: Random source for messages and simulated data.

    Returns:
        The configured FastAPI application instance.
    """
    settings = settings or get_settings()
    identity = settings.identity()

    setup_structured_logging(settings.log_level, identity)

    if random_source is None:
        random_source = random.Random(settings.service.behavior_seed)

    app = FastAPI(
        title=settings.server.app_name,
        description="Synthetic behavior-injection target for progressive delivery analysis.",
        version=identity.version,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )

    app.state.settings = settings
    app.state.identity = identity
    app.state.behavior_engine = BehaviorEngine(identity.behavior, random_source, sleep=sleep)
    app.state.response_builder = ResponseBuilder(identity, content_random_source)
    app.state.metrics = MetricsRecorder(identity)

    # Metrics innermost so the measured status is the one the client receives.
    app.add_middleware(MetricsMiddleware, recorder=app.state.metrics)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError) -> ORJSONResponse:
        """Renders service errors, injected failures included, as JSON.

        Injected failures are not logged again here; the route already
        logged the decision.
        """
        correlation_id = getattr(request.state, "correlation_id", None)
        status_code = getattr(exc, "status_code", 500)

        if not isinstance(exc, InjectedFailureError):
            logger.warning(
                f"Service error occurred: {exc}",
                error_code=exc.code,
                status_code=status_code,
                path=request.url.path,
            )

        content = {
            "error_code": exc.code,
            "error_message": str(exc),
            "status_code": status_code,
            "correlation_id": correlation_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if exc.context:
            content["context"] = exc.context

        return ORJSONResponse(status_code=status_code, content=content)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handles unexpected exceptions across the application."""
        correlation_id = getattr(request.state, "correlation_id", None)
        error_id = f"error_{int(time.time())}_{id(exc)}"
        logger.error(
            f"Unhandled exception: {exc}",
            error_id=error_id,
            path=request.url.path,
            exc_info=True,
        )

        return ORJSONResponse(
            status_code=500,
            content={
                "error_code": ErrorCode.INTERNAL_SERVER_ERROR.value,
                "error_message": ErrorMessages.get_message(ErrorCode.INTERNAL_SERVER_ERROR),
                "status_code": 500,
                "error_id": error_id,
                "correlation_id": correlation_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    app.include_router(router)

    return app


def serve(settings: Settings) -> None:
    """Runs the application under uvicorn until terminated.

    Args:
        settings: The validated application settings.

    Raises:
        ServerStartupError: If the server cannot bind or listen.
    """
    import uvicorn

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.server.host,
        port=settings.server.port,
        timeout_keep_alive=READ_TIMEOUT_SECONDS,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    server = uvicorn.Server(config)

    address = f"{settings.server.host}:{settings.server.port}"
    context = {"host": settings.server.host, "port": settings.server.port}
    try:
        server.run()
    except OSError as e:
        raise ServerStartupError(f"Cannot listen on {address}: {e}", context=context) from e
    except SystemExit as e:
        # uvicorn logs bind failures and exits with its own status.
        if server.started:
            raise
        raise ServerStartupError(f"Cannot listen on {address}", context=context) from e


def run() -> None:
    """Console entry point.

    Exits with status 1 when the configuration is invalid or the server
    cannot bind.
    """
    try:
        settings = get_settings()
        serve(settings)
    except ConfigurationError as e:
        logger.error("Server error", error=str(e), error_code=e.code, context=e.context)
        sys.exit(1)


if __name__ == "__main__":
    run()

"""
Request logging middleware.

This middleware logs request completion and timing information with
correlation IDs.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from rollout_target.core.logging import get_logger, log_api_request

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request with its status and duration.

    Requests are logged at debug level when they start and at info level when
    they complete, so sustained load-test traffic stays readable at the
    default log level.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Logs the start and completion of a request.

        Args:
            request: The incoming `Request` object.
            call_next: A function to call to pass the request to the next
                middleware or the application.

        Returns:
            The `Response` from the application.
        """
        start_time = time.perf_counter()

        logger.debug(
            "Request started",
            http_method=request.method,
            http_path=request.url.path,
            user_agent=request.headers.get("user-agent"),
            client_ip=request.client.host if request.client else None,
            request_type="http_request",
        )

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_api_request(
                logger,
                method=request.method,
                path=request.url.path,
                duration_ms=round(duration_ms, 2),
                status_code=response.status_code,
            )

            return response

        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed",
                http_method=request.method,
                http_path=request.url.path,
                duration_ms=round(duration_ms, 2),
                error=str(e),
                error_type=type(e).__name__,
                request_type="http_request",
                exc_info=True,
            )

            raise

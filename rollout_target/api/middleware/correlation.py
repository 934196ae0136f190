"""
Correlation ID middleware for request tracing.

This middleware extracts or generates a correlation ID for every request and
makes it available to logs and response bodies for the request's lifetime.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from rollout_target.core.logging import (
    clear_correlation_id,
    generate_correlation_id,
    get_logger,
    set_correlation_id,
)

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Ensures every request carries a correlation ID.

    An incoming ``X-Correlation-ID`` header is reused, which lets a load
    generator or gateway follow a request end to end; otherwise a new ID is
    generated. The ID is stored in a context variable and on
    ``request.state``, and returned in the response headers.

    Attributes:
        header_name: The name of the request header for the correlation ID.
        response_header_name: The name of the response header for the
            correlation ID.
    """

    def __init__(
        self,
        app,
        header_name: str = CORRELATION_HEADER,
        response_header_name: str = CORRELATION_HEADER,
    ):
        super().__init__(app)
        self.header_name = header_name
        self.response_header_name = response_header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Sets the correlation ID around the processing of a request.

        Args:
            request: The incoming `Request` object.
            call_next: A function to call to pass the request to the next
                middleware or the application.

        Returns:
            The `Response` from the application, with the correlation ID header
            added.
        """
        correlation_id = request.headers.get(self.header_name)
        if not correlation_id:
            correlation_id = generate_correlation_id()

        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
            response.headers[self.response_header_name] = correlation_id
            return response

        except Exception as e:
            logger.error(
                "Request processing failed",
                correlation_id=correlation_id,
                path=request.url.path,
                method=request.method,
                error=str(e),
                exc_info=True,
            )
            raise

        finally:
            clear_correlation_id()

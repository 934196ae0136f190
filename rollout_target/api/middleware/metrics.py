"""
Metrics collection middleware.

This middleware records the Prometheus request counter and duration histogram
for every request, using the status code that was actually sent. The duration
ends when the response starts, before its body is streamed.
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from rollout_target.monitoring.prometheus import UNMATCHED_ENDPOINT, MetricsRecorder

METRICS_PATH = "/metrics"


def resolve_endpoint(request: Request) -> str:
    """Returns the route template matching ``request``.

    Route templates keep label cardinality bounded. A method mismatch still
    resolves to the route's template; paths with no route resolve to
    ``"unmatched"``.
    """
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return route.path
        if match == Match.PARTIAL and partial is None:
            partial = route.path
    return partial or UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request count and latency for every request.

    The measurement wraps the whole handler, so injected delays show up in
    the duration histogram and injected failures are counted with their real
    status. Requests to the scrape endpoint itself are not recorded.

    Attributes:
        recorder: The `MetricsRecorder` that owns the series.
    """

    def __init__(self, app, recorder: MetricsRecorder):
        """Initializes the metrics middleware.

        Args:
            app: The ASGI application instance.
            recorder: The recorder to update.
        """
        super().__init__(app)
        self.recorder = recorder

    async def dispatch(self, request: Request, call_next) -> Response:
        """Processes a request and records its metrics.

        Args:
            request: The incoming `Request` object.
            call_next: A function to call to pass the request to the next
                middleware or the application.

        Returns:
            The `Response` from the application.
        """
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        start_time = time.perf_counter()
        endpoint = resolve_endpoint(request)

        try:
            response = await call_next(request)
        except Exception:
            self.recorder.record_request(
                method=request.method,
                endpoint=endpoint,
                status_code=500,
                duration=time.perf_counter() - start_time,
            )
            raise

        self.recorder.record_request(
            method=request.method,
            endpoint=endpoint,
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )
        return response

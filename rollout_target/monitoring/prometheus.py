"""
Prometheus monitoring and metrics collection for the rollout target service.

The series defined here are what a deployment controller queries to decide
whether a canary is promoted or aborted, so their names and labels follow the
conventional HTTP metrics a Prometheus-based analysis template expects:

- ``http_requests_total{method, endpoint, status}``
- ``http_request_duration_seconds{method, endpoint}``
- ``app_version_info{version, behavior, hostname}``
"""

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from rollout_target.models.identity import ServiceIdentity

# Label used for requests that matched no route.
UNMATCHED_ENDPOINT = "unmatched"


class MetricsRecorder:
    """Owns the metric series of one service instance.

    Each recorder registers its collectors in its own ``CollectorRegistry``,
    so several applications (for example in tests) never share counters.
    prometheus_client guards every labelled child with its own lock, so
    concurrent requests on different series do not contend.

    Attributes:
        identity: The identity reported by the static info gauge.
        registry: The registry holding this recorder's collectors.
    """

    def __init__(self, identity: ServiceIdentity, registry: Optional[CollectorRegistry] = None):
        """Creates the collectors and sets the static info gauge.

        Args:
            identity: The immutable identity of this process.
            registry: Registry to register into. A fresh one is created when
                omitted.
        """
        self.identity = identity
        self.registry = registry if registry is not None else CollectorRegistry()

        self.request_count = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry,
        )
        self.version_info = Gauge(
            "app_version_info",
            "Application version information",
            ["version", "behavior", "hostname"],
            registry=self.registry,
        )

        self._initialize_static_metrics()

    def _initialize_static_metrics(self):
        """Sets the info gauge for this identity. It is never changed again."""
        self.version_info.labels(
            version=self.identity.version,
            behavior=self.identity.behavior.value,
            hostname=self.identity.hostname,
        ).set(1)

    def record_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Records one completed request.

        Args:
            method: The HTTP method.
            endpoint: The matched route template.
            status_code: The status actually sent to the client.
            duration: Seconds from request entry to response.
        """
        self.request_count.labels(method=method, endpoint=endpoint, status=str(status_code)).inc()
        self.request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def get_metrics(self) -> bytes:
        """Generates the metrics in the Prometheus text exposition format."""
        return generate_latest(self.registry)

    @staticmethod
    def get_metrics_content_type() -> str:
        """Returns the content type of the Prometheus text exposition format."""
        return CONTENT_TYPE_LATEST

"""
API middleware components.
"""

from rollout_target.api.middleware.correlation import CorrelationIdMiddleware
from rollout_target.api.middleware.logging import RequestLoggingMiddleware
from rollout_target.api.middleware.metrics import MetricsMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "MetricsMiddleware",
]

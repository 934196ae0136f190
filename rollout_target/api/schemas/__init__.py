"""
API schemas.
"""

from rollout_target.api.schemas.responses import (
    DataResponse,
    ErrorResponse,
    HealthResponse,
    ProcessResponse,
    ResponseEnvelope,
    UnhealthyResponse,
)

__all__ = [
    "ResponseEnvelope",
    "HealthResponse",
    "UnhealthyResponse",
    "DataResponse",
    "ProcessResponse",
    "ErrorResponse",
]

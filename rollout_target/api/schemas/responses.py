"""
Response schemas for API endpoints.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ResponseEnvelope(BaseModel):
    """Defines the schema of the root endpoint response.

    Attributes:
        version: The version of the instance that served the request.
        behavior: The behavior mode of that instance.
        hostname: The hostname (pod) that served the request.
        timestamp: RFC 3339 time the response was built.
        message: A status message drawn from the mode's message set.
        headers: Request-scoped headers echoed back, omitted when empty.

    Example:
        ```json
        {
            "version": "2.0",
            "behavior": "slow",
            "hostname": "rollout-demo-7d9f8-abcde",
            "timestamp": "2024-01-01T12:00:00+00:00",
            "message": "High latency detected"
        }
        ```
    """

    version: str = Field(..., description="Version of the serving instance", examples=["1.0"])
    behavior: str = Field(
        ...,
        description="Behavior mode of the serving instance",
        examples=["normal", "slow", "error-prone", "chaotic"],
    )
    hostname: str = Field(..., description="Hostname of the serving instance")
    timestamp: str = Field(..., description="RFC 3339 response timestamp")
    message: str = Field(..., description="Status message for the behavior mode", min_length=1)
    headers: Optional[Dict[str, str]] = Field(None, description="Echoed request headers")


class HealthResponse(BaseModel):
    """Schema of a healthy ``/health`` response."""

    status: str = Field("healthy", description="Health status")
    version: str = Field(..., description="Version of the serving instance")
    hostname: str = Field(..., description="Hostname of the serving instance")


class UnhealthyResponse(BaseModel):
    """Schema of an unhealthy ``/health`` response (HTTP 503)."""

    status: str = Field("unhealthy", description="Health status")
    reason: str = Field(..., description="Why the instance reports unhealthy")


class DataResponse(BaseModel):
    """Schema of the ``/api/data`` response."""

    items: int = Field(..., description="Simulated number of items", ge=0)
    processed: bool = Field(True, description="Whether the data was processed")
    version: str = Field(..., description="Version of the serving instance")
    hostname: str = Field(..., description="Hostname of the serving instance")
    timestamp: str = Field(..., description="RFC 3339 response timestamp")


class ProcessResponse(BaseModel):
    """Schema of the ``/api/process`` response.

    ``duration`` is the wall-clock time in milliseconds since the request
    entered the handler, including any injected delay.
    """

    status: str = Field("completed", description="Processing status")
    duration: int = Field(..., description="Elapsed processing time in milliseconds", ge=0)
    version: str = Field(..., description="Version of the serving instance")
    hostname: str = Field(..., description="Hostname of the serving instance")


class ErrorResponse(BaseModel):
    """Schema of error responses, including injected failures."""

    error_code: str = Field(..., description="Machine-readable error code", examples=["E4002"])
    error_message: str = Field(..., description="Human-readable error message")
    status_code: int = Field(..., description="HTTP status code")
    correlation_id: Optional[str] = Field(None, description="Request correlation ID")
    timestamp: str = Field(..., description="ISO 8601 time the error was produced")
    context: Optional[Dict[str, Any]] = Field(None, description="Additional error context")

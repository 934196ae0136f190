"""
Builds the JSON payloads returned by the content and health routes.
"""

import random
import time
from datetime import datetime, timezone
from typing import Dict, Optional

from rollout_target.api.schemas.responses import (
    DataResponse,
    HealthResponse,
    ProcessResponse,
    ResponseEnvelope,
    UnhealthyResponse,
)
from rollout_target.interfaces.random_interface import IRandomSource
from rollout_target.models.identity import BehaviorMode, ServiceIdentity

MESSAGES: Dict[BehaviorMode, tuple] = {
    BehaviorMode.NORMAL: (
        "Service operating normally",
        "All systems functional",
        "Request processed successfully",
    ),
    BehaviorMode.SLOW: (
        "Service is experiencing delays",
        "Processing taking longer than usual",
        "High latency detected",
    ),
    BehaviorMode.ERROR_PRONE: (
        "Service unstable",
        "Errors may occur",
        "Degraded performance",
    ),
    BehaviorMode.CHAOTIC: (
        "Unpredictable behavior",
        "System under stress",
        "Erratic performance",
    ),
}

UNHEALTHY_REASON = "simulated failure"
DATA_ITEMS_UPPER_BOUND = 100


def utc_timestamp() -> str:
    """Returns the current UTC time as an RFC 3339 string."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class ResponseBuilder:
    """Assembles response payloads stamped with the service identity.

    Message choice and the simulated item count are cosmetic, so they use a
    random source separate from the behavior engine's.
    """

    def __init__(self, identity: ServiceIdentity, random_source: Optional[IRandomSource] = None):
        self.identity = identity
        self._random = random_source if random_source is not None else random.Random()

    def message(self) -> str:
        """Picks a message uniformly from the behavior mode's message set."""
        messages = MESSAGES[self.identity.behavior]
        return messages[self._random.randrange(0, len(messages))]

    def envelope(self, headers: Optional[Dict[str, str]] = None) -> ResponseEnvelope:
        return ResponseEnvelope(
            version=self.identity.version,
            behavior=self.identity.behavior.value,
            hostname=self.identity.hostname,
            timestamp=utc_timestamp(),
            message=self.message(),
            headers=headers or None,
        )

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=self.identity.version,
            hostname=self.identity.hostname,
        )

    def unhealthy(self) -> UnhealthyResponse:
        return UnhealthyResponse(status="unhealthy", reason=UNHEALTHY_REASON)

    def data(self) -> DataResponse:
        return DataResponse(
            items=self._random.randrange(0, DATA_ITEMS_UPPER_BOUND),
            processed=True,
            version=self.identity.version,
            hostname=self.identity.hostname,
            timestamp=utc_timestamp(),
        )

    def process(self, started_at: float) -> ProcessResponse:
        """Builds the processing payload.

        Args:
            started_at: ``time.perf_counter()`` value taken when the request
                entered the handler.

        Returns:
            The payload with the elapsed milliseconds, injected delay included.
        """
        elapsed_ms = int((time.perf_counter() - started_at) * 1000)
        return ProcessResponse(
            status="completed",
            duration=max(elapsed_ms, 0),
            version=self.identity.version,
            hostname=self.identity.hostname,
        )

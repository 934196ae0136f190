"""Service identity and behavior configuration settings."""

import socket
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from rollout_target.core.logging import get_logger
from rollout_target.models.identity import BehaviorMode

logger = get_logger(__name__)


def detect_hostname() -> str:
    """Returns the machine hostname, or ``"unknown"`` if it cannot be read."""
    try:
        return socket.gethostname() or "unknown"
    except OSError:
        return "unknown"


class ServiceConfig(BaseSettings):
    """Identity and behavior-injection configuration.

    Attributes:
        version: The version string reported in responses and metrics.
        behavior: The behavior mode. Unrecognized values fall back to normal.
        hostname: The hostname reported in responses and metrics.
        behavior_seed: Optional seed making the behavior draws reproducible.
    """

    version: str = Field(default="1.0", description="Application version", min_length=1)
    behavior: BehaviorMode = Field(
        default=BehaviorMode.NORMAL,
        description="Behavior mode: normal, slow, error-prone or chaotic",
    )
    hostname: str = Field(default_factory=detect_hostname, description="Reported hostname")
    behavior_seed: Optional[int] = Field(
        default=None,
        description="Seed for the behavior random source",
    )

    @field_validator("behavior", mode="before")
    @classmethod
    def resolve_behavior(cls, value):
        """Resolves the configured behavior, treating unknown values as normal."""
        if value is None or value == "":
            return BehaviorMode.NORMAL
        if not BehaviorMode.is_known(value):
            logger.warning(
                "Unrecognized behavior mode, falling back to normal",
                requested_behavior=str(value),
            )
        return BehaviorMode.resolve(value)

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        env_ignore_empty = True

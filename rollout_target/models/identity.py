"""
Process-wide identity of a running service instance.

The identity is resolved once from settings when the application is created
and is never mutated afterwards. Changing the behavior mode means starting a
new process, the same way a rollout replaces pods instead of patching them.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BehaviorMode(str, Enum):
    """Policies governing how the outcome of a request is drawn."""

    NORMAL = "normal"
    SLOW = "slow"
    ERROR_PRONE = "error-prone"
    CHAOTIC = "chaotic"

    @classmethod
    def resolve(cls, value: Any) -> "BehaviorMode":
        """Maps a configured value onto a mode, falling back to ``normal``.

        Matching is case-insensitive and ignores surrounding whitespace.
        Anything that is not one of the known modes resolves to
        ``BehaviorMode.NORMAL``.

        Args:
            value: The raw configured value (string or ``BehaviorMode``).

        Returns:
            The matching ``BehaviorMode``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NORMAL

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """Returns whether ``value`` names one of the modes."""
        if isinstance(value, cls):
            return True
        return str(value).strip().lower() in {mode.value for mode in cls}


class ServiceIdentity(BaseModel):
    """Immutable identity reported in responses, logs and metrics.

    Attributes:
        version: The application version being rolled out.
        behavior: The behavior mode this process was started with.
        hostname: The host (pod) name serving requests.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1)
    behavior: BehaviorMode
    hostname: str = Field(..., min_length=1)

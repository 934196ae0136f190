"""
Behavior engine for injected latency and failures.

The engine turns the configured behavior mode into a per-request decision:
the HTTP status to answer with and how long to pause before answering. All
probabilities are drawn from an injectable random source so that tests can
script exact outcomes, and the pause is awaited on the event loop so a
delayed request never holds up concurrent ones.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from rollout_target.core.logging import get_logger
from rollout_target.interfaces.random_interface import IRandomSource
from rollout_target.models.identity import BehaviorMode

logger = get_logger(__name__)

STATUS_OK = 200
STATUS_INTERNAL_ERROR = 500
STATUS_UNAVAILABLE = 503

# slow: every request is delayed by [200ms, 1000ms)
SLOW_DELAY_MS = (200, 1000)

# error-prone: half of content requests fail, 30% of health checks fail
ERROR_PRONE_FAILURE_RATE = 0.5
ERROR_PRONE_HEALTH_FAILURE_RATE = 0.3

# chaotic: independent delay and failure draws
CHAOTIC_DELAY_RATE = 0.3
CHAOTIC_DELAY_MS = (500, 1500)
CHAOTIC_FAILURE_RATE = 0.4


@dataclass(frozen=True)
class BehaviorDecision:
    """The outcome decided for a single request.

    Attributes:
        status_code: The HTTP status the request must be answered with.
        injected_delay: Seconds to pause before answering.
    """

    status_code: int = STATUS_OK
    injected_delay: float = 0.0

    @property
    def is_failure(self) -> bool:
        return self.status_code != STATUS_OK

    @property
    def delayed(self) -> bool:
        return self.injected_delay > 0


class BehaviorEngine:
    """Applies the probability model of a behavior mode to each request.

    Each call to :meth:`decide` draws fresh values from the random source;
    no state is carried between requests.

    Attributes:
        mode: The behavior mode the process was started with.
    """

    def __init__(
        self,
        mode: BehaviorMode,
        random_source: Optional[IRandomSource] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        """Initializes the engine.

        Args:
            mode: The behavior mode to apply.
            random_source: Source of uniform draws. Defaults to an unseeded
                ``random.Random``.
            sleep: Coroutine function used to pause. Defaults to
                ``asyncio.sleep``.
        """
        self.mode = BehaviorMode.resolve(mode)
        self._random = random_source if random_source is not None else random.Random()
        self._sleep = sleep or asyncio.sleep

    def decide(self) -> BehaviorDecision:
        """Draws the decision for a content request (``/``, ``/api/*``)."""
        if self.mode is BehaviorMode.SLOW:
            return BehaviorDecision(STATUS_OK, self._draw_delay(*SLOW_DELAY_MS))

        if self.mode is BehaviorMode.ERROR_PRONE:
            if self._random.random() < ERROR_PRONE_FAILURE_RATE:
                return BehaviorDecision(STATUS_INTERNAL_ERROR)
            return BehaviorDecision(STATUS_OK)

        if self.mode is BehaviorMode.CHAOTIC:
            # Two independent draws: a request can be both delayed and failed.
            delay = 0.0
            if self._random.random() < CHAOTIC_DELAY_RATE:
                delay = self._draw_delay(*CHAOTIC_DELAY_MS)
            if self._random.random() < CHAOTIC_FAILURE_RATE:
                return BehaviorDecision(STATUS_INTERNAL_ERROR, delay)
            return BehaviorDecision(STATUS_OK, delay)

        return BehaviorDecision(STATUS_OK)

    def decide_health(self) -> BehaviorDecision:
        """Draws the decision for a health probe.

        Only error-prone mode ever reports unhealthy, and health probes are
        never delayed.
        """
        if (
            self.mode is BehaviorMode.ERROR_PRONE
            and self._random.random() < ERROR_PRONE_HEALTH_FAILURE_RATE
        ):
            return BehaviorDecision(STATUS_UNAVAILABLE)
        return BehaviorDecision(STATUS_OK)

    async def pause(self, decision: BehaviorDecision) -> None:
        """Waits out the injected delay of ``decision``, if any."""
        if not decision.delayed:
            return
        logger.debug("Injecting latency", delay_ms=round(decision.injected_delay * 1000))
        await self._sleep(decision.injected_delay)

    def _draw_delay(self, low_ms: int, high_ms: int) -> float:
        return self._random.randrange(low_ms, high_ms) / 1000.0

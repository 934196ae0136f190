"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from rollout_target.api.schemas.responses import HealthResponse, UnhealthyResponse
from rollout_target.core.dependencies import get_behavior_engine, get_response_builder
from rollout_target.core.logging import get_logger
from rollout_target.services.behavior import BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": UnhealthyResponse, "description": "Simulated unhealthy instance"}},
    summary="Service health check",
    description="Liveness/readiness probe. Only error-prone instances ever report unhealthy.",
)
async def health_check(
    engine: BehaviorEngine = Depends(get_behavior_engine),
    builder: ResponseBuilder = Depends(get_response_builder),
):
    """Reports whether the instance is healthy.

    Health probes follow a narrower rule than content routes: an error-prone
    instance fails 30% of probes, every other mode always passes. Probes stay
    mostly truthful so the orchestrator does not restart pods outright; the
    rollout signal comes from the content routes.

    Returns:
        A `HealthResponse`, or a 503 `ORJSONResponse` with an
        `UnhealthyResponse` body.
    """
    decision = engine.decide_health()
    if decision.is_failure:
        logger.warning("Injected health check failure", status_code=decision.status_code)
        return ORJSONResponse(
            status_code=decision.status_code,
            content=builder.unhealthy().model_dump(),
        )

    return builder.health()

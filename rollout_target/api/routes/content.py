"""
Content endpoints.

Every content route runs the same sequence: draw a behavior decision, wait
out its injected delay, fail if the decision says so, otherwise build the
route's payload.
"""

import time

from fastapi import APIRouter, Depends

from rollout_target.api.schemas.responses import (
    DataResponse,
    ErrorResponse,
    ProcessResponse,
    ResponseEnvelope,
)
from rollout_target.core.dependencies import get_behavior_engine, get_response_builder
from rollout_target.core.logging import get_correlation_id, get_logger
from rollout_target.services.behavior import BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder
from rollout_target.utils.exceptions import InjectedFailureError

logger = get_logger(__name__)

router = APIRouter()

INJECTED_FAILURE_RESPONSES = {500: {"model": ErrorResponse, "description": "Injected failure"}}


async def apply_behavior(engine: BehaviorEngine, builder: ResponseBuilder, route: str) -> None:
    """Applies the engine's decision for one content request.

    Args:
        engine: The behavior engine.
        builder: The response builder, whose identity goes into the error
            context.
        route: The route template, for logging.

    Raises:
        InjectedFailureError: If the decision is a failure.
    """
    decision = engine.decide()
    await engine.pause(decision)

    if decision.is_failure:
        identity = builder.identity
        logger.warning(
            "Injected failure",
            route=route,
            status_code=decision.status_code,
            injected_delay_ms=round(decision.injected_delay * 1000),
        )
        raise InjectedFailureError(
            status_code=decision.status_code,
            context={
                "behavior": identity.behavior.value,
                "version": identity.version,
                "hostname": identity.hostname,
            },
        )


@router.get(
    "/",
    response_model=ResponseEnvelope,
    response_model_exclude_none=True,
    responses=INJECTED_FAILURE_RESPONSES,
    summary="Service envelope",
    description="Identity of the serving instance, subject to the behavior mode.",
)
async def root(
    engine: BehaviorEngine = Depends(get_behavior_engine),
    builder: ResponseBuilder = Depends(get_response_builder),
) -> ResponseEnvelope:
    """Returns the response envelope of the serving instance.

    The envelope tells a caller which version, behavior mode and pod served
    the request, which is how traffic splits are observed from the outside.
    """
    await apply_behavior(engine, builder, "/")
    correlation_id = get_correlation_id()
    headers = {"X-Correlation-ID": correlation_id} if correlation_id else None
    return builder.envelope(headers=headers)


@router.get(
    "/api/data",
    response_model=DataResponse,
    responses=INJECTED_FAILURE_RESPONSES,
    summary="Simulated data",
)
async def get_data(
    engine: BehaviorEngine = Depends(get_behavior_engine),
    builder: ResponseBuilder = Depends(get_response_builder),
) -> DataResponse:
    await apply_behavior(engine, builder, "/api/data")
    return builder.data()


@router.get(
    "/api/process",
    response_model=ProcessResponse,
    responses=INJECTED_FAILURE_RESPONSES,
    summary="Simulated processing",
    description="Reports how long the request took, injected delay included.",
)
async def process(
    engine: BehaviorEngine = Depends(get_behavior_engine),
    builder: ResponseBuilder = Depends(get_response_builder),
) -> ProcessResponse:
    started_at = time.perf_counter()
    await apply_behavior(engine, builder, "/api/process")
    return builder.process(started_at)

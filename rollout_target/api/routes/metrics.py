"""
Metrics endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from rollout_target.core.config import Settings
from rollout_target.core.dependencies import get_app_settings, get_metrics_recorder
from rollout_target.monitoring.prometheus import MetricsRecorder

router = APIRouter()


@router.get(
    "/metrics",
    summary="Prometheus metrics",
    description="Get metrics in Prometheus format for rollout analysis.",
)
async def get_prometheus_metrics(
    recorder: MetricsRecorder = Depends(get_metrics_recorder),
    settings: Settings = Depends(get_app_settings),
):
    """Exposes the request and version series in Prometheus format.

    The handler only reads the registry, so it keeps answering while the
    content routes are injecting failures.

    Args:
        recorder: The metrics recorder of this process.
        settings: The application's configuration settings.

    Returns:
        A `Response` object containing the metrics in Prometheus format.

    Raises:
        HTTPException: If the metrics endpoint is disabled in the settings.
    """
    if not settings.monitoring.enable_metrics:
        raise HTTPException(status_code=404, detail="Metrics endpoint is disabled")

    return Response(
        content=recorder.get_metrics(),
        media_type=recorder.get_metrics_content_type(),
    )

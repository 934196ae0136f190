"""
Dependency injection for the rollout target service.

The identity, behavior engine, response builder and metrics recorder are
created once in the application factory and stored on ``app.state``. These
functions hand them to route handlers, so tests can build an application with
scripted random sources and no global state.
"""

from fastapi import Request

from rollout_target.core.config import Settings
from rollout_target.models.identity import ServiceIdentity
from rollout_target.monitoring.prometheus import MetricsRecorder
from rollout_target.services.behavior import BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder


def get_identity(request: Request) -> ServiceIdentity:
    """Provides the immutable identity of this process."""
    return request.app.state.identity


def get_behavior_engine(request: Request) -> BehaviorEngine:
    """Provides the behavior engine configured at startup."""
    return request.app.state.behavior_engine


def get_response_builder(request: Request) -> ResponseBuilder:
    """Provides the response builder bound to this process's identity."""
    return request.app.state.response_builder


def get_metrics_recorder(request: Request) -> MetricsRecorder:
    """Provides the metrics recorder owning this process's series."""
    return request.app.state.metrics


def get_app_settings(request: Request) -> Settings:
    """Provides the settings the application was created with."""
    return request.app.state.settings

"""
Request-scoped services: the behavior engine and the response builder.
"""

from rollout_target.services.behavior import BehaviorDecision, BehaviorEngine
from rollout_target.services.response_builder import ResponseBuilder

__all__ = ["BehaviorDecision", "BehaviorEngine", "ResponseBuilder"]

"""
Domain models shared by the behavior engine, response builder and metrics.
"""

from rollout_target.models.identity import BehaviorMode, ServiceIdentity

__all__ = ["BehaviorMode", "ServiceIdentity"]

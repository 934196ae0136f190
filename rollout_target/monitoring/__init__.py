"""
Prometheus metrics for rollout analysis.
"""

from rollout_target.monitoring.prometheus import MetricsRecorder

__all__ = ["MetricsRecorder"]

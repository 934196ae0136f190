"""
Rollout Target Service

A synthetic behavior-injection microservice used to exercise canary and
blue/green promotion decisions with FastAPI and Prometheus.
"""

__version__ = "1.0.0"

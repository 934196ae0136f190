"""
Interfaces decoupling the behavior engine from its sources of randomness.
"""

from rollout_target.interfaces.random_interface import IRandomSource

__all__ = ["IRandomSource"]

"""
API layer for the rollout target service.

This package contains the routes, middleware, and response schemas.
"""

"""
API route handlers.
"""

from fastapi import APIRouter

from rollout_target.api.routes import content, health, metrics

# Create main router
router = APIRouter()

# Include sub-routers
router.include_router(content.router, tags=["Content"])
router.include_router(health.router, tags=["Health"])
router.include_router(metrics.router, tags=["Monitoring"])

__all__ = ["router"]

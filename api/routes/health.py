"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from fastapi import APIRouter
from datetime import datetime, timezone
import platform

from checkout import __version__
from checkout.settings import get_app_settings


router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "checkout-orchestrator",
        "version": __version__,
        "environment": get_app_settings().checkout.env,
        "python_version": platform.python_version(),
    }

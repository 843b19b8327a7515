"""Health check endpoint."""

from fastapi import APIRouter

from ...config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns service status and version.
    """
    from orderflow import __version__

    return {
        "status": "healthy",
        "version": __version__,
        "service": "orderflow",
    }


@router.get("/ready")
async def readiness_check() -> dict:
    """
    Readiness check endpoint.

    Reports whether the collaborators are configured.
    """
    settings = get_settings()
    checks = {
        "api": True,
        "classification_api_configured": bool(settings.classification_api_url),
    }

    return {
        "ready": checks["api"],
        "checks": checks,
    }

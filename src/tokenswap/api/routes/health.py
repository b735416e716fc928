"""Health check endpoints."""

from fastapi import APIRouter, Request

from tokenswap import __version__
from tokenswap.config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "tokenswap"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration and catalog info."""
    settings = get_settings()
    widget = request.app.state.widget
    return {
        "status": "healthy" if widget.catalog.is_loaded else "degraded",
        "service": "tokenswap",
        "version": __version__,
        "catalog": {
            "loaded": widget.catalog.is_loaded,
            "tokens": len(widget.catalog),
            "feed": widget.feed.name,
        },
        "config": settings.get_safe_dict(),
    }

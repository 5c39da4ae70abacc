"""Health check endpoints."""

from fastapi import APIRouter

from brewtools import __version__
from brewtools.config import get_settings
from brewtools.web.services.tool_router import ToolRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "brewtools"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check.

    Reports where tool calls are forwarded and which tools are routed.
    The upstream API itself is not contacted.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "brewtools",
        "version": __version__,
        "agent_url": settings.agent_url,
        "tools": ToolRouter.available_tools(),
        "strict_params": settings.strict_params,
        "config": settings.get_safe_dict(),
    }

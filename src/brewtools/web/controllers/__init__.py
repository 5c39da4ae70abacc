"""HTTP controllers for web API endpoints."""

from brewtools.web.controllers.tools import router as tools_router

__all__ = [
    "tools_router",
]

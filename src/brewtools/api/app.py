"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from brewtools import __version__
from brewtools.config import get_settings
from brewtools.web.contracts.tools import ToolErrorResponse
from brewtools.web.controllers.tools import get_tool_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield
    # Shutdown
    if get_tool_router.cache_info().currsize:
        await get_tool_router().client.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Brewtools API",
        description="Tool router for the Brewit automation API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug and not settings.is_production else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies with the tool error envelope."""
        errors = "; ".join(str(err.get("msg", err)) for err in exc.errors())
        error = ToolErrorResponse(
            message="Invalid request body",
            status=400,
            detail=errors or "Request validation failed",
        )
        return JSONResponse(status_code=400, content=error.model_dump())

    # Register routes
    from brewtools.api.routes import health
    from brewtools.web.controllers import tools_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(tools_router)

    return app

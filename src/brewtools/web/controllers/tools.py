"""Tool API endpoints.

Thin HTTP layer over ToolRouter: it passes the path, body and headers
through and serializes whichever envelope comes back.
"""

from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from brewtools.web.contracts.tools import ToolListResponse
from brewtools.web.services.tool_router import ToolRouter

router = APIRouter(prefix="/tools", tags=["tools"])


@lru_cache
def get_tool_router() -> ToolRouter:
    """Shared router instance (one pooled HTTP client per process)."""
    return ToolRouter()


@router.get("", response_model=ToolListResponse)
async def list_tools(tool_router: ToolRouter = Depends(get_tool_router)) -> ToolListResponse:
    """List the tools that can be executed."""
    return ToolListResponse(tools=tool_router.available_tools())


@router.post("/{tool_name}")
async def execute_tool(
    tool_name: str,
    request: Request,
    body: Optional[Any] = Body(default=None),
    tool_router: ToolRouter = Depends(get_tool_router),
) -> JSONResponse:
    """Execute a Brewit tool.

    Requires the x-validator-salt and x-account-address headers. The
    response status mirrors the envelope: 200 on success, otherwise the
    error envelope's status.
    """
    result = await tool_router.handle(tool_name, body, request.headers)
    return JSONResponse(status_code=result.status_code, content=result.body())

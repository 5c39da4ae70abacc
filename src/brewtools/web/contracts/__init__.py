"""Request and response contracts for the web layer."""

from brewtools.web.contracts.tools import (
    AutomationJob,
    IdentityHeaders,
    SendParams,
    SwapParams,
    ToolError,
    ToolErrorKind,
    ToolErrorResponse,
    ToolListResponse,
    ToolResult,
    ToolSuccessResponse,
)

__all__ = [
    # Tool parameters
    "IdentityHeaders",
    "SendParams",
    "SwapParams",
    "AutomationJob",
    # Envelopes
    "ToolSuccessResponse",
    "ToolErrorResponse",
    "ToolListResponse",
    "ToolResult",
    # Errors
    "ToolError",
    "ToolErrorKind",
]

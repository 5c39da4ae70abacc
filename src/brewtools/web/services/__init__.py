"""Services behind the web controllers."""

from brewtools.web.services.brewit_client import BrewitClient
from brewtools.web.services.tool_router import ToolRouter, extract_identity_headers

__all__ = [
    "BrewitClient",
    "ToolRouter",
    "extract_identity_headers",
]

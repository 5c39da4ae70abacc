"""Tool dispatch for the Brewit automation proxy.

The router resolves a tool name, reads the caller identity headers, builds
the typed parameter model for the tool and hands it to the Brewit client.
Every outcome, including failures, comes back as a ToolResult so the HTTP
layer only has to serialize it.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from brewtools.config import Settings, get_settings
from brewtools.web.contracts.tools import (
    IdentityHeaders,
    SendParams,
    SwapParams,
    ToolError,
    ToolErrorKind,
    ToolResult,
    ToolSuccessResponse,
)
from brewtools.web.services.brewit_client import BrewitClient

logger = logging.getLogger(__name__)

VALIDATOR_SALT_HEADER = "x-validator-salt"
ACCOUNT_ADDRESS_HEADER = "x-account-address"

# Tool registry: params model and the body fields each tool reads
TOOLS = {
    "send": {"params": SendParams, "fields": ("toAddress", "amount", "token")},
    "swap": {"params": SwapParams, "fields": ("toToken", "fromToken", "amount")},
}


def extract_identity_headers(headers: Mapping) -> IdentityHeaders:
    """Read the validator salt and account address headers.

    Header names are matched case-insensitively. Both values must be
    non-empty strings.

    Raises:
        ToolError: BAD_REQUEST if either header is missing or invalid
    """
    normalized = {str(key).lower(): value for key, value in headers.items()}

    values = {}
    for header in (VALIDATOR_SALT_HEADER, ACCOUNT_ADDRESS_HEADER):
        value = normalized.get(header)
        if not value or not isinstance(value, str):
            raise ToolError(
                ToolErrorKind.BAD_REQUEST,
                f"Missing or invalid {header} header",
                "Invalid request headers",
            )
        values[header] = value

    return IdentityHeaders(
        validator_salt=values[VALIDATOR_SALT_HEADER],
        account_address=values[ACCOUNT_ADDRESS_HEADER],
    )


def validate_string_params(params: Mapping, required: tuple[str, ...]) -> None:
    """Require each named parameter to be present and a string."""
    for name in required:
        if params.get(name) is None:
            raise ToolError(
                ToolErrorKind.BAD_REQUEST,
                f"Missing required parameter: {name}",
                "Invalid tool parameters",
            )
        if not isinstance(params[name], str):
            raise ToolError(
                ToolErrorKind.BAD_REQUEST,
                f"Parameter '{name}' must be a string",
                "Invalid tool parameters",
            )


class ToolRouter:
    """Routes tool calls to the Brewit automation client."""

    def __init__(
        self,
        client: Optional[BrewitClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or BrewitClient(self.settings)

    @staticmethod
    def available_tools() -> list[str]:
        """Names of the tools this router dispatches."""
        return list(TOOLS)

    async def handle(self, tool_name: str, body: Any, headers: Mapping) -> ToolResult:
        """Execute a tool call and wrap the outcome in a response envelope.

        Args:
            tool_name: Name from the request path
            body: Decoded JSON request body
            headers: Request headers

        Returns:
            ToolResult carrying either the success or the error envelope
        """
        try:
            tool = self._lookup(tool_name)
            identity = extract_identity_headers(headers)
            params = self._build_params(tool, body, identity)
            result = await self._dispatch(tool_name, params)
        except ToolError as e:
            if e.kind == ToolErrorKind.UPSTREAM_ERROR:
                logger.error(f"Tool {tool_name} failed: {e.message}")
            else:
                logger.warning(f"Rejected tool call {tool_name}: {e.message}")
            return ToolResult.from_error(e)

        return ToolResult(
            success=ToolSuccessResponse(
                result=result,
                message=f"Successfully executed {tool_name} operation",
                tool_name=tool_name,
            )
        )

    def _lookup(self, tool_name: str) -> dict:
        tool = TOOLS.get(tool_name)
        if tool is None:
            raise ToolError(
                ToolErrorKind.NOT_FOUND,
                f"Unknown tool: {tool_name}",
                f"Available tools: {', '.join(self.available_tools())}",
            )
        return tool

    def _build_params(
        self, tool: dict, body: Any, identity: IdentityHeaders
    ) -> Union[SendParams, SwapParams]:
        """Merge body fields with the identity headers into the tool's params model."""
        if body is None:
            body = {}
        if not isinstance(body, Mapping):
            raise ToolError(
                ToolErrorKind.BAD_REQUEST,
                "Request body must be a JSON object",
                "Invalid tool parameters",
            )

        if self.settings.strict_params:
            validate_string_params(body, tool["fields"])

        fields = {name: body.get(name) for name in tool["fields"]}
        fields["accountAddress"] = identity.account_address
        fields["validatorSalt"] = identity.validator_salt

        if self.settings.strict_params:
            return tool["params"](**fields)
        # Pass-through mode forwards body values as received
        return tool["params"].model_construct(**fields)

    async def _dispatch(self, tool_name: str, params: Union[SendParams, SwapParams]) -> Any:
        operation = getattr(self.client, tool_name)
        try:
            return await operation(params)
        except Exception as e:
            raise ToolError(
                ToolErrorKind.UPSTREAM_ERROR,
                str(e) or "Unknown error occurred",
                "Tool execution failed",
            ) from e

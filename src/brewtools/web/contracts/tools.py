"""Tool request and response contracts.

Parameter models use the camelCase field names the Brewit API expects,
so they serialize straight into the automation job payload.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class ToolErrorKind(str, Enum):
    """Distinguishable failure kinds produced by the tool router."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UPSTREAM_ERROR = "upstream_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ToolErrorKind.NOT_FOUND: 404,
    ToolErrorKind.BAD_REQUEST: 400,
    ToolErrorKind.UPSTREAM_ERROR: 500,
}


class ToolError(Exception):
    """Raised inside the router when a tool call cannot be completed."""

    def __init__(self, kind: ToolErrorKind, message: str, detail: str = ""):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)


class IdentityHeaders(BaseModel):
    """Caller identity taken from the x-validator-salt / x-account-address headers."""

    validator_salt: str
    account_address: str


class SendParams(BaseModel):
    """Parameters for the "send" task."""

    toAddress: str = Field(..., description="Recipient address")
    amount: str = Field(..., description="Amount to send")
    token: str = Field(..., description="Token symbol or address")
    accountAddress: str = Field(..., description="Caller smart account address")
    validatorSalt: str = Field(..., description="Caller validator salt")


class SwapParams(BaseModel):
    """Parameters for the "swap" task."""

    toToken: str = Field(..., description="Token to receive")
    fromToken: str = Field(..., description="Token to sell")
    amount: str = Field(..., description="Amount of fromToken to swap")
    accountAddress: str = Field(..., description="Caller smart account address")
    validatorSalt: str = Field(..., description="Caller validator salt")


class AutomationJob(BaseModel):
    """Outbound envelope posted to the Brewit automation agent."""

    name: str
    repeat: int
    times: int
    task: Literal["send", "swap"]
    payload: Union[SendParams, SwapParams]
    enabled: bool = True


class ToolSuccessResponse(BaseModel):
    """Envelope returned when the remote call succeeded."""

    success: bool = True
    result: Any = None
    message: str
    tool_type: str = "mixed"
    tool_name: str


class ToolErrorResponse(BaseModel):
    """Envelope returned for every failure path."""

    message: str
    status: int
    detail: str


class ToolResult(BaseModel):
    """Outcome of a routed tool call: exactly one of success or error is set."""

    success: Optional[ToolSuccessResponse] = None
    error: Optional[ToolErrorResponse] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int:
        return 200 if self.error is None else self.error.status

    def body(self) -> dict:
        """JSON body for the HTTP response."""
        if self.error is not None:
            return self.error.model_dump()
        return self.success.model_dump()

    @classmethod
    def from_error(cls, error: ToolError) -> "ToolResult":
        return cls(
            error=ToolErrorResponse(
                message=error.message,
                status=error.kind.status_code,
                detail=error.detail,
            )
        )


class ToolListResponse(BaseModel):
    """Available tool names."""

    success: bool = True
    tools: list[str] = Field(default_factory=list)

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, model_validator

JSONRPC_VERSION = "2.0"

RequestId = StrictStr | StrictInt | StrictFloat | None


class ErrorCode(int, Enum):
    PARSE_ERROR = -32700
    METHOD_NOT_FOUND = -32601


class McpMethod(str, Enum):
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


class McpRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    method: str = Field(min_length=1)
    params: dict[str, Any] | None = None


class McpError(BaseModel):
    code: int
    message: str


class TextContent(BaseModel):
    type: str = "text"
    text: str


class McpResponse(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: McpError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "McpResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("Response must carry exactly one of result or error.")
        return self

    @classmethod
    def success(cls, request_id: RequestId, result: dict[str, Any]) -> "McpResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls, request_id: RequestId, code: ErrorCode, message: str
    ) -> "McpResponse":
        return cls(id=request_id, error=McpError(code=int(code), message=message))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump()
        else:
            payload["result"] = self.result
        return payload

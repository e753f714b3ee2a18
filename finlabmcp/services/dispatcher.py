from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from finlabmcp.models import ErrorCode, McpMethod, McpRequest, McpResponse, TextContent
from finlabmcp.tools.base import ToolContext
from finlabmcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerIdentity:
    name: str
    version: str
    protocol_version: str


class RequestDispatcher:
    """Maps one request envelope to one response envelope.

    Only an unrecognised method becomes a protocol error; everything a tool
    reports (missing documents, empty searches, unknown tools) is returned as
    text content.
    """

    def __init__(self, *, tool_registry: ToolRegistry, identity: ServerIdentity) -> None:
        self._tool_registry = tool_registry
        self._identity = identity

    def dispatch(self, request: McpRequest) -> McpResponse:
        logger.debug("Dispatching %s (id=%r)", request.method, request.id)
        try:
            method = McpMethod(request.method)
        except ValueError:
            logger.info("Rejected unknown method %r", request.method)
            return McpResponse.failure(
                request.id,
                ErrorCode.METHOD_NOT_FOUND,
                f"Method not found: {request.method}",
            )

        if method is McpMethod.INITIALIZE:
            result = self._initialize()
        elif method is McpMethod.TOOLS_LIST:
            result = {"tools": self._tool_registry.descriptors()}
        else:
            result = self._call_tool(request)
        return McpResponse.success(request.id, result)

    def _initialize(self) -> dict[str, Any]:
        return {
            "protocolVersion": self._identity.protocol_version,
            "serverInfo": {
                "name": self._identity.name,
                "version": self._identity.version,
            },
            "capabilities": {"tools": {}},
        }

    def _call_tool(self, request: McpRequest) -> dict[str, Any]:
        params = request.params or {}
        tool_name = params.get("name")
        text = self.call_tool(tool_name, params.get("arguments"))
        return {"content": [TextContent(text=text).model_dump()]}

    def call_tool(self, name: Any, arguments: Any) -> str:
        tool_def = self._tool_registry.find(name)
        if tool_def is None:
            logger.info("Unknown tool requested: %r", name)
            return f"Unknown tool: {'' if name is None else name}"
        try:
            validated_args = tool_def.validate_args(arguments)
        except ValueError as exc:
            logger.info("Rejected arguments for %s: %s", tool_def.name, exc)
            return f"Invalid arguments: {exc}"
        return tool_def.tool.run(ToolContext(tool_name=tool_def.name, arguments=validated_args))

from .base import Tool, ToolContext
from .documents import (
    FactorExamplesTool,
    GetDocumentTool,
    ListDocumentsTool,
    SearchDocsTool,
    ToolName,
    build_document_registry,
)
from .registry import ToolDefinition, ToolRegistry

__all__ = [
    "Tool",
    "ToolContext",
    "FactorExamplesTool",
    "GetDocumentTool",
    "ListDocumentsTool",
    "SearchDocsTool",
    "ToolDefinition",
    "ToolName",
    "ToolRegistry",
    "build_document_registry",
]

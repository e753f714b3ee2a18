from __future__ import annotations

from enum import Enum

from finlabmcp.services.query_engine import ALL_FACTORS, SUGGESTED_FACTOR_TYPES, DocumentQueryEngine

from .base import Tool, ToolContext
from .registry import ToolRegistry


class ToolName(str, Enum):
    LIST_DOCUMENTS = "list_documents"
    GET_DOCUMENT = "get_document"
    SEARCH_DOCS = "search_finlab_docs"
    FACTOR_EXAMPLES = "get_factor_examples"


class _EngineTool(Tool):
    def __init__(self, engine: DocumentQueryEngine) -> None:
        self._engine = engine


class ListDocumentsTool(_EngineTool):
    name = ToolName.LIST_DOCUMENTS.value

    def run(self, context: ToolContext) -> str:
        return self._engine.list_documents()


class GetDocumentTool(_EngineTool):
    name = ToolName.GET_DOCUMENT.value

    def run(self, context: ToolContext) -> str:
        return self._engine.get_document(str(context.arguments.get("doc_name") or ""))


class SearchDocsTool(_EngineTool):
    name = ToolName.SEARCH_DOCS.value

    def run(self, context: ToolContext) -> str:
        return self._engine.search(str(context.arguments.get("query") or ""))


class FactorExamplesTool(_EngineTool):
    name = ToolName.FACTOR_EXAMPLES.value

    def run(self, context: ToolContext) -> str:
        factor_type = str(context.arguments.get("factor_type") or ALL_FACTORS)
        return self._engine.extract_examples(factor_type)


def build_document_registry(engine: DocumentQueryEngine, *, title: str = "FinLab") -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        tool=ListDocumentsTool(engine),
        description=f"List all available {title} documentation files",
        schema={"type": "object", "properties": {}},
    )
    registry.register(
        tool=GetDocumentTool(engine),
        description=f"Get the full content of a {title} documentation file",
        schema={
            "type": "object",
            "properties": {
                "doc_name": {
                    "type": "string",
                    "description": (
                        "Name of the document (without .md extension). Available: "
                        + ", ".join(engine.store.names())
                    ),
                },
            },
            "required": ["doc_name"],
        },
    )
    registry.register(
        tool=SearchDocsTool(engine),
        description=f"Search for a keyword or phrase in all {title} documentation",
        schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "The search term to look for (case-insensitive)",
                },
            },
            "required": ["query"],
        },
    )
    registry.register(
        tool=FactorExamplesTool(engine),
        description="Get factor/strategy examples from the documentation",
        schema={
            "type": "object",
            "properties": {
                "factor_type": {
                    "type": "string",
                    "description": "Type of factor: "
                    + ", ".join((ALL_FACTORS, *SUGGESTED_FACTOR_TYPES)),
                    "default": ALL_FACTORS,
                },
            },
        },
    )
    return registry

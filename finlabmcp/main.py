from __future__ import annotations

import json
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from finlabmcp.config import settings
from finlabmcp.models import ErrorCode, McpRequest, McpResponse
from finlabmcp.services import DocumentQueryEngine, DocumentStore
from finlabmcp.services.dispatcher import RequestDispatcher, ServerIdentity
from finlabmcp.tools import build_document_registry

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="FinLab Docs MCP", version=settings.mcp_server_version)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def _build_dispatcher(store: DocumentStore) -> RequestDispatcher:
    engine = DocumentQueryEngine(
        store,
        title=settings.docs_title,
        factor_examples_doc=settings.factor_examples_doc,
    )
    return RequestDispatcher(
        tool_registry=build_document_registry(engine, title=settings.docs_title),
        identity=ServerIdentity(
            name=settings.mcp_server_name,
            version=settings.mcp_server_version,
            protocol_version=settings.mcp_protocol_version,
        ),
    )


document_store = DocumentStore.from_directory(settings.docs_dir)
dispatcher = _build_dispatcher(document_store)


@app.get("/")
@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "server": settings.health_server_name}


@app.post("/mcp")
@app.post("/sse")
async def mcp_route(request: Request) -> JSONResponse:
    body = await request.body()
    try:
        envelope = McpRequest.model_validate(json.loads(body))
    except (ValueError, RecursionError, ValidationError) as exc:
        logger.warning("Rejected unparsable MCP request: %s", exc)
        return JSONResponse(
            status_code=400,
            content=McpResponse.failure(None, ErrorCode.PARSE_ERROR, "Parse error").to_payload(),
        )
    response = dispatcher.dispatch(envelope)
    return JSONResponse(content=response.to_payload())


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

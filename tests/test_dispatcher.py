import unittest

from finlabmcp.models import McpRequest, McpResponse
from finlabmcp.services.dispatcher import RequestDispatcher, ServerIdentity
from finlabmcp.services.document_store import DocumentStore
from finlabmcp.services.query_engine import DocumentQueryEngine
from finlabmcp.tools import build_document_registry

DOCUMENTS = {
    "a": "line1\nMATCH\nline3",
    "factor-examples": "# Examples\n## value\nlow pb\n## momentum\nreturns",
}


def _dispatcher() -> RequestDispatcher:
    engine = DocumentQueryEngine(DocumentStore(DOCUMENTS))
    return RequestDispatcher(
        tool_registry=build_document_registry(engine),
        identity=ServerIdentity(name="finlab-docs", version="1.0.0", protocol_version="2024-11-05"),
    )


def _call(name, arguments=None, request_id=7) -> McpResponse:
    params = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return _dispatcher().dispatch(McpRequest(id=request_id, method="tools/call", params=params))


def _text(response: McpResponse) -> str:
    content = response.result["content"]
    assert len(content) == 1 and content[0]["type"] == "text"
    return content[0]["text"]


class DispatcherTests(unittest.TestCase):
    def test_initialize_returns_identity(self):
        response = _dispatcher().dispatch(McpRequest(id="init-1", method="initialize"))
        self.assertEqual(response.id, "init-1")
        self.assertIsNone(response.error)
        self.assertEqual(
            response.result,
            {
                "protocolVersion": "2024-11-05",
                "serverInfo": {"name": "finlab-docs", "version": "1.0.0"},
                "capabilities": {"tools": {}},
            },
        )

    def test_tools_list_returns_descriptors(self):
        response = _dispatcher().dispatch(McpRequest(id=1, method="tools/list"))
        tools = response.result["tools"]
        self.assertEqual(
            [tool["name"] for tool in tools],
            ["list_documents", "get_document", "search_finlab_docs", "get_factor_examples"],
        )
        self.assertTrue(all({"name", "description", "inputSchema"} <= set(tool) for tool in tools))

    def test_unknown_method_is_protocol_error(self):
        response = _dispatcher().dispatch(McpRequest(id=3, method="resources/list"))
        payload = response.to_payload()
        self.assertNotIn("result", payload)
        self.assertEqual(payload["error"], {"code": -32601, "message": "Method not found: resources/list"})
        self.assertEqual(payload["id"], 3)

    def test_unknown_tool_is_text_result(self):
        response = _call("delete_everything")
        self.assertIsNone(response.error)
        self.assertNotIn("error", response.to_payload())
        self.assertEqual(_text(response), "Unknown tool: delete_everything")

    def test_missing_params_reports_unknown_tool(self):
        response = _dispatcher().dispatch(McpRequest(id=4, method="tools/call"))
        self.assertEqual(_text(response), "Unknown tool: ")

    def test_list_documents_tool(self):
        self.assertEqual(
            _text(_call("list_documents")),
            "## Available FinLab Documents\n\n- **a**: line1\n- **factor-examples**: Examples",
        )

    def test_get_document_tool(self):
        self.assertEqual(_text(_call("get_document", {"doc_name": "a"})), DOCUMENTS["a"])
        self.assertTrue(_text(_call("get_document", {"doc_name": "nope"})).startswith("Document 'nope' not found."))

    def test_get_document_without_name_is_not_found_text(self):
        response = _call("get_document")
        self.assertIsNone(response.error)
        self.assertTrue(_text(response).startswith("Document '' not found."))

    def test_search_tool(self):
        self.assertIn("### a (line 2)", _text(_call("search_finlab_docs", {"query": "match"})))
        self.assertEqual(
            _text(_call("search_finlab_docs", {"query": "absent"})),
            "No results found for 'absent'",
        )

    def test_factor_examples_tool_defaults_to_all(self):
        self.assertEqual(_text(_call("get_factor_examples")), DOCUMENTS["factor-examples"])
        self.assertEqual(_text(_call("get_factor_examples", {"factor_type": ""})), DOCUMENTS["factor-examples"])
        self.assertEqual(_text(_call("get_factor_examples", {"factor_type": "Value"})), "## value\nlow pb")

    def test_invalid_argument_type_is_text_result(self):
        response = _call("search_finlab_docs", {"query": 42})
        self.assertIsNone(response.error)
        self.assertEqual(
            _text(response),
            "Invalid arguments: Tool 'search_finlab_docs' arg 'query' must be a string.",
        )


class ServicesPackageTests(unittest.TestCase):
    def test_exports_dispatcher(self):
        from finlabmcp import services

        self.assertIs(services.RequestDispatcher, RequestDispatcher)
        self.assertIs(services.ServerIdentity, ServerIdentity)
        self.assertIn("RequestDispatcher", services.__all__)


class ResponseEnvelopeTests(unittest.TestCase):
    def test_requires_exactly_one_outcome(self):
        with self.assertRaises(ValueError):
            McpResponse(id=1)
        with self.assertRaises(ValueError):
            McpResponse(id=1, result={}, error={"code": 1, "message": "x"})

    def test_request_id_types_are_strict(self):
        self.assertEqual(McpRequest(id=1.5, method="initialize").id, 1.5)
        self.assertIs(type(McpRequest(id=3, method="initialize").id), int)
        with self.assertRaises(ValueError):
            McpRequest(id=True, method="initialize")
        with self.assertRaises(ValueError):
            McpRequest(id=[1], method="initialize")

    def test_payload_keeps_null_id(self):
        payload = McpResponse.success(None, {"ok": True}).to_payload()
        self.assertEqual(payload, {"jsonrpc": "2.0", "id": None, "result": {"ok": True}})


if __name__ == "__main__":
    unittest.main()

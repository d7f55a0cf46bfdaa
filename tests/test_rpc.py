"""
Tests for the JSON-RPC request router.

Run with: pytest tests/test_rpc.py -v
"""

import json
from unittest.mock import MagicMock

import pytest

from yt_keyword_analyzer.api.rpc import RequestRouter, error_response
from yt_keyword_analyzer.errors import InvalidInputError


@pytest.fixture
def router(analyzer):
    return RequestRouter(analyzer=analyzer)


def _call(router, arguments, name="analyzeKeywords", request_id=7):
    return router.handle({
        "jsonrpc": "2.0",
        "method": "tools/call",
        "params": {"name": name, "arguments": arguments},
        "id": request_id,
    })


class TestProtocolMethods:
    """ping and tools/list."""

    def test_ping(self, router):
        response = router.handle({"method": "ping", "id": "abc"})

        assert response["jsonrpc"] == "2.0"
        assert response["id"] == "abc"
        assert response["result"]["status"] == "ok"
        assert response["result"]["agent"] == "YT-Keyword-Analyzer"
        assert response["result"]["version"] == "1.0.0"
        assert response["result"]["timestamp"].endswith("Z")

    def test_ping_without_id(self, router):
        assert router.handle({"method": "ping"})["id"] is None

    def test_tools_list(self, router):
        tools = router.handle({"method": "tools/list", "id": 1})["result"]["tools"]

        assert len(tools) == 1
        assert tools[0]["name"] == "analyzeKeywords"
        schema = tools[0]["inputSchema"]
        assert schema["required"] == ["keywords"]
        assert set(schema["properties"]) == {"keywords", "concept", "targetAudience", "niche"}
        assert schema["properties"]["keywords"]["items"]["properties"]["relevance"] == {"type": "number"}

    def test_tool_descriptor_is_a_copy(self):
        RequestRouter.tool_descriptor()["inputSchema"]["required"].append("niche")
        assert RequestRouter.tool_descriptor()["inputSchema"]["required"] == ["keywords"]


class TestToolCall:
    """tools/call -> analyzeKeywords."""

    def test_analyze_keywords(self, router, sample_keywords):
        response = _call(router, {"keywords": sample_keywords, "niche": "tech"})

        assert response["id"] == 7
        content = response["result"]["content"]
        assert content["totalAnalyzed"] == 5
        assert content["niche"] == "tech"
        assert content["allKeywords"][0]["keyword"] == "Viral Shorts Secret"
        json.dumps(response)

    def test_unknown_tool(self, router):
        response = _call(router, {"keywords": ["x"]}, name="unknownTool")

        assert response["error"] == {"code": -32602, "message": "Unknown tool: unknownTool"}
        assert response["id"] == 7

    def test_missing_keywords(self, router):
        response = _call(router, {"concept": "no keywords"})
        assert response["error"] == {"code": -32603, "message": "Keywords array is required"}

    def test_missing_arguments(self, router):
        response = router.handle({"method": "tools/call", "params": {"name": "analyzeKeywords"}, "id": 3})
        assert response["error"]["code"] == -32603
        assert response["id"] == 3

    def test_malformed_entry(self, router):
        response = _call(router, {"keywords": [{"category": "primary"}]})
        assert response["error"]["code"] == -32603
        assert "keyword" in response["error"]["message"]

    def test_missing_params_is_parse_error(self, router):
        response = router.handle({"method": "tools/call", "id": 9})
        assert response["error"]["code"] == -32700
        assert response["id"] is None

    def test_unexpected_failure_message_forwarded(self):
        analyzer = MagicMock()
        analyzer.analyze.side_effect = RuntimeError("scorer exploded")
        router = RequestRouter(analyzer=analyzer)

        response = _call(router, {"keywords": ["x"]})

        assert response["error"] == {"code": -32603, "message": "scorer exploded"}

    def test_invalid_input_from_analyzer(self):
        analyzer = MagicMock()
        analyzer.analyze.side_effect = InvalidInputError("Keywords array is required")
        response = _call(RequestRouter(analyzer=analyzer), {})

        assert response["error"]["message"] == "Keywords array is required"


class TestEnvelopeErrors:
    """Parse errors and unknown methods."""

    def test_unknown_method(self, router):
        response = router.handle({"method": "resources/list", "id": 4})

        assert response["error"] == {"code": -32601, "message": "Method not found: resources/list"}
        assert response["id"] == 4

    @pytest.mark.parametrize("raw", ["not json{", "", b"\xff\xfe"])
    def test_non_json(self, router, raw):
        response = router.handle_raw(raw)

        assert response["error"] == {"code": -32700, "message": "Parse error"}
        assert response["id"] is None

    @pytest.mark.parametrize("payload", [[1, 2], "ping", {"id": 1}, {"method": 5, "id": 1}])
    def test_malformed_envelope(self, router, payload):
        response = router.handle_raw(json.dumps(payload))

        assert response["error"]["code"] == -32700
        assert response["id"] is None

    @pytest.mark.parametrize("version", [2, 2.0, None, "1.0"])
    def test_jsonrpc_field_is_not_validated(self, router, version):
        response = router.handle({"jsonrpc": version, "method": "ping", "id": 1})

        assert response["result"]["status"] == "ok"
        assert response["id"] == 1
        assert response["jsonrpc"] == "2.0"

    def test_handle_raw_accepts_bytes(self, router):
        response = router.handle_raw(b'{"method": "ping", "id": 1}')
        assert response["result"]["status"] == "ok"

    def test_error_response_shape(self):
        assert error_response(-32601, "nope", 3) == {
            "jsonrpc": "2.0",
            "error": {"code": -32601, "message": "nope"},
            "id": 3,
        }

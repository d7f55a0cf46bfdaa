"""
JSON-RPC request router.

Dispatches ping, tools/list and tools/call (analyzeKeywords) and converts
every failure into an error envelope. Nothing raised here reaches the
transport.

Usage:
    from yt_keyword_analyzer.api.rpc import RequestRouter

    router = RequestRouter()
    response = router.handle_raw('{"method": "ping", "id": 1}')
"""

import copy
import json
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import ValidationError

from .. import AGENT_NAME, __version__
from ..errors import (
    KeywordAnalyzerError,
    MethodNotFoundError,
    ProtocolParseError,
    UnknownToolError,
)
from ..seo.batch_analyzer import BatchAnalyzer, utc_timestamp
from .models import ANALYZE_KEYWORDS_SCHEMA, RpcRequest

JSONRPC_VERSION = "2.0"
TOOL_NAME = "analyzeKeywords"
TOOL_DESCRIPTION = "Analyze keywords for competition, search volume, and SEO potential"


def success_response(result: Dict[str, Any], request_id: Any) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}


def error_response(code: int, message: str, request_id: Any = None) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "error": {"code": code, "message": message},
        "id": request_id,
    }


class RequestRouter:
    """Maps protocol methods onto the keyword analyzer."""

    def __init__(self, analyzer: Optional[BatchAnalyzer] = None):
        self.analyzer = analyzer or BatchAnalyzer()
        self._handlers = {
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tool_call,
        }

    def handle_raw(self, message: Union[str, bytes]) -> Dict[str, Any]:
        """Decode one inbound frame and handle it."""
        try:
            payload = json.loads(message)
        except (TypeError, ValueError) as e:
            logger.warning(f"[RequestRouter] Unparseable message: {e}")
            return error_response(ProtocolParseError.code, "Parse error")
        return self.handle(payload)

    def handle(self, payload: Any) -> Dict[str, Any]:
        """
        Handle a decoded request envelope.

        Args:
            payload: Decoded JSON value

        Returns:
            Response envelope dict
        """
        try:
            request = RpcRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"[RequestRouter] Malformed envelope: {e.error_count()} error(s)")
            return error_response(ProtocolParseError.code, "Parse error")

        logger.info(f"[RequestRouter] Received: {request.method}")

        try:
            handler = self._handlers.get(request.method)
            if handler is None:
                raise MethodNotFoundError(request.method)
            return success_response(handler(request), request.id)
        except ProtocolParseError as e:
            logger.warning(f"[RequestRouter] {request.method}: {e}")
            return error_response(e.code, str(e))
        except KeywordAnalyzerError as e:
            logger.warning(f"[RequestRouter] {request.method} rejected: {e}")
            return error_response(e.code, str(e), request.id)

    def _handle_ping(self, request: RpcRequest) -> Dict[str, Any]:
        return {
            "status": "ok",
            "agent": AGENT_NAME,
            "version": __version__,
            "timestamp": utc_timestamp(),
        }

    def _handle_tools_list(self, request: RpcRequest) -> Dict[str, Any]:
        return {"tools": [self.tool_descriptor()]}

    def _handle_tool_call(self, request: RpcRequest) -> Dict[str, Any]:
        if request.params is None:
            raise ProtocolParseError("Parse error")

        name = request.params.get("name")
        if name != TOOL_NAME:
            raise UnknownToolError(name)

        args = request.params.get("arguments") or {}
        if not isinstance(args, dict):
            args = {}

        try:
            report = self.analyzer.analyze(
                args.get("keywords"),
                concept=args.get("concept"),
                target_audience=args.get("targetAudience"),
                niche=args.get("niche"),
            )
        except KeywordAnalyzerError:
            raise
        except Exception as e:
            logger.exception(f"[RequestRouter] {TOOL_NAME} failed")
            raise KeywordAnalyzerError(str(e)) from e

        return {"content": report.to_dict()}

    @staticmethod
    def tool_descriptor() -> Dict[str, Any]:
        return {
            "name": TOOL_NAME,
            "description": TOOL_DESCRIPTION,
            "inputSchema": copy.deepcopy(ANALYZE_KEYWORDS_SCHEMA),
        }

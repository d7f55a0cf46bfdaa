"""
Pydantic models for the RPC envelope and HTTP responses.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RpcRequest(BaseModel):
    """Inbound request envelope."""
    jsonrpc: Any = Field(None, description="Protocol version, ignored; responses always carry 2.0")
    method: str = Field(..., description="ping, tools/list or tools/call")
    params: Optional[Dict[str, Any]] = Field(None, description="Method parameters")
    id: Any = Field(None, description="Caller correlation id, echoed back")


class HealthResponse(BaseModel):
    """Service health check response."""
    status: str
    agent: str
    version: str
    capabilities: List[str]
    active_connections: int = Field(..., serialization_alias="activeConnections")
    uptime_seconds: float = Field(..., serialization_alias="uptimeSeconds")


# analyzeKeywords input schema advertised by tools/list
ANALYZE_KEYWORDS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "keywords": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "keyword": {"type": "string"},
                    "category": {"type": "string"},
                    "searchVolume": {"type": "string"},
                    "competition": {"type": "string"},
                    "relevance": {"type": "number"},
                },
            },
            "description": "Array of keywords from brainstormer",
        },
        "concept": {
            "type": "string",
            "description": "Original video concept",
        },
        "targetAudience": {
            "type": "string",
            "description": "Target audience",
        },
        "niche": {
            "type": "string",
            "description": "Content niche (tech, gaming, lifestyle, etc.)",
        },
    },
    "required": ["keywords"],
}

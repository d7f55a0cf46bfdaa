"""
YT Keyword Analyzer

Scores candidate YouTube keywords for competition, estimated search volume,
trend direction and overall opportunity, and serves the analysis over a
JSON-RPC style WebSocket protocol.
"""

AGENT_NAME = "YT-Keyword-Analyzer"
__version__ = "1.0.0"

CAPABILITIES = ["youtube", "keywords", "analyze", "competition"]

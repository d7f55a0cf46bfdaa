"""
Exception hierarchy for the keyword analyzer.

Every error carries the JSON-RPC code it is reported with, so the request
router can turn any of them into an error envelope without a lookup table.
"""


class KeywordAnalyzerError(Exception):
    """Base exception for keyword analyzer errors."""

    code = -32603


class ProtocolParseError(KeywordAnalyzerError):
    """Inbound message is not a usable request envelope."""

    code = -32700

    def __init__(self, message: str = "Parse error"):
        super().__init__(message)


class MethodNotFoundError(KeywordAnalyzerError):
    """Unrecognized top-level method."""

    code = -32601

    def __init__(self, method):
        self.method = method
        super().__init__(f"Method not found: {method}")


class UnknownToolError(KeywordAnalyzerError):
    """tools/call for a tool this agent does not provide."""

    code = -32602

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidInputError(KeywordAnalyzerError):
    """analyzeKeywords called without a usable keyword list."""

    code = -32603

"""RPC protocol layer and WebSocket server."""

from .rpc import RequestRouter, error_response, success_response
from .app import create_app

__all__ = [
    "RequestRouter",
    "error_response",
    "success_response",
    "create_app",
]

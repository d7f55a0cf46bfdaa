"""
YT Keyword Analyzer server - FastAPI application.

Serves the JSON-RPC router over a WebSocket on ``/`` and a plain HTTP
health check on ``/health``.

Launch:
    python run.py serve

Or programmatically:
    from yt_keyword_analyzer.api.app import create_app
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=3000)
"""

import json
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket
from loguru import logger

from .. import AGENT_NAME, CAPABILITIES, __version__
from ..config import Settings, get_settings
from .models import HealthResponse
from .rpc import RequestRouter


class ConnectionTracker:
    """Counts open WebSocket connections for the health endpoint."""

    def __init__(self) -> None:
        self.active = 0

    def connect(self) -> None:
        self.active += 1
        logger.info(f"[Server] Client connected ({self.active} active)")

    def disconnect(self) -> None:
        self.active = max(0, self.active - 1)
        logger.info(f"[Server] Client disconnected ({self.active} active)")


def create_app(
    settings: Optional[Settings] = None,
    router: Optional[RequestRouter] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Server settings (loaded from the environment if omitted)
        router: Request router (a default one is created if omitted)

    Returns:
        FastAPI app
    """
    settings = settings or get_settings()
    router = router or RequestRouter()
    connections = ConnectionTracker()
    started_at = time.time()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{AGENT_NAME} server running on port {settings.port}")
        if settings.is_production:
            logger.info(f"Published WebSocket URL: {settings.websocket_url}")
        else:
            logger.info(f"Dev WebSocket URL: {settings.websocket_url}")

        yield

        logger.info(f"{AGENT_NAME} shutting down")

    app = FastAPI(
        title=AGENT_NAME,
        description="Keyword competition, volume and opportunity analysis over WebSocket RPC.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.router = router
    app.state.connections = connections

    @app.get("/health", response_model=HealthResponse, response_model_by_alias=True)
    async def health_check():
        """Service health check."""
        return HealthResponse(
            status="ok",
            agent=AGENT_NAME,
            version=__version__,
            capabilities=list(CAPABILITIES),
            active_connections=connections.active,
            uptime_seconds=round(time.time() - started_at, 1),
        )

    @app.websocket("/")
    async def rpc_socket(websocket: WebSocket):
        """One JSON request per frame, one JSON response per request."""
        await websocket.accept()
        connections.connect()

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break

                data = message.get("text")
                if data is None:
                    data = message.get("bytes")

                response = router.handle_raw(data)
                await websocket.send_text(json.dumps(response))
        finally:
            connections.disconnect()

    return app

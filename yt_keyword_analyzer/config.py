"""
Runtime configuration loaded from the environment.

Values come from process environment variables, optionally seeded from a
``.env`` file (``config/.env`` first, then ``.env`` in the working directory).

Usage:
    from yt_keyword_analyzer.config import get_settings

    settings = get_settings()
    print(settings.port)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
ENV_FILES = ("config/.env", ".env")


@dataclass(frozen=True)
class Settings:
    """Server and logging settings."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: Optional[str] = None
    environment: str = "development"
    public_ws_url: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def websocket_url(self) -> str:
        """URL clients should connect to, as announced at startup."""
        if self.is_production and self.public_ws_url:
            return self.public_ws_url
        return f"ws://localhost:{self.port}"


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def get_settings(load_env: bool = True) -> Settings:
    """
    Build settings from environment variables.

    Args:
        load_env: Read .env files before looking at os.environ. Existing
            environment variables always take precedence.

    Returns:
        Settings instance

    Raises:
        ValueError: PORT is not a valid port number
    """
    if load_env:
        for env_file in ENV_FILES:
            if Path(env_file).exists():
                load_dotenv(env_file)

    return Settings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        environment=os.getenv("APP_ENVIRONMENT", "development"),
        public_ws_url=os.getenv("PUBLIC_WS_URL") or None,
    )

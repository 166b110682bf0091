"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def get_host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST)


def get_port() -> int:
    return int(os.environ.get("PORT", str(DEFAULT_PORT)))


def get_log_level() -> str:
    return os.environ.get("SONGSMITH_LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> list[str]:
    """Allowed CORS origins; '*' unless SONGSMITH_CORS_ORIGINS lists specific ones."""
    raw = os.environ.get("SONGSMITH_CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def configure_logging(level: str | int | None = None) -> None:
    """Log to stderr in the shared format."""
    logging.basicConfig(
        level=level or get_log_level(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def add_root_handler(handler: logging.Handler, level: str | int = logging.INFO) -> logging.Handler:
    """Attach ``handler`` to the root logger with the shared format."""
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler

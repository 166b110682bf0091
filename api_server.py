"""API server entry point."""

from __future__ import annotations

import uvicorn

from songsmith.api.routes import create_app
from songsmith.config import configure_logging, get_host, get_port

configure_logging()


def main() -> None:
    """Run the API server."""
    app = create_app()
    uvicorn.run(
        app,
        host=get_host(),
        port=get_port(),
        log_level="info",
    )


if __name__ == "__main__":
    main()

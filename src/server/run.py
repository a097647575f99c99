"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from .app import app
from .dependencies import get_config


def main() -> None:
    """Run the server on the configured host and port (PORT, default 3000)."""
    config = get_config()
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()

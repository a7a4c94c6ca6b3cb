"""
Main module entry point.

This allows running the API server as: python -m iot_spoofer.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "iot_spoofer.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""
Main module entry point.

This allows running the orchestrator as: python -m orchestrator.main
"""

import uvicorn

from orchestrator.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "orchestrator.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()

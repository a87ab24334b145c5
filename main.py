"""ASGI entrypoint: `uvicorn main:app`."""
from __future__ import annotations

import uvicorn

from hellosvc.app import app
from hellosvc.settings import settings

__all__ = ["app", "run"]


def run(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    uvicorn.run(
        "main:app" if reload else app,
        host=settings.host if host is None else host,
        port=settings.port if port is None else port,
        reload=reload,
        access_log=False,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()

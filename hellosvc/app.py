from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .api_models import GreetingResponse, VersionInfo
from .logging_config import configure_logging
from .settings import settings
from .version import DESCRIPTION, __version__

logger = structlog.get_logger(__name__)

app = FastAPI(title="Hello Microservice", version=__version__)


@app.middleware("http")
async def access_log(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    if settings.access_log:
        logger.info(
            "request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            latency_ms=round((time.time() - start) * 1000.0, 2),
        )
    return response


@app.on_event("startup")
def startup() -> None:
    configure_logging(settings)
    logger.info("Hello Microservice started", version=__version__, host=settings.host, port=settings.port)


# --- API ---
@app.get("/api/hello", response_model=GreetingResponse)
def hello(name: str = "World") -> GreetingResponse:
    # name is echoed raw; no escaping or length limit
    logger.debug("greeting", name=name)
    return GreetingResponse(message=f"Hello, {name}!")


@app.get("/api/version", response_model=VersionInfo)
def version() -> VersionInfo:
    return VersionInfo(version=__version__, description=DESCRIPTION)


# --- PROBES ---
@app.get("/health", response_class=PlainTextResponse)
def health() -> str:
    """Liveness probe: the process is up."""
    return "OK"


@app.get("/ready", response_class=PlainTextResponse)
def ready() -> str:
    """Readiness probe: the process accepts traffic. No dependency checks."""
    return "READY"

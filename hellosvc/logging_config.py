"""Logging configuration for the service and its tooling.

Console output for local runs, one JSON object per line when HELLO_LOG_JSON is
set (container log collectors).
"""

import logging
import sys

import structlog

from .settings import Settings, settings as default_settings


def _renderer(cfg: Settings):
    if cfg.log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(cfg: Settings | None = None) -> None:
    """Configure structlog and the stdlib loggers of the HTTP stack.

    Args:
        cfg: Service settings; HELLO_DEBUG lowers the level to DEBUG.
    """
    cfg = cfg or default_settings
    log_level = logging.DEBUG if cfg.debug else logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    # Requests are logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    for name in ("httpx", "httpcore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(cfg),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

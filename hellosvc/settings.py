from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Server
    host: str = os.getenv("HELLO_HOST", "0.0.0.0")
    port: int = _env_int("HELLO_PORT", 8080)

    # Logging
    debug: bool = _env_bool("HELLO_DEBUG", False)
    access_log: bool = _env_bool("HELLO_ACCESS_LOG", True)
    log_json: bool = _env_bool("HELLO_LOG_JSON", False)

    # Client tooling
    api_url: str = os.getenv("HELLO_API_URL", "http://localhost:8080")
    probe_timeout_s: int = _env_int("HELLO_PROBE_TIMEOUT_S", 2)


settings = Settings()

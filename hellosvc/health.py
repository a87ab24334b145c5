from __future__ import annotations

import time

import httpx

from .settings import settings

# probe name -> (path, expected plaintext body)
PROBES: dict[str, tuple[str, str]] = {
    "health": ("/health", "OK"),
    "ready": ("/ready", "READY"),
}


def check_probe(
    url: str,
    expected: str,
    timeout_s: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> tuple[bool, str, float | None]:
    """Call a plaintext probe endpoint.

    Expected body: the probe token (OK for /health, READY for /ready).
    Returns (is_healthy, message, latency_ms).
    """
    if timeout_s is None:
        timeout_s = float(settings.probe_timeout_s)
    start = time.time()
    try:
        with httpx.Client(timeout=timeout_s, follow_redirects=False, transport=transport) as client:
            resp = client.get(url)
        latency_ms = round((time.time() - start) * 1000.0, 2)
        if resp.status_code != 200:
            return False, f"HTTP {resp.status_code}", latency_ms
        body = resp.text.strip()
        if body == expected:
            return True, "Healthy", latency_ms
        return False, f"Unexpected body: {body!r}", latency_ms
    except (httpx.ConnectError, httpx.ReadTimeout):
        latency_ms = round((time.time() - start) * 1000.0, 2)
        return False, "No response", latency_ms
    except httpx.HTTPError as e:
        latency_ms = round((time.time() - start) * 1000.0, 2)
        return False, f"Error: {type(e).__name__}: {e}", latency_ms


def probe_service(base_url: str, probe: str, **kwargs) -> tuple[bool, str, float | None]:
    """Run a named probe (health|ready) against a service base URL."""
    path, expected = PROBES[probe]
    return check_probe(base_url.rstrip("/") + path, expected, **kwargs)

from __future__ import annotations

import argparse
import json
import sys

import requests

from hellosvc.health import PROBES, probe_service
from hellosvc.settings import settings


def _print(obj) -> None:
    print(json.dumps(obj, indent=2, ensure_ascii=False))


def _get_and_print(url: str, params: dict | None = None) -> int:
    """GET a JSON endpoint and print the body. Returns the exit code."""
    try:
        r = requests.get(url, params=params, timeout=10)
        _print(r.json())
    except (requests.RequestException, ValueError) as e:
        _print({"error": f"{type(e).__name__}: {e}"})
        return 1
    return 0 if r.ok else 1


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Hello Microservice CLI")
    p.add_argument("--api", default=settings.api_url, help="API base URL")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_serve = sub.add_parser("serve", help="Run the HTTP service")
    s_serve.add_argument("--host", default=settings.host)
    s_serve.add_argument("--port", type=int, default=settings.port)
    s_serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    s_hello = sub.add_parser("hello", help="Ask the service for a greeting")
    s_hello.add_argument("--name", default=None, help="Name to greet (service default: World)")

    sub.add_parser("version", help="Show service version info")

    s_probe = sub.add_parser("probe", help="Run a liveness/readiness probe")
    s_probe.add_argument("probe", choices=sorted(PROBES))

    args = p.parse_args(argv)

    base = args.api.rstrip("/")

    if args.cmd == "serve":
        from main import run

        run(host=args.host, port=args.port, reload=args.reload)
        return 0

    if args.cmd == "hello":
        params = {} if args.name is None else {"name": args.name}
        return _get_and_print(f"{base}/api/hello", params=params)

    if args.cmd == "version":
        return _get_and_print(f"{base}/api/version")

    if args.cmd == "probe":
        ok, msg, latency_ms = probe_service(base, args.probe)
        _print({"probe": args.probe, "healthy": ok, "message": msg, "latency_ms": latency_ms})
        return 0 if ok else 1

    return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

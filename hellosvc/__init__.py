"""Hello microservice.

Small HTTP service used as a deployment target:
 - greeting endpoint (/api/hello)
 - static version metadata (/api/version)
 - liveness and readiness probes (/health, /ready)

Every handler is a pure function of its request; nothing is shared between requests.
"""
from __future__ import annotations

from .version import DESCRIPTION, __version__

__all__ = ["DESCRIPTION", "__version__"]

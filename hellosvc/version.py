"""Release metadata reported by GET /api/version."""

__version__ = "1.1.0"

DESCRIPTION = "New /api/version endpoint added"

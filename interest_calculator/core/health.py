"""Health-check helpers for the API."""

from interest_calculator import __version__


def get_health_status() -> dict:
    """Return the service status and running version."""
    return {"status": "ok", "version": __version__}

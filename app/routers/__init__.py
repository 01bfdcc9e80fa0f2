"""API routers module."""

from . import dashboard, health, reports

__all__ = [
    "dashboard",
    "health",
    "reports",
]

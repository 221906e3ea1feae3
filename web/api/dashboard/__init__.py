"""Dashboard API."""

from web.api.dashboard.views import get_deadlines, get_overview

__all__ = [
    "get_overview",
    "get_deadlines",
]

"""Nominations API."""

from web.api.nominations.views import (
    apply,
    close_nomination,
    create_nomination,
    delete_nomination,
    get_applications,
    get_candidates,
    get_nomination,
    get_nominations,
    set_application_status,
    update_nomination_status,
)

__all__ = [
    "get_nomination",
    "get_nominations",
    "create_nomination",
    "update_nomination_status",
    "close_nomination",
    "delete_nomination",
    "apply",
    "set_application_status",
    "get_applications",
    "get_candidates",
]

"""Nomination services."""

from app.services.nominations.lifecycle import NominationLifecycle

__all__ = [
    "NominationLifecycle",
]

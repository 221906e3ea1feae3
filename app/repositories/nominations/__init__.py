"""Nomination repositories."""

from app.repositories.nominations.application import ApplicationRepository
from app.repositories.nominations.nomination import NominationRepository

__all__ = [
    "ApplicationRepository",
    "NominationRepository",
]

"""Club services."""

from app.services.clubs.membership import MembershipRegistry
from app.services.clubs.positions import ClubPositionCatalog

__all__ = [
    "ClubPositionCatalog",
    "MembershipRegistry",
]

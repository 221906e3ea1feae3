"""Club repositories."""

from app.repositories.clubs.club import ClubRepository
from app.repositories.clubs.member import MemberRepository

__all__ = [
    "ClubRepository",
    "MemberRepository",
]

"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.clubs import ClubRepository, MemberRepository
from app.repositories.common import ActivityRepository
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    init_tables,
    reconnect_db,
    release,
    thread_cursor,
    transaction,
)
from app.repositories.nominations import ApplicationRepository, NominationRepository
from app.repositories.voting import VoteRepository, VotingEventRepository, WinnerRepository

__all__ = [
    # DB
    "connect",
    "get_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    "transaction",
    "thread_cursor",
    "release",
    # Base
    "BaseRepository",
    # Common
    "ActivityRepository",
    # Clubs
    "ClubRepository",
    "MemberRepository",
    # Nominations
    "NominationRepository",
    "ApplicationRepository",
    # Voting
    "VotingEventRepository",
    "VoteRepository",
    "WinnerRepository",
]

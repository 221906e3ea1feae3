"""Voting repositories."""

from app.repositories.voting.event import VotingEventRepository
from app.repositories.voting.vote import VoteRepository
from app.repositories.voting.winner import WinnerRepository

__all__ = [
    "VotingEventRepository",
    "VoteRepository",
    "WinnerRepository",
]

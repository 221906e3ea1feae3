"""Voting services."""

from app.services.voting.ballots import BallotRecorder
from app.services.voting.lifecycle import VotingEventLifecycle
from app.services.voting.winners import WinnerResolver

__all__ = [
    "BallotRecorder",
    "VotingEventLifecycle",
    "WinnerResolver",
]

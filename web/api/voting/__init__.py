"""Voting API."""

from web.api.voting.views import (
    cast_vote,
    close_voting_event,
    create_voting_event,
    delete_voting_event,
    get_ballot,
    get_results,
    get_stats,
    get_voting_event,
    get_voting_events,
    get_winners,
    resolve_winners,
    update_voting_event,
    update_voting_event_status,
)

__all__ = [
    "get_voting_event",
    "get_voting_events",
    "create_voting_event",
    "update_voting_event",
    "update_voting_event_status",
    "close_voting_event",
    "delete_voting_event",
    "cast_vote",
    "get_ballot",
    "get_results",
    "get_winners",
    "resolve_winners",
    "get_stats",
]

"""Voting API views - thin layer over services."""

from datetime import datetime

from app.container import container
from app.models.voting import NominationWinner, VotingEventStatus
from app.services.common import Permission
from web.api.errors import require_permission

from .schemas import (
    BallotResponse,
    PositionResultItem,
    ResultsResponse,
    StatsResponse,
    TallyItem,
    VoteResponse,
    VotingEventResponse,
    VotingEventsResponse,
    WinnerItem,
    WinnersResponse,
)


def _winners_response(event_id: int, winners: list[NominationWinner]) -> WinnersResponse:
    items = [
        WinnerItem(
            club_position_id=w.club_position_id,
            nomination_application_id=w.nomination_application_id,
            winner_id=w.winner_id,
            votes_count=w.votes_count,
            is_tie_resolved=w.is_tie_resolved,
        )
        for w in winners
    ]
    return WinnersResponse(voting_event_id=event_id, items=items)


def get_voting_event(event_id: int) -> VotingEventResponse:
    """Get one voting event."""
    return VotingEventResponse(**container.voting_events.get(event_id).to_dict())


def get_voting_events(club_id: int) -> VotingEventsResponse:
    """Get all voting events of a club, newest first."""
    items = [VotingEventResponse(**e.to_dict()) for e in container.voting_events.list_for_club(club_id)]
    return VotingEventsResponse(club_id=club_id, items=items)


def create_voting_event(
    actor_id: int,
    club_id: int,
    title: str,
    start_date: datetime,
    end_date: datetime,
    status: str = VotingEventStatus.DRAFT,
    description: str | None = None,
) -> VotingEventResponse:
    """Create a voting event for a club."""
    require_permission(actor_id, Permission.CREATE_VOTING_EVENTS)
    event = container.voting_events.create(
        club_id, title, start_date, end_date, status=status, description=description, actor_id=actor_id
    )
    return VotingEventResponse(**event.to_dict())


def update_voting_event(
    actor_id: int,
    event_id: int,
    title: str,
    start_date: datetime,
    end_date: datetime,
    club_id: int | None = None,
    description: str | None = None,
) -> VotingEventResponse:
    """Edit a draft or active voting event."""
    require_permission(actor_id, Permission.EDIT_VOTING_EVENTS)
    event = container.voting_events.update(
        event_id, title, start_date, end_date, club_id=club_id, description=description, actor_id=actor_id
    )
    return VotingEventResponse(**event.to_dict())


def update_voting_event_status(
    actor_id: int,
    event_id: int,
    status: str,
    manual_winners: dict[int, int] | None = None,
) -> VotingEventResponse:
    """Move a voting event to another status; closing resolves winners."""
    require_permission(actor_id, Permission.EDIT_VOTING_EVENTS)
    event = container.voting_events.update_status(
        event_id, status, manual_winners=manual_winners, actor_id=actor_id
    )
    return VotingEventResponse(**event.to_dict())


def close_voting_event(
    actor_id: int,
    event_id: int,
    manual_winners: dict[int, int] | None = None,
) -> WinnersResponse:
    """Close a voting event and return its winners."""
    require_permission(actor_id, Permission.EDIT_VOTING_EVENTS)
    winners = container.voting_events.close(event_id, manual_winners=manual_winners, actor_id=actor_id)
    return _winners_response(event_id, winners)


def delete_voting_event(actor_id: int, event_id: int) -> None:
    """Delete a draft voting event without votes."""
    require_permission(actor_id, Permission.DELETE_VOTING_EVENTS)
    container.voting_events.delete(event_id, actor_id=actor_id)


def cast_vote(actor_id: int, event_id: int, application_id: int) -> VoteResponse:
    """Record the acting user's vote for a candidate."""
    vote = container.ballots.cast_vote(event_id, actor_id, application_id)
    return VoteResponse(**vote.to_dict())


def get_ballot(actor_id: int, event_id: int) -> BallotResponse:
    """Get the acting user's choices in a voting event."""
    return BallotResponse(
        voting_event_id=event_id,
        user_id=actor_id,
        voted_candidates=container.ballots.voted_candidates(event_id, actor_id),
        has_voted_all=container.ballots.has_voted_all(event_id, actor_id),
    )


def get_results(actor_id: int, event_id: int) -> ResultsResponse:
    """Get current standings and ties of a voting event."""
    require_permission(actor_id, Permission.VIEW_VOTING_EVENTS)
    items = [
        PositionResultItem(
            club_position_id=r.club_position_id,
            tally=[TallyItem(nomination_application_id=t.nomination_application_id, votes=t.votes) for t in r.tally],
            leaders=r.leaders,
            is_tie=r.is_tie,
        )
        for r in container.winners.preview(event_id)
    ]
    return ResultsResponse(voting_event_id=event_id, items=items)


def get_winners(event_id: int) -> WinnersResponse:
    """Get the stored winners of a voting event."""
    return _winners_response(event_id, container.winners.winners(event_id))


def resolve_winners(
    actor_id: int,
    event_id: int,
    manual_winners: dict[int, int] | None = None,
) -> WinnersResponse:
    """Recompute the winners of a closed voting event."""
    require_permission(actor_id, Permission.EDIT_VOTING_EVENTS)
    winners = container.winners.resolve_all(event_id, manual_winners=manual_winners, actor_id=actor_id)
    return _winners_response(event_id, winners)


def get_stats(actor_id: int, event_id: int) -> StatsResponse:
    """Get turnout figures of a voting event."""
    require_permission(actor_id, Permission.VIEW_VOTING_EVENTS)
    return StatsResponse(**container.voting_events.stats(event_id).to_dict())

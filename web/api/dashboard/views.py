"""Dashboard API views - thin layer over services."""

from datetime import timedelta

from app.container import container
from web.api.clubs.schemas import ClubResponse, HolderItem, PositionItem
from web.api.nominations.schemas import NominationResponse
from web.api.voting.schemas import VotingEventResponse

from .schemas import DeadlineItem, DeadlinesResponse, OverviewResponse


def get_overview(club_id: int) -> OverviewResponse:
    """Get dashboard overview for a club."""
    data = container.dashboard.club_overview(club_id)
    club = data["club"]
    nomination = data["active_nomination"]
    event = data["open_voting_event"]

    return OverviewResponse(
        club=ClubResponse(
            id=club.id,
            name=club.name,
            description=club.description,
            status=club.status,
            join_fee=club.join_fee,
            created_at=club.created_at,
            positions=[
                PositionItem(id=p.id, name=p.name, description=p.description, is_active=p.is_active)
                for p in data["positions"]
            ],
        ),
        members=data["members"],
        holders=[HolderItem(**h.to_dict()) for h in data["holders"]],
        active_nomination=NominationResponse(**nomination.to_dict()) if nomination else None,
        open_voting_event=VotingEventResponse(**event.to_dict()) if event else None,
    )


def get_deadlines(hours: int | None = None) -> DeadlinesResponse:
    """Get nominations and voting events starting or ending soon."""
    horizon = timedelta(hours=hours) if hours is not None else None
    items = [DeadlineItem(**d) for d in container.dashboard.upcoming_deadlines(horizon=horizon)]
    return DeadlinesResponse(items=items)

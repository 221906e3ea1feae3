"""Nominations API views - thin layer over services."""

from datetime import datetime

from app.container import container
from app.models.nominations import NominationStatus
from app.services.common import Permission
from web.api.errors import require_permission

from .schemas import ApplicationResponse, ApplicationsResponse, NominationResponse, NominationsResponse


def get_nomination(nomination_id: int) -> NominationResponse:
    """Get one nomination."""
    return NominationResponse(**container.nominations.get(nomination_id).to_dict())


def get_nominations(club_id: int) -> NominationsResponse:
    """Get all nominations of a club, newest first."""
    items = [NominationResponse(**n.to_dict()) for n in container.nominations.list_for_club(club_id)]
    return NominationsResponse(club_id=club_id, items=items)


def create_nomination(
    actor_id: int,
    club_id: int,
    title: str,
    start_date: datetime,
    end_date: datetime,
    description: str | None = None,
    status: str = NominationStatus.ACTIVE,
    max_applicants: int | None = None,
) -> NominationResponse:
    """Open a nomination for a club."""
    require_permission(actor_id, Permission.CREATE_NOMINATIONS)
    nomination = container.nominations.open(
        club_id,
        title,
        start_date,
        end_date,
        description=description,
        status=status,
        max_applicants=max_applicants,
        actor_id=actor_id,
    )
    return NominationResponse(**nomination.to_dict())


def update_nomination_status(actor_id: int, nomination_id: int, status: str) -> NominationResponse:
    """Move a nomination to another status."""
    require_permission(actor_id, Permission.EDIT_NOMINATIONS)
    nomination = container.nominations.update_status(nomination_id, status, actor_id=actor_id)
    return NominationResponse(**nomination.to_dict())


def close_nomination(actor_id: int, nomination_id: int) -> NominationResponse:
    """Close a nomination."""
    require_permission(actor_id, Permission.EDIT_NOMINATIONS)
    return NominationResponse(**container.nominations.close(nomination_id, actor_id=actor_id).to_dict())


def delete_nomination(actor_id: int, nomination_id: int) -> None:
    """Delete a nomination that has no applications."""
    require_permission(actor_id, Permission.DELETE_NOMINATIONS)
    container.nominations.delete(nomination_id, actor_id=actor_id)


def apply(
    actor_id: int,
    nomination_id: int,
    position_id: int,
    statement: str | None = None,
) -> ApplicationResponse:
    """Submit a candidacy for the acting user."""
    application = container.nominations.apply(nomination_id, actor_id, position_id, statement)
    return ApplicationResponse(**application.to_dict())


def set_application_status(
    actor_id: int,
    application_id: int,
    status: str,
    admin_notes: str | None = None,
) -> ApplicationResponse:
    """Approve or reject an application."""
    require_permission(actor_id, Permission.EDIT_NOMINATION_APPLICATIONS)
    application = container.nominations.set_application_status(
        application_id, status, admin_notes=admin_notes, actor_id=actor_id
    )
    return ApplicationResponse(**application.to_dict())


def get_applications(nomination_id: int, status: str | None = None) -> ApplicationsResponse:
    """Get the applications of a nomination."""
    items = [ApplicationResponse(**a.to_dict()) for a in container.nominations.applications(nomination_id, status)]
    return ApplicationsResponse(nomination_id=nomination_id, items=items)


def get_candidates(nomination_id: int) -> ApplicationsResponse:
    """Get the approved candidates of a nomination."""
    items = [ApplicationResponse(**a.to_dict()) for a in container.nominations.candidates(nomination_id)]
    return ApplicationsResponse(nomination_id=nomination_id, items=items)

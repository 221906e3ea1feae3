"""Services package - service class exports."""

from app.services.clubs import ClubPositionCatalog, MembershipRegistry
from app.services.common import ActivityLog, Authorizer, GrantAuthorizer
from app.services.dashboard import DashboardService
from app.services.nominations import NominationLifecycle
from app.services.voting import BallotRecorder, VotingEventLifecycle, WinnerResolver

__all__ = [
    "ActivityLog",
    "Authorizer",
    "BallotRecorder",
    "ClubPositionCatalog",
    "DashboardService",
    "GrantAuthorizer",
    "MembershipRegistry",
    "NominationLifecycle",
    "VotingEventLifecycle",
    "WinnerResolver",
]

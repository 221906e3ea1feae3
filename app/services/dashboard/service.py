"""Dashboard service."""

from datetime import datetime, timedelta

from app.errors import NotFoundError
from app.models.common import utcnow
from app.repositories.clubs import ClubRepository, MemberRepository
from app.repositories.nominations import NominationRepository
from app.repositories.voting import VotingEventRepository
from app.services.clubs import ClubPositionCatalog
from settings import REMINDER_HORIZON_HOURS


class DashboardService:
    """Dashboard business logic."""

    def __init__(
        self,
        club_repo: ClubRepository,
        member_repo: MemberRepository,
        nomination_repo: NominationRepository,
        event_repo: VotingEventRepository,
        catalog: ClubPositionCatalog,
    ):
        self._clubs = club_repo
        self._members = member_repo
        self._nominations = nomination_repo
        self._events = event_repo
        self._catalog = catalog

    def club_overview(self, club_id: int) -> dict:
        """Get the overview of one club."""
        club = self._clubs.get(club_id)
        if club is None:
            raise NotFoundError(f"Club {club_id} not found")

        return {
            "club": club,
            "members": self._members.count_by_status(club_id),
            "positions": self._clubs.get_positions(club_id),
            "holders": self._catalog.current_holders(club_id),
            "active_nomination": self._nominations.find_active(club_id),
            "open_voting_event": self._events.find_open(club_id),
        }

    def upcoming_deadlines(self, now: datetime | None = None, horizon: timedelta | None = None) -> list[dict]:
        """Nominations and voting events starting or ending within the horizon.

        Each item names the kind of deadline so a reminder scheduler can word
        its message; items are ordered by the moment they fall due.
        """
        now = now or utcnow()
        until = now + (horizon or timedelta(hours=REMINDER_HORIZON_HOURS))

        items = []
        for kind, rows in (
            ("nomination", self._nominations.list_with_deadline_between(now, until)),
            ("voting_event", self._events.list_with_deadline_between(now, until)),
        ):
            for row in rows:
                for edge, moment in (("starts", row.start_date), ("ends", row.end_date)):
                    if now <= moment <= until:
                        items.append(
                            {
                                "kind": kind,
                                "id": row.id,
                                "club_id": row.club_id,
                                "title": row.title,
                                "edge": edge,
                                "at": moment,
                            }
                        )

        items.sort(key=lambda i: (i["at"], i["kind"], i["id"]))
        return items

"""Membership registry - who belongs to a club and in which standing."""

from loguru import logger

from app.errors import NotFoundError, ValidationError
from app.models.clubs import ClubMember, MemberStatus
from app.models.common import utcnow
from app.repositories.clubs import ClubRepository, MemberRepository
from app.services.common import ActivityLog

SETTABLE_STATUSES = {MemberStatus.PENDING, MemberStatus.ACTIVE, MemberStatus.INACTIVE, MemberStatus.BANNED}


class MembershipRegistry:
    """Club membership status and manual seat assignment.

    Permission checks are the caller's concern; only domain rules live here.
    """

    def __init__(self, club_repo: ClubRepository, member_repo: MemberRepository, activity: ActivityLog):
        self._clubs = club_repo
        self._members = member_repo
        self._activity = activity

    def _club(self, club_id: int):
        club = self._clubs.get(club_id)
        if club is None:
            raise NotFoundError(f"Club {club_id} not found")
        return club

    def _member(self, club_id: int, user_id: int) -> ClubMember:
        member = self._members.get(club_id, user_id)
        if member is None:
            raise NotFoundError(f"User {user_id} is not a member of club {club_id}")
        return member

    def status_of(self, club_id: int, user_id: int) -> MemberStatus:
        member = self._members.get(club_id, user_id)
        return MemberStatus(member.status) if member else MemberStatus.NONE

    def is_active(self, club_id: int, user_id: int) -> bool:
        return self.status_of(club_id, user_id) == MemberStatus.ACTIVE

    def join(self, club_id: int, user_id: int, status: str = MemberStatus.PENDING) -> ClubMember:
        """Add a user to a club, pending approval by default."""
        club = self._club(club_id)
        if status not in SETTABLE_STATUSES:
            raise ValidationError(f"Invalid member status: {status}")

        self._members.add(club_id, user_id, status, utcnow())
        self._activity.record(user_id, f"Requested to join {club.name}", "club")
        return self._member(club_id, user_id)

    def set_status(self, club_id: int, user_id: int, status: str, actor_id: int | None = None) -> ClubMember:
        club = self._club(club_id)
        if status not in SETTABLE_STATUSES:
            raise ValidationError(f"Invalid member status: {status}")
        self._member(club_id, user_id)

        self._members.set_status(club_id, user_id, status)
        logger.info("Club {}: user {} is now {}", club_id, user_id, status)
        self._activity.record(actor_id, f"Updated the status of user {user_id} in {club.name} to {status}", "club")
        return self._member(club_id, user_id)

    def assign_position(
        self,
        club_id: int,
        user_id: int,
        position_id: int | None,
        actor_id: int | None = None,
    ) -> ClubMember:
        """Manually seat a member; None clears the assignment."""
        club = self._club(club_id)
        self._member(club_id, user_id)

        if position_id is not None:
            position = self._clubs.get_position(position_id)
            if position is None or position.club_id != club_id:
                raise ValidationError("The selected position does not belong to this club.")

        self._members.set_position(club_id, user_id, position_id)
        self._activity.record(actor_id, f"Updated the position of user {user_id} in {club.name}", "club")
        return self._member(club_id, user_id)

    def remove_member(self, club_id: int, user_id: int, actor_id: int | None = None) -> None:
        club = self._club(club_id)
        self._member(club_id, user_id)
        self._members.remove(club_id, user_id)
        self._activity.record(actor_id, f"Removed user {user_id} from {club.name}", "club")

    def members(self, club_id: int, status: str | None = None) -> list[ClubMember]:
        self._club(club_id)
        return self._members.list_members(club_id, status)

    def active_member_count(self, club_id: int) -> int:
        return self._members.count_active(club_id)

    def counts_by_status(self, club_id: int) -> dict[str, int]:
        return self._members.count_by_status(club_id)

"""Club position catalog - clubs, their seats and current seat holders."""

from decimal import Decimal, InvalidOperation

from loguru import logger

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import Club, ClubPosition, ClubStatus, CurrentHolder, HolderSource, PositionSpec
from app.models.common import utcnow
from app.repositories.clubs import ClubRepository, MemberRepository
from app.repositories.nominations import NominationRepository
from app.repositories.voting import VotingEventRepository, WinnerRepository
from app.services.common import ActivityLog

PositionInput = PositionSpec | str | dict


def _normalize(position: PositionInput) -> PositionSpec:
    if isinstance(position, PositionSpec):
        item = position
    elif isinstance(position, str):
        item = PositionSpec(name=position)
    else:
        item = PositionSpec(
            name=position.get("name") or "",
            description=position.get("description"),
            is_active=bool(position.get("is_active", True)),
        )

    name = (item.name or "").strip()
    if not name:
        raise ValidationError("Position name is required.")
    return PositionSpec(name=name, description=item.description, is_active=item.is_active)


def _to_fee(join_fee) -> Decimal:
    try:
        fee = Decimal(str(join_fee))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid join fee: {join_fee}") from e
    if fee < 0:
        raise ValidationError("Join fee cannot be negative.")
    return fee


def _check_status(status: str) -> str:
    if status not in {s.value for s in ClubStatus}:
        raise ValidationError(f"Invalid club status: {status}")
    return status


class ClubPositionCatalog:
    """Clubs and the named seats they elect members into."""

    def __init__(
        self,
        club_repo: ClubRepository,
        member_repo: MemberRepository,
        nomination_repo: NominationRepository,
        event_repo: VotingEventRepository,
        winner_repo: WinnerRepository,
        activity: ActivityLog,
    ):
        self._clubs = club_repo
        self._members = member_repo
        self._nominations = nomination_repo
        self._events = event_repo
        self._winners = winner_repo
        self._activity = activity

    def get_club(self, club_id: int) -> Club:
        club = self._clubs.get(club_id)
        if club is None:
            raise NotFoundError(f"Club {club_id} not found")
        return club

    def create_club(
        self,
        name: str,
        join_fee=0,
        positions: list[PositionInput] | None = None,
        status: str = ClubStatus.ACTIVE,
        description: str | None = None,
        actor_id: int | None = None,
    ) -> Club:
        """Create a club together with its initial position list."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Club name is required.")
        fee = _to_fee(join_fee)
        status = _check_status(status)
        specs = [_normalize(p) for p in positions or []]

        now = utcnow()
        with self._clubs.transaction():
            club_id = self._clubs.create(name, status, fee, now, description)
            self._clubs.insert_positions(club_id, specs, now)

        self._activity.record(actor_id, f"Created club {name}", "club")
        return self.get_club(club_id)

    def update_club(
        self,
        club_id: int,
        name: str | None = None,
        status: str | None = None,
        join_fee=None,
        description: str | None = None,
        positions: list[PositionInput] | None = None,
        actor_id: int | None = None,
    ) -> Club:
        """Update club details; a given position list replaces the current one."""
        club = self.get_club(club_id)

        fields = {}
        if name is not None:
            if not name.strip():
                raise ValidationError("Club name is required.")
            fields["name"] = name.strip()
        if status is not None:
            fields["status"] = _check_status(status)
        if join_fee is not None:
            fields["join_fee"] = _to_fee(join_fee)
        if description is not None:
            fields["description"] = description

        specs = [_normalize(p) for p in positions] if positions is not None else None

        with self._clubs.transaction():
            self._clubs.update(club_id, **fields)
            if specs is not None:
                self._swap_positions(club_id, specs)

        self._activity.record(actor_id, f"Updated club {fields.get('name', club.name)}", "club")
        return self.get_club(club_id)

    def positions(self, club_id: int, active_only: bool = False) -> list[ClubPosition]:
        self.get_club(club_id)
        return self._clubs.get_positions(club_id, active_only)

    def replace_positions(
        self,
        club_id: int,
        positions: list[PositionInput],
        actor_id: int | None = None,
    ) -> list[ClubPosition]:
        """Delete every position of the club and insert the given list, atomically.

        Manual seat assignments pointing at the removed positions are cleared.
        Refused while a nomination or voting event references the current seats.
        """
        club = self.get_club(club_id)
        specs = [_normalize(p) for p in positions]

        with self._clubs.transaction():
            self._swap_positions(club_id, specs)

        self._activity.record(actor_id, f"Replaced positions of {club.name}", "club")
        return self._clubs.get_positions(club_id)

    def _swap_positions(self, club_id: int, specs: list[PositionSpec]) -> None:
        """Replace the position rows of a club; the caller owns the transaction."""
        if self._nominations.find_active(club_id):
            raise ConflictError("Positions cannot be replaced while the club has an active nomination.")
        if self._events.find_open(club_id):
            raise ConflictError("Positions cannot be replaced while the club has an active or draft voting event.")

        removed = self._clubs.delete_positions(club_id)
        self._members.clear_positions(club_id)
        self._clubs.insert_positions(club_id, specs, utcnow())
        logger.info("Club {}: replaced {} positions with {}", club_id, len(removed), len(specs))

    def current_holders(self, club_id: int) -> list[CurrentHolder]:
        """Holder of every active position.

        The winner from the club's latest closed voting event takes precedence;
        otherwise the member manually assigned to the seat, if any.
        """
        self.get_club(club_id)
        latest = self._events.latest_closed(club_id)

        holders = []
        for position in self._clubs.get_positions(club_id, active_only=True):
            winner = self._winners.get_for_position(latest.id, position.id) if latest else None
            if winner:
                holders.append(
                    CurrentHolder(
                        position_id=position.id,
                        position_name=position.name,
                        user_id=winner.winner_id,
                        source=HolderSource.ELECTION,
                        voting_event_id=latest.id,
                        votes_count=winner.votes_count,
                    )
                )
                continue

            user_id = self._members.manual_holder(club_id, position.id)
            holders.append(
                CurrentHolder(
                    position_id=position.id,
                    position_name=position.name,
                    user_id=user_id,
                    source=HolderSource.MANUAL if user_id is not None else None,
                )
            )
        return holders

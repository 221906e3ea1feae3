"""Voting event lifecycle - when a club's election is open, and closing it."""

from datetime import datetime

import duckdb
from loguru import logger

from app.errors import ClubVoteError, ConflictError, NotFoundError, ValidationError
from app.models.clubs import ClubStatus
from app.models.common import utcnow
from app.models.voting import NominationWinner, VotingEvent, VotingEventStatus, VotingStats
from app.repositories.clubs import ClubRepository, MemberRepository
from app.repositories.nominations import NominationRepository
from app.repositories.voting import VoteRepository, VotingEventRepository
from app.repositories.voting.event import OPEN_EVENT_CONFLICT
from app.services.common import ActivityLog, validate_window
from app.services.voting.winners import WinnerResolver

CREATABLE_STATUSES = {VotingEventStatus.DRAFT, VotingEventStatus.ACTIVE}

ACTIVE_NOMINATION_CONFLICT = (
    "This club has an active nomination. Please close the nomination before creating a voting event."
)
NO_NOMINATION_CONFLICT = (
    "This club has no nominations. Please create a nomination before creating a voting event."
)


class VotingEventLifecycle:
    """Voting events move draft -> active -> closed -> archived.

    A club has at most one draft-or-active event, and none while it has an
    active nomination. Closing is the single point where winners are computed.
    """

    def __init__(
        self,
        event_repo: VotingEventRepository,
        nomination_repo: NominationRepository,
        club_repo: ClubRepository,
        member_repo: MemberRepository,
        vote_repo: VoteRepository,
        resolver: WinnerResolver,
        activity: ActivityLog,
    ):
        self._events = event_repo
        self._nominations = nomination_repo
        self._clubs = club_repo
        self._members = member_repo
        self._votes = vote_repo
        self._resolver = resolver
        self._activity = activity

    def get(self, event_id: int) -> VotingEvent:
        event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"Voting event {event_id} not found")
        return event

    def list_for_club(self, club_id: int) -> list[VotingEvent]:
        return self._events.list_for_club(club_id)

    def _check_club(self, club_id: int) -> None:
        club = self._clubs.get(club_id)
        if club is None:
            raise NotFoundError(f"Club {club_id} not found")
        if club.status != ClubStatus.ACTIVE:
            raise ValidationError("Voting events can only be created for active clubs.")

    def _roster_for(self, club_id: int) -> int:
        """Nomination whose approved candidates stand in the club's next event."""
        if self._nominations.find_active(club_id):
            raise ConflictError(ACTIVE_NOMINATION_CONFLICT)
        nomination = self._nominations.latest_finished(club_id)
        if nomination is None:
            raise ConflictError(NO_NOMINATION_CONFLICT)
        return nomination.id

    def create(
        self,
        club_id: int,
        title: str,
        start_date: datetime,
        end_date: datetime,
        status: str = VotingEventStatus.DRAFT,
        description: str | None = None,
        actor_id: int | None = None,
    ) -> VotingEvent:
        title = validate_window(title, start_date, end_date)
        if status not in CREATABLE_STATUSES:
            raise ValidationError(f"A voting event cannot be created with status {status}.")
        self._check_club(club_id)

        with self._events.transaction():
            nomination_id = self._roster_for(club_id)
            if self._events.find_open(club_id):
                raise ConflictError(OPEN_EVENT_CONFLICT)
            event_id = self._events.create(
                club_id,
                nomination_id,
                title,
                start_date,
                end_date,
                status,
                utcnow(),
                description=description,
            )

        self._activity.record(actor_id, f"Created Voting Event: {title}", "voting_event")
        return self.get(event_id)

    def update(
        self,
        event_id: int,
        title: str,
        start_date: datetime,
        end_date: datetime,
        club_id: int | None = None,
        description: str | None = None,
        actor_id: int | None = None,
    ) -> VotingEvent:
        """Edit an event; moving it to another club re-checks that club."""
        title = validate_window(title, start_date, end_date)
        event = self.get(event_id)
        if event.status in (VotingEventStatus.CLOSED, VotingEventStatus.ARCHIVED):
            raise ConflictError("Closed or archived voting events cannot be edited.")

        club_id = club_id if club_id is not None else event.club_id
        if club_id != event.club_id:
            self._check_club(club_id)

        with self._events.transaction():
            if club_id != event.club_id:
                nomination_id = self._roster_for(club_id)
                if self._events.find_open(club_id, exclude_id=event.id):
                    raise ConflictError(
                        "The selected club already has an active or draft voting event. "
                        "Please close the voting event before creating a new one."
                    )
            else:
                if self._nominations.find_active(club_id):
                    raise ConflictError(ACTIVE_NOMINATION_CONFLICT)
                nomination_id = event.nomination_id
            self._events.update(event, club_id, nomination_id, title, description, start_date, end_date)

        self._activity.record(actor_id, f"Updated Voting Event: {title}", "voting_event")
        return self.get(event_id)

    def update_status(
        self,
        event_id: int,
        status: str,
        manual_winners: dict[int, int] | None = None,
        actor_id: int | None = None,
    ) -> VotingEvent:
        if status not in {s.value for s in VotingEventStatus}:
            raise ValidationError(f"Invalid voting event status: {status}")

        event = self.get(event_id)
        if event.status == status:
            return event
        if event.status in (VotingEventStatus.CLOSED, VotingEventStatus.ARCHIVED) and not (
            event.status == VotingEventStatus.CLOSED and status == VotingEventStatus.ARCHIVED
        ):
            raise ConflictError(
                "Closed or archived voting events cannot be changed to any other status. "
                "Please create a new voting event instead."
            )

        if status == VotingEventStatus.CLOSED:
            self.close(event_id, manual_winners=manual_winners, actor_id=actor_id)
            return self.get(event_id)

        with self._events.transaction():
            if status in CREATABLE_STATUSES and self._nominations.find_active(event.club_id):
                raise ConflictError(ACTIVE_NOMINATION_CONFLICT)
            self._events.set_status(event, status)

        logger.info("Voting event {}: {} -> {}", event_id, event.status, status)
        self._activity.record(
            actor_id,
            f"Updated Voting Event Status: {event.title} from {event.status} to {status}",
            "voting_event",
        )
        return self.get(event_id)

    def close(
        self,
        event_id: int,
        manual_winners: dict[int, int] | None = None,
        actor_id: int | None = None,
        now: datetime | None = None,
    ) -> list[NominationWinner]:
        """Close the event and persist its winners in one transaction.

        Closing an already closed event returns the stored winners untouched.
        """
        event = self.get(event_id)
        if event.status == VotingEventStatus.CLOSED:
            logger.debug("Voting event {} already closed", event_id)
            return self._resolver.winners(event_id)
        if event.status == VotingEventStatus.ARCHIVED:
            raise ConflictError("Archived voting events cannot be closed.")

        with self._events.transaction():
            self._events.set_status(event, VotingEventStatus.CLOSED, closed_at=now or utcnow())
            winners = self._resolver.persist(self.get(event_id), manual_winners)

        logger.info("Voting event {} closed with {} winners", event_id, len(winners))
        self._activity.record(actor_id, f"Closed Voting Event: {event.title}", "voting_event")
        self._resolver.record_winners(event, winners, actor_id)
        return winners

    def delete(self, event_id: int, actor_id: int | None = None) -> None:
        """Delete a draft event that has no votes."""
        event = self.get(event_id)
        with self._events.transaction():
            if event.status != VotingEventStatus.DRAFT or self._votes.count_for_event(event_id):
                raise ConflictError("Only draft voting events without votes can be deleted.")
            self._events.delete(event_id)
        self._activity.record(actor_id, f"Deleted Voting Event: {event.title}", "voting_event")

    def close_expired(self, now: datetime | None = None) -> list[int]:
        """Close every active event past its end date, one transaction each."""
        now = now or utcnow()
        expired = self._events.list_expired(now)
        if not expired:
            logger.info("No expired voting events found")
            return []

        closed = []
        for event in expired:
            logger.info("Processing voting event: {} (ID: {})", event.title, event.id)
            try:
                self.close(event.id, now=now)
            except (ClubVoteError, duckdb.Error) as e:
                logger.error("Error processing voting event {}: {}", event.id, e)
                continue
            closed.append(event.id)
            self._activity.record(
                None,
                f"Automatically closed voting event: {event.title} and recorded winners",
                "system",
            )

        logger.info("Successfully processed {} expired voting events", len(closed))
        return closed

    def stats(self, event_id: int, now: datetime | None = None) -> VotingStats:
        """Turnout figures: distinct voters over active members."""
        now = now or utcnow()
        event = self.get(event_id)
        roster = self._resolver.roster(event)

        eligible = self._members.count_active(event.club_id)
        voters = self._votes.count_voters(event_id)
        turnout = round(voters / eligible * 100, 1) if eligible else 0.0

        return VotingStats(
            voting_event_id=event_id,
            total_votes=self._votes.count_for_event(event_id),
            eligible_voters=eligible,
            total_candidates=sum(len(c) for c in roster.values()),
            total_positions=len(roster),
            turnout_pct=turnout,
            is_expired=event.end_date < now,
        )

"""Ballot recorder - one vote per voter per position per voting event."""

from datetime import datetime

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import MemberStatus
from app.models.common import utcnow
from app.models.voting import Vote, VotingEvent, VotingEventStatus
from app.repositories.clubs import MemberRepository
from app.repositories.nominations import ApplicationRepository
from app.repositories.voting import VoteRepository, VotingEventRepository
from app.repositories.voting.vote import ALREADY_VOTED
from app.services.common import ActivityLog
from app.services.voting.winners import WinnerResolver


class BallotRecorder:
    """Records votes; a repeated vote for a position is rejected, never overwritten.

    A caller whose cast_vote outcome is unknown (e.g. a timeout) should check
    has_voted before trying again.
    """

    def __init__(
        self,
        event_repo: VotingEventRepository,
        application_repo: ApplicationRepository,
        vote_repo: VoteRepository,
        member_repo: MemberRepository,
        resolver: WinnerResolver,
        activity: ActivityLog,
    ):
        self._events = event_repo
        self._applications = application_repo
        self._votes = vote_repo
        self._members = member_repo
        self._resolver = resolver
        self._activity = activity

    def _event(self, event_id: int) -> VotingEvent:
        event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"Voting event {event_id} not found")
        return event

    def cast_vote(
        self,
        event_id: int,
        voter_id: int,
        application_id: int,
        now: datetime | None = None,
    ) -> Vote:
        now = now or utcnow()
        event = self._event(event_id)
        candidate = self._applications.get(application_id)
        if candidate is None:
            raise NotFoundError(f"Candidate {application_id} not found")
        position_id = candidate.club_position_id

        with self._votes.transaction():
            if self._votes.find_for_position(event_id, voter_id, position_id):
                raise ConflictError(ALREADY_VOTED)
            if not event.is_open_at(now):
                if event.status != VotingEventStatus.ACTIVE:
                    raise ValidationError("This voting event is not currently active.")
                raise ValidationError("Voting is not currently open for this event.")
            member = self._members.get(event.club_id, voter_id)
            if member is None or member.status != MemberStatus.ACTIVE:
                raise ValidationError("You are not a member of this club.")
            if candidate.nomination_id != event.nomination_id or not candidate.is_approved:
                raise ValidationError("The selected candidate is not standing in this voting event.")

            vote_id = self._votes.create(event_id, application_id, position_id, voter_id, now)

        self._activity.record(voter_id, f"Voted in {event.title}", "vote")
        return self._votes.get(vote_id)

    def has_voted(self, event_id: int, voter_id: int, position_id: int) -> bool:
        return self._votes.find_for_position(event_id, voter_id, position_id) is not None

    def voted_candidates(self, event_id: int, voter_id: int) -> list[int]:
        """Application ids the voter chose in this event."""
        self._event(event_id)
        return [v.nomination_application_id for v in self._votes.list_for_voter(event_id, voter_id)]

    def has_voted_all(self, event_id: int, voter_id: int) -> bool:
        """Whether the voter covered every position that has candidates."""
        event = self._event(event_id)
        positions = set(self._resolver.roster(event))
        if not positions:
            return False
        voted = {v.club_position_id for v in self._votes.list_for_voter(event_id, voter_id)}
        return positions <= voted

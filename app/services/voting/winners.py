"""Winner resolver - tallies per position and the winner of each seat."""

from collections import defaultdict

from loguru import logger

from app.errors import NotFoundError, ValidationError
from app.models.common import utcnow
from app.models.nominations import ApplicationStatus, NominationApplication
from app.models.voting import NominationWinner, PositionResult, TallyRow, VotingEvent, VotingEventStatus
from app.repositories.clubs import ClubRepository
from app.repositories.nominations import ApplicationRepository
from app.repositories.voting import VoteRepository, VotingEventRepository, WinnerRepository
from app.services.common import ActivityLog


class WinnerResolver:
    """Turns the votes of a voting event into one winner per position.

    The candidate with the most votes wins. When several candidates share the
    top count the seat is marked as a resolved tie and goes to an explicitly
    chosen leader, or else to the leader whose application came in first.
    Positions without approved candidates or without votes get no winner.
    """

    def __init__(
        self,
        event_repo: VotingEventRepository,
        vote_repo: VoteRepository,
        winner_repo: WinnerRepository,
        application_repo: ApplicationRepository,
        club_repo: ClubRepository,
        activity: ActivityLog,
    ):
        self._events = event_repo
        self._votes = vote_repo
        self._winners = winner_repo
        self._applications = application_repo
        self._clubs = club_repo
        self._activity = activity

    def _event(self, event_id: int) -> VotingEvent:
        event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"Voting event {event_id} not found")
        return event

    def roster(self, event: VotingEvent) -> dict[int, list[NominationApplication]]:
        """Approved candidates of the event's nomination, grouped by position."""
        if event.nomination_id is None:
            return {}
        by_position: dict[int, list[NominationApplication]] = defaultdict(list)
        for application in self._applications.list_for_nomination(event.nomination_id, ApplicationStatus.APPROVED):
            by_position[application.club_position_id].append(application)
        return dict(by_position)

    def tally(self, event_id: int, position_id: int) -> list[TallyRow]:
        """Votes per candidate for one position, most votes first."""
        self._event(event_id)
        return self._votes.tally(event_id, position_id)

    def _results(self, event: VotingEvent) -> list[PositionResult]:
        results = []
        for position_id, candidates in sorted(self.roster(event).items()):
            eligible = {c.id for c in candidates}
            rows = [r for r in self._votes.tally(event.id, position_id) if r.nomination_application_id in eligible]

            leaders = []
            if rows:
                top = rows[0].votes
                leaders = [r.nomination_application_id for r in rows if r.votes == top]
            results.append(PositionResult(club_position_id=position_id, tally=rows, leaders=leaders))
        return results

    def preview(self, event_id: int) -> list[PositionResult]:
        """Current standings and ties without persisting anything."""
        return self._results(self._event(event_id))

    def winners(self, event_id: int) -> list[NominationWinner]:
        self._event(event_id)
        return self._winners.list_for_event(event_id)

    def resolve_all(
        self,
        event_id: int,
        manual_winners: dict[int, int] | None = None,
        actor_id: int | None = None,
    ) -> list[NominationWinner]:
        """Recompute and replace the winners of a closed event in one transaction."""
        event = self._event(event_id)
        if event.status != VotingEventStatus.CLOSED:
            raise ValidationError("Winners can only be resolved for a closed voting event.")

        with self._events.transaction():
            winners = self.persist(event, manual_winners)

        self.record_winners(event, winners, actor_id)
        return winners

    def persist(self, event: VotingEvent, manual_winners: dict[int, int] | None = None) -> list[NominationWinner]:
        """Write the winner rows of an event; the caller owns the transaction.

        A tie choice stored by an earlier resolution survives recomputation as
        long as that candidate is still one of the tied leaders.
        """
        manual = {int(p): int(a) for p, a in (manual_winners or {}).items()}
        results = {r.club_position_id: r for r in self._results(event)}

        for position_id, application_id in manual.items():
            result = results.get(position_id)
            if result is None or not result.is_tie or application_id not in result.leaders:
                raise ValidationError(
                    f"Candidate {application_id} is not one of the tied leaders for position {position_id}."
                )

        previous = {w.club_position_id: w for w in self._winners.list_for_event(event.id)}
        candidates = {c.id: c for group in self.roster(event).values() for c in group}

        self._winners.delete_for_event(event.id)
        now = utcnow()
        for position_id, result in sorted(results.items()):
            if not result.leaders:
                logger.debug("Event {}: no votes for position {}", event.id, position_id)
                continue

            winner_id = result.leaders[0]
            if result.is_tie:
                prior = previous.get(position_id)
                if position_id in manual:
                    winner_id = manual[position_id]
                elif prior and prior.nomination_application_id in result.leaders:
                    winner_id = prior.nomination_application_id
                logger.warning(
                    "Event {}: tie for position {} between {} with {} votes each, seat goes to {}",
                    event.id,
                    position_id,
                    result.leaders,
                    result.top_votes,
                    winner_id,
                )

            self._winners.create(
                event.id,
                event.nomination_id,
                position_id,
                winner_id,
                candidates[winner_id].user_id,
                result.top_votes,
                result.is_tie,
                now,
            )

        winners = self._winners.list_for_event(event.id)
        logger.info("Event {}: {} winners resolved", event.id, len(winners))
        return winners

    def record_winners(self, event: VotingEvent, winners: list[NominationWinner], actor_id: int | None) -> None:
        """Activity entries for resolved winners; call after commit."""
        for winner in winners:
            position = self._clubs.get_position(winner.club_position_id)
            position_name = position.name if position else f"#{winner.club_position_id}"
            self._activity.record(
                actor_id,
                f"Set user {winner.winner_id} as the winner for position {position_name} "
                f"in {event.title} based on voting results",
                "club",
            )

"""Tests for the voting event lifecycle."""

from datetime import timedelta

import pytest

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import ClubStatus
from app.models.voting import VotingEventStatus
from conftest import add_members, make_club, make_event, make_roster, position_ids


@pytest.fixture
def club(c, now):
    """Club whose nomination has finished with one approved candidate."""
    club = make_club(c)
    add_members(c, club.id, [10, 11])
    make_roster(c, club.id, {10: position_ids(c, club.id)[0]}, now)
    return club


class TestCreate:
    def test_pins_latest_finished_nomination(self, c, club, now):
        nomination = c.nominations.list_for_club(club.id)[0]
        event = make_event(c, club.id, now, status=VotingEventStatus.DRAFT)
        assert event.nomination_id == nomination.id
        assert event.status == VotingEventStatus.DRAFT

    def test_second_open_event_conflicts(self, c, club, now):
        make_event(c, club.id, now, status=VotingEventStatus.DRAFT)
        with pytest.raises(ConflictError):
            make_event(c, club.id, now)

    def test_requires_finished_nomination(self, c, now):
        club = make_club(c)
        with pytest.raises(ConflictError):
            make_event(c, club.id, now)

    def test_blocked_by_active_nomination(self, c, club, now):
        c.nominations.open(club.id, "Second round", now, now + timedelta(days=1))
        with pytest.raises(ConflictError):
            make_event(c, club.id, now)
        assert c.voting_events.list_for_club(club.id) == []

    def test_inactive_club(self, c, club, now):
        c.catalog.update_club(club.id, status=ClubStatus.INACTIVE)
        with pytest.raises(ValidationError):
            make_event(c, club.id, now)

    def test_cannot_create_closed(self, c, club, now):
        with pytest.raises(ValidationError):
            make_event(c, club.id, now, status=VotingEventStatus.CLOSED)

    def test_end_before_start(self, c, club, now):
        with pytest.raises(ValidationError):
            c.voting_events.create(club.id, "Election", now, now - timedelta(hours=1))

    def test_new_event_after_close(self, c, club, now):
        event = make_event(c, club.id, now)
        c.voting_events.close(event.id, now=now)
        assert make_event(c, club.id, now, title="Rerun").status == VotingEventStatus.ACTIVE


class TestUpdate:
    def test_update_details(self, c, club, now):
        event = make_event(c, club.id, now)
        updated = c.voting_events.update(event.id, "Spring election", now, now + timedelta(days=3), description="AGM")
        assert updated.title == "Spring election"
        assert updated.description == "AGM"

    def test_move_to_club_with_open_event(self, c, club, now):
        other = make_club(c, name="Go Club")
        make_roster(c, other.id, {}, now)
        event = make_event(c, club.id, now)
        make_event(c, other.id, now)
        with pytest.raises(ConflictError):
            c.voting_events.update(event.id, "Moved", now, now + timedelta(days=1), club_id=other.id)

    def test_move_to_other_club(self, c, club, now):
        other = make_club(c, name="Go Club")
        nomination, _ = make_roster(c, other.id, {}, now)
        event = make_event(c, club.id, now)

        moved = c.voting_events.update(event.id, "Moved", now, now + timedelta(days=1), club_id=other.id)

        assert moved.club_id == other.id
        assert moved.nomination_id == nomination.id
        assert c.voting_events.list_for_club(club.id) == []

    def test_closed_event_is_frozen(self, c, club, now):
        event = make_event(c, club.id, now)
        c.voting_events.close(event.id, now=now)
        with pytest.raises(ConflictError):
            c.voting_events.update(event.id, "Late edit", now, now + timedelta(days=1))


class TestStatus:
    def test_draft_to_active(self, c, club, now):
        event = make_event(c, club.id, now, status=VotingEventStatus.DRAFT)
        assert c.voting_events.update_status(event.id, VotingEventStatus.ACTIVE).status == "active"

    def test_closing_via_status(self, c, club, now):
        event = make_event(c, club.id, now)
        closed = c.voting_events.update_status(event.id, VotingEventStatus.CLOSED)
        assert closed.status == VotingEventStatus.CLOSED
        assert closed.closed_at is not None

    def test_closed_to_archived(self, c, club, now):
        event = make_event(c, club.id, now)
        c.voting_events.close(event.id, now=now)
        assert c.voting_events.update_status(event.id, VotingEventStatus.ARCHIVED).status == "archived"

    def test_activation_blocked_by_active_nomination(self, c, club, now):
        event = make_event(c, club.id, now, status=VotingEventStatus.DRAFT)
        c.nominations.open(club.id, "Second round", now, now + timedelta(days=1))
        with pytest.raises(ConflictError):
            c.voting_events.update_status(event.id, VotingEventStatus.ACTIVE)
        assert c.voting_events.get(event.id).status == VotingEventStatus.DRAFT

    def test_closed_cannot_reopen(self, c, club, now):
        event = make_event(c, club.id, now)
        c.voting_events.close(event.id, now=now)
        with pytest.raises(ConflictError):
            c.voting_events.update_status(event.id, VotingEventStatus.ACTIVE)

    def test_archived_cannot_close(self, c, club, now):
        event = make_event(c, club.id, now)
        c.voting_events.close(event.id, now=now)
        c.voting_events.update_status(event.id, VotingEventStatus.ARCHIVED)
        with pytest.raises(ConflictError):
            c.voting_events.close(event.id)

    def test_invalid_status(self, c, club, now):
        event = make_event(c, club.id, now)
        with pytest.raises(ValidationError):
            c.voting_events.update_status(event.id, "paused")


class TestDelete:
    def test_delete_draft(self, c, club, now):
        event = make_event(c, club.id, now, status=VotingEventStatus.DRAFT)
        c.voting_events.delete(event.id)
        with pytest.raises(NotFoundError):
            c.voting_events.get(event.id)

    def test_active_cannot_be_deleted(self, c, club, now):
        event = make_event(c, club.id, now)
        with pytest.raises(ConflictError):
            c.voting_events.delete(event.id)


class TestCloseExpired:
    def test_closes_expired_and_records_winners(self, c, club, now):
        application = c.nominations.candidates(c.nominations.list_for_club(club.id)[0].id)[0]
        event = make_event(c, club.id, now)
        c.ballots.cast_vote(event.id, 11, application.id, now=now)

        later = now + timedelta(days=2)
        assert c.voting_events.close_expired(later) == [event.id]
        assert c.voting_events.get(event.id).status == VotingEventStatus.CLOSED
        assert [w.winner_id for w in c.winners.winners(event.id)] == [10]

    def test_running_events_untouched(self, c, club, now):
        event = make_event(c, club.id, now)
        assert c.voting_events.close_expired(now) == []
        assert c.voting_events.get(event.id).status == VotingEventStatus.ACTIVE


class TestStats:
    def test_turnout(self, c, club, now):
        application = c.nominations.candidates(c.nominations.list_for_club(club.id)[0].id)[0]
        event = make_event(c, club.id, now)
        c.ballots.cast_vote(event.id, 11, application.id, now=now)

        stats = c.voting_events.stats(event.id, now)

        assert stats.total_votes == 1
        assert stats.eligible_voters == 2
        assert stats.turnout_pct == 50.0
        assert stats.total_candidates == 1
        assert stats.total_positions == 1
        assert not stats.is_expired

"""Tests for casting votes."""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import MemberStatus
from app.models.voting import VotingEventStatus
from app.repositories import VoteRepository


class TestCastVote:
    def test_records_vote(self, c, election, now):
        event, apps = election["event"], election["apps"]
        vote = c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)

        assert vote.user_id == 14
        assert vote.club_position_id == election["president"]
        assert c.ballots.has_voted(event.id, 14, election["president"])
        assert not c.ballots.has_voted(event.id, 14, election["secretary"])

    def test_second_vote_same_position_conflicts(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)
        with pytest.raises(ConflictError):
            c.ballots.cast_vote(event.id, 14, apps[11].id, now=now)
        assert c.ballots.voted_candidates(event.id, 14) == [apps[10].id]

    def test_one_vote_per_position(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)
        assert not c.ballots.has_voted_all(event.id, 14)
        c.ballots.cast_vote(event.id, 14, apps[12].id, now=now)
        assert c.ballots.has_voted_all(event.id, 14)

    def test_candidates_may_vote(self, c, election, now):
        event, apps = election["event"], election["apps"]
        assert c.ballots.cast_vote(event.id, 10, apps[10].id, now=now).user_id == 10

    def test_outside_window(self, c, election, now):
        event, apps = election["event"], election["apps"]
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 14, apps[10].id, now=now + timedelta(days=2))

    def test_draft_event(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.voting_events.update_status(event.id, VotingEventStatus.DRAFT)
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)

    def test_closed_event(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.voting_events.close(event.id, now=now)
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)

    def test_already_voted_checked_before_window(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)
        with pytest.raises(ConflictError):
            c.ballots.cast_vote(event.id, 14, apps[11].id, now=now + timedelta(days=2))

    def test_non_member(self, c, election, now):
        event, apps = election["event"], election["apps"]
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 99, apps[10].id, now=now)

    def test_pending_member(self, c, election, now):
        event, apps, club = election["event"], election["apps"], election["club"]
        c.membership.set_status(club.id, 14, MemberStatus.PENDING)
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 14, apps[10].id, now=now)

    def test_unknown_candidate(self, c, election, now):
        with pytest.raises(NotFoundError):
            c.ballots.cast_vote(election["event"].id, 14, 9999, now=now)

    def test_unknown_event(self, c, election, now):
        with pytest.raises(NotFoundError):
            c.ballots.cast_vote(9999, 14, election["apps"][10].id, now=now)

    def test_candidate_of_another_nomination(self, c, election, now):
        club = election["club"]
        other = c.catalog.create_club("Go Club", positions=["Captain"])
        captain = c.catalog.positions(other.id)[0].id
        nomination = c.nominations.open(other.id, "Go nominations", now - timedelta(days=1), now + timedelta(days=1))
        stranger = c.nominations.apply(nomination.id, 14, captain, now=now)
        c.nominations.approve(stranger.id)

        assert c.membership.is_active(club.id, 14)
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(election["event"].id, 14, stranger.id, now=now)

    def test_rejected_candidate(self, c, election, now):
        event, apps = election["event"], election["apps"]
        c.nominations.reject(apps[11].id)
        with pytest.raises(ValidationError):
            c.ballots.cast_vote(event.id, 14, apps[11].id, now=now)


class TestConcurrentVotes:
    def _cast_together(self, c, election, now, voters):
        """Cast one President vote per entry in `voters`, all threads released at once."""
        event, candidate = election["event"], election["apps"][10]
        barrier = threading.Barrier(len(voters))

        def cast(voter_id):
            barrier.wait()
            try:
                c.ballots.cast_vote(event.id, voter_id, candidate.id, now=now)
                return "ok"
            except ConflictError:
                return "conflict"

        with ThreadPoolExecutor(max_workers=len(voters)) as pool:
            return list(pool.map(cast, voters))

    def test_distinct_voters_all_recorded(self, c, conn, election, now):
        outcomes = self._cast_together(c, election, now, [10, 11, 12, 13, 14])

        assert outcomes == ["ok"] * 5
        assert VoteRepository(conn).count_for_position(election["event"].id, election["president"]) == 5

    def test_repeated_voter_recorded_once(self, c, conn, election, now):
        outcomes = self._cast_together(c, election, now, [10, 11, 12, 13, 14, 10, 11, 12])

        assert sorted(outcomes) == ["conflict"] * 3 + ["ok"] * 5
        assert VoteRepository(conn).count_for_position(election["event"].id, election["president"]) == 5
        assert c.ballots.voted_candidates(election["event"].id, 10) == [election["apps"][10].id]

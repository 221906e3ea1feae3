"""Tests for tallies and winner resolution."""

import pytest

from app.errors import ValidationError
from app.repositories import VoteRepository
from conftest import add_members


def _vote(c, election, now, ballots):
    """ballots maps voter id -> list of candidate user ids."""
    for voter, choices in ballots.items():
        for candidate in choices:
            c.ballots.cast_vote(election["event"].id, voter, election["apps"][candidate].id, now=now)


class TestTally:
    def test_most_votes_first(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [11], 14: [10]})
        rows = c.winners.tally(election["event"].id, election["president"])
        assert [(r.nomination_application_id, r.votes) for r in rows] == [
            (election["apps"][11].id, 2),
            (election["apps"][10].id, 1),
        ]

    def test_sum_equals_votes_for_position(self, c, conn, election, now):
        _vote(c, election, now, {10: [10, 12], 11: [11, 13], 14: [10]})
        event_id = election["event"].id
        for position in (election["president"], election["secretary"]):
            total = sum(r.votes for r in c.winners.tally(event_id, position))
            assert total == VoteRepository(conn).count_for_position(event_id, position)


class TestClose:
    def test_clear_winners(self, c, election, now):
        _vote(c, election, now, {12: [11, 13], 13: [11, 13], 14: [10, 12]})

        winners = {w.club_position_id: w for w in c.voting_events.close(election["event"].id, now=now)}

        assert winners[election["president"]].winner_id == 11
        assert winners[election["president"]].votes_count == 2
        assert not winners[election["president"]].is_tie_resolved
        assert winners[election["secretary"]].winner_id == 13

    def test_tie_goes_to_earliest_application(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [10]})

        winners = c.voting_events.close(election["event"].id, now=now)
        president = next(w for w in winners if w.club_position_id == election["president"])

        assert president.winner_id == 10
        assert president.is_tie_resolved
        assert president.votes_count == 1

    def test_manual_tie_choice(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [10]})
        manual = {election["president"]: election["apps"][11].id}

        winners = c.voting_events.close(election["event"].id, manual_winners=manual, now=now)

        assert [w.winner_id for w in winners if w.club_position_id == election["president"]] == [11]

    def test_manual_choice_must_be_tied_leader(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [11], 14: [10]})
        manual = {election["president"]: election["apps"][10].id}

        with pytest.raises(ValidationError):
            c.voting_events.close(election["event"].id, manual_winners=manual, now=now)
        assert c.voting_events.get(election["event"].id).status == "active"
        assert c.winners.winners(election["event"].id) == []

    def test_position_without_votes_has_no_winner(self, c, election, now):
        _vote(c, election, now, {12: [11]})
        winners = c.voting_events.close(election["event"].id, now=now)
        assert [w.club_position_id for w in winners] == [election["president"]]

    def test_close_is_idempotent(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [10]})
        event_id = election["event"].id
        first = c.voting_events.close(event_id, now=now)
        second = c.voting_events.close(event_id, now=now)
        assert [w.to_dict() for w in first] == [w.to_dict() for w in second]


class TestResolveAll:
    def test_requires_closed_event(self, c, election):
        with pytest.raises(ValidationError):
            c.winners.resolve_all(election["event"].id)

    def test_recompute_keeps_tie_choice(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [10]})
        event_id = election["event"].id
        c.voting_events.close(event_id, manual_winners={election["president"]: election["apps"][11].id}, now=now)

        winners = c.winners.resolve_all(event_id)

        assert [w.winner_id for w in winners if w.club_position_id == election["president"]] == [11]
        assert len(c.winners.winners(event_id)) == 1

    def test_preview_shows_tie(self, c, election, now):
        _vote(c, election, now, {12: [11], 13: [10]})
        results = {r.club_position_id: r for r in c.winners.preview(election["event"].id)}

        president = results[election["president"]]
        assert president.is_tie
        assert set(president.leaders) == {election["apps"][10].id, election["apps"][11].id}
        assert results[election["secretary"]].leaders == []


def _outcome(winners):
    return [
        (w.club_position_id, w.nomination_application_id, w.winner_id, w.votes_count, w.is_tie_resolved)
        for w in winners
    ]


class TestIdempotence:
    def test_resolve_all_twice_gives_same_rows(self, c, election, now):
        _vote(c, election, now, {12: [11, 13], 13: [10, 12], 14: [10]})
        event_id = election["event"].id
        closed = c.voting_events.close(event_id, now=now)

        first = c.winners.resolve_all(event_id)
        second = c.winners.resolve_all(event_id)

        assert _outcome(first) == _outcome(second) == _outcome(closed)
        assert _outcome(c.winners.winners(event_id)) == _outcome(second)

    def test_three_all_tie(self, c, election, now):
        add_members(c, election["club"].id, [15, 16, 17])
        _vote(c, election, now, {12: [10], 13: [10], 14: [10], 15: [11], 16: [11], 17: [11]})
        event_id = election["event"].id

        c.voting_events.close(event_id, now=now)
        rows = c.winners.resolve_all(event_id)

        assert _outcome(rows) == [
            (election["president"], election["apps"][10].id, 10, 3, True),
        ]

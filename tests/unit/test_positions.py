"""Tests for clubs and their positions."""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import HolderSource, PositionSpec
from conftest import ADMIN_ID, add_members, make_club, make_event, make_roster, position_ids


class TestCreateClub:
    def test_creates_club_with_positions(self, c):
        club = make_club(c)
        assert club.name == "Chess Club"
        assert club.join_fee == Decimal("10.00")
        assert [p.name for p in c.catalog.positions(club.id)] == ["President", "Secretary"]

    def test_accepts_position_dicts_and_specs(self, c):
        club = c.catalog.create_club(
            "Rowing",
            positions=[{"name": "Captain", "description": "Leads crews"}, PositionSpec("Cox", is_active=False)],
        )
        positions = c.catalog.positions(club.id)
        assert positions[0].description == "Leads crews"
        assert [p.name for p in c.catalog.positions(club.id, active_only=True)] == ["Captain"]

    def test_rejects_blank_name(self, c):
        with pytest.raises(ValidationError):
            c.catalog.create_club("   ")

    def test_rejects_negative_fee(self, c):
        with pytest.raises(ValidationError):
            c.catalog.create_club("Chess", join_fee=-1)

    def test_rejects_blank_position(self, c):
        with pytest.raises(ValidationError):
            c.catalog.create_club("Chess", positions=["President", " "])

    def test_unknown_club(self, c):
        with pytest.raises(NotFoundError):
            c.catalog.get_club(999)


class TestUpdateClub:
    def test_updates_fields(self, c):
        club = make_club(c)
        updated = c.catalog.update_club(club.id, name="Chess Society", join_fee=25)
        assert updated.name == "Chess Society"
        assert updated.join_fee == Decimal("25")

    def test_position_list_replaces_current(self, c):
        club = make_club(c)
        c.catalog.update_club(club.id, positions=["Chair"])
        assert [p.name for p in c.catalog.positions(club.id)] == ["Chair"]

    def test_empty_position_list_clears_positions(self, c):
        club = make_club(c)
        c.catalog.update_club(club.id, positions=[])
        assert c.catalog.positions(club.id) == []

    def test_refused_position_change_keeps_details(self, c, now):
        club = make_club(c)
        c.nominations.open(club.id, "Board nominations", now, now + timedelta(days=1))
        with pytest.raises(ConflictError):
            c.catalog.update_club(club.id, name="Chess Society", positions=["Chair"])
        assert c.catalog.get_club(club.id).name == "Chess Club"
        assert [p.name for p in c.catalog.positions(club.id)] == ["President", "Secretary"]


class TestReplacePositions:
    def test_new_ids_and_cleared_assignments(self, c):
        club = make_club(c)
        old_ids = position_ids(c, club.id)
        add_members(c, club.id, [10])
        c.membership.assign_position(club.id, 10, old_ids[0])

        positions = c.catalog.replace_positions(club.id, ["Chair", "Treasurer", "Scribe"], actor_id=ADMIN_ID)

        assert [p.name for p in positions] == ["Chair", "Treasurer", "Scribe"]
        assert not set(old_ids) & {p.id for p in positions}
        assert c.membership.members(club.id)[0].position_id is None

    def test_refused_during_active_nomination(self, c, now):
        club = make_club(c)
        c.nominations.open(club.id, "Nominations", now, now.replace(year=now.year + 1))
        with pytest.raises(ConflictError):
            c.catalog.replace_positions(club.id, ["Chair"])
        assert len(c.catalog.positions(club.id)) == 2

    def test_refused_during_open_voting_event(self, c, election):
        with pytest.raises(ConflictError):
            c.catalog.replace_positions(election["club"].id, ["Chair"])


class TestCurrentHolders:
    def test_manual_assignment(self, c):
        club = make_club(c)
        president, secretary = position_ids(c, club.id)
        add_members(c, club.id, [10, 11])
        c.membership.assign_position(club.id, 11, secretary)

        holders = {h.position_id: h for h in c.catalog.current_holders(club.id)}
        assert holders[president].user_id is None
        assert holders[secretary].user_id == 11
        assert holders[secretary].source == HolderSource.MANUAL

    def test_election_winner_takes_precedence(self, c, now):
        club = make_club(c)
        president, _ = position_ids(c, club.id)
        add_members(c, club.id, [10, 11, 12])
        c.membership.assign_position(club.id, 12, president)
        _, apps = make_roster(c, club.id, {10: president, 11: president}, now)
        event = make_event(c, club.id, now)
        c.ballots.cast_vote(event.id, 12, apps[11].id, now=now)
        c.voting_events.close(event.id, now=now)

        holders = {h.position_id: h for h in c.catalog.current_holders(club.id)}
        assert holders[president].user_id == 11
        assert holders[president].source == HolderSource.ELECTION
        assert holders[president].voting_event_id == event.id
        assert holders[president].votes_count == 1

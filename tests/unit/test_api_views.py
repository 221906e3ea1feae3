"""Tests for the API views."""

from datetime import timedelta

import pytest

from app.errors import ConflictError
from app.services.common import Permission
from conftest import ADMIN_ID
from web.api import clubs, dashboard, nominations, voting
from web.api.errors import PermissionDeniedError, error_payload

OFFICER_ID = 2


class TestPermissions:
    def test_create_club_requires_permission(self, c):
        with pytest.raises(PermissionDeniedError) as exc:
            clubs.create_club(OFFICER_ID, "Chess Club")
        assert error_payload(exc.value)["kind"] == "forbidden"

    def test_granted_permission(self, c, authorizer):
        authorizer.grant(OFFICER_ID, Permission.CREATE_CLUBS)
        response = clubs.create_club(OFFICER_ID, "Chess Club", positions=["President"])
        assert [p.name for p in response.positions] == ["President"]

    def test_results_require_view_permission(self, c, election):
        with pytest.raises(PermissionDeniedError):
            voting.get_results(OFFICER_ID, election["event"].id)


class TestElectionFlow:
    def test_full_flow(self, c, now):
        club = clubs.create_club(ADMIN_ID, "Chess Club", join_fee="5", positions=["President"])
        president = club.positions[0].id
        for user_id in (10, 11, 12):
            clubs.join_club(user_id, club.id)
            clubs.set_member_status(ADMIN_ID, club.id, user_id, "active")

        nomination = nominations.create_nomination(
            ADMIN_ID, club.id, "Board nominations", now - timedelta(hours=1), now + timedelta(days=1)
        )
        application = nominations.apply(10, nomination.id, president, "Vote for me")
        nominations.set_application_status(ADMIN_ID, application.id, "approved")
        nominations.close_nomination(ADMIN_ID, nomination.id)
        assert [a.user_id for a in nominations.get_candidates(nomination.id).items] == [10]

        event = voting.create_voting_event(
            ADMIN_ID, club.id, "Board election", now - timedelta(hours=1), now + timedelta(days=1), status="active"
        )
        voting.cast_vote(11, event.id, application.id)
        with pytest.raises(ConflictError):
            voting.cast_vote(11, event.id, application.id)

        ballot = voting.get_ballot(11, event.id)
        assert ballot.voted_candidates == [application.id]
        assert ballot.has_voted_all

        winners = voting.close_voting_event(ADMIN_ID, event.id)
        assert [w.winner_id for w in winners.items] == [10]
        assert voting.get_stats(ADMIN_ID, event.id).turnout_pct == pytest.approx(33.3)

        holders = clubs.get_current_holders(club.id)
        assert holders.items[0].user_id == 10
        assert holders.items[0].source == "election"

    def test_overview(self, c, election):
        overview = dashboard.get_overview(election["club"].id)
        assert overview.open_voting_event.id == election["event"].id
        assert overview.members == {"active": 5}
        assert overview.active_nomination is None

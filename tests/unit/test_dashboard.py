"""Tests for the dashboard service."""

from datetime import timedelta

from conftest import add_members, make_club, make_event, make_roster, position_ids


class TestClubOverview:
    def test_overview(self, c, now):
        club = make_club(c)
        add_members(c, club.id, [10, 11])
        nomination = c.nominations.open(club.id, "Nominations", now, now + timedelta(days=1))

        overview = c.dashboard.club_overview(club.id)

        assert overview["club"].id == club.id
        assert overview["members"] == {"active": 2}
        assert len(overview["holders"]) == 2
        assert overview["active_nomination"].id == nomination.id
        assert overview["open_voting_event"] is None


class TestUpcomingDeadlines:
    def test_lists_edges_within_horizon(self, c, now):
        club = make_club(c)
        make_roster(c, club.id, {10: position_ids(c, club.id)[0]}, now)
        event = make_event(c, club.id, now)
        c.nominations.open(club.id, "Next round", now + timedelta(days=5), now + timedelta(days=6))

        items = c.dashboard.upcoming_deadlines(now, timedelta(hours=36))

        assert [(i["kind"], i["id"], i["edge"]) for i in items] == [("voting_event", event.id, "ends")]

    def test_ordered_by_due_time(self, c, now):
        first = make_club(c)
        second = make_club(c, name="Go Club")
        soon = c.nominations.open(first.id, "Soon", now - timedelta(days=1), now + timedelta(hours=2))
        starting = c.nominations.open(second.id, "Starting", now + timedelta(hours=1), now + timedelta(days=3))

        items = c.dashboard.upcoming_deadlines(now, timedelta(hours=24))

        assert [(i["id"], i["edge"]) for i in items] == [(starting.id, "starts"), (soon.id, "ends")]

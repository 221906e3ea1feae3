"""Tests for the activity log and authorization collaborators."""

from loguru import logger

from app.services import GrantAuthorizer
from app.services.common import Permission
from conftest import ADMIN_ID, make_club
from settings.logging import _is_activity


class TestActivityLog:
    def test_domain_changes_are_recorded(self, c):
        make_club(c)
        entries = c.activity.recent(category="club")
        assert entries[0].message == "Created club Chess Club"
        assert entries[0].actor_id == ADMIN_ID

    def test_failed_write_does_not_undo_change(self, c, conn):
        conn.execute("DROP TABLE activity_log")
        club = make_club(c)
        assert c.catalog.get_club(club.id).name == "Chess Club"

    def test_recent_is_newest_first(self, c):
        c.activity.record(None, "first", "system")
        c.activity.record(None, "second", "system")
        assert [e.message for e in c.activity.recent(limit=2, category="system")] == ["second", "first"]

    def test_entries_reach_the_activity_sink(self, c):
        seen = []
        sink_id = logger.add(lambda m: seen.append(m.record["extra"]), filter=_is_activity, level="INFO")
        try:
            c.activity.record(ADMIN_ID, "Opened the books", "club")
        finally:
            logger.remove(sink_id)
        assert seen == [{"activity": True, "actor_id": ADMIN_ID, "category": "club"}]


class TestGrantAuthorizer:
    def test_admin_can_everything(self):
        authorizer = GrantAuthorizer({ADMIN_ID})
        assert all(authorizer.can(ADMIN_ID, p) for p in Permission)

    def test_grant_and_revoke(self):
        authorizer = GrantAuthorizer()
        authorizer.grant(5, Permission.EDIT_VOTING_EVENTS, Permission.VIEW_VOTING_EVENTS)
        authorizer.revoke(5, Permission.EDIT_VOTING_EVENTS)
        assert authorizer.can(5, Permission.VIEW_VOTING_EVENTS)
        assert not authorizer.can(5, Permission.EDIT_VOTING_EVENTS)
        assert not authorizer.can(6, Permission.VIEW_VOTING_EVENTS)

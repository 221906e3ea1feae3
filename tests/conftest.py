"""Shared fixtures: an in-memory database wired into the container."""

from datetime import timedelta

import pytest

from app.container import container as app_container
from app.models.clubs import MemberStatus
from app.models.common import utcnow
from app.models.voting import VotingEventStatus
from app.repositories import connect, release
from app.repositories.db import IN_MEMORY
from app.services import GrantAuthorizer

ADMIN_ID = 1


@pytest.fixture
def conn():
    conn = connect(IN_MEMORY)
    yield conn
    release(conn)
    conn.close()


@pytest.fixture
def authorizer():
    return GrantAuthorizer({ADMIN_ID})


@pytest.fixture
def c(conn, authorizer):
    """Container wired to a fresh in-memory database."""
    app_container.reset()
    app_container.init(conn, authorizer=authorizer)
    yield app_container
    app_container.reset()


@pytest.fixture
def now():
    return utcnow()


def make_club(c, name="Chess Club", positions=("President", "Secretary")):
    return c.catalog.create_club(name, join_fee="10.00", positions=list(positions), actor_id=ADMIN_ID)


def add_members(c, club_id, user_ids, status=MemberStatus.ACTIVE):
    for user_id in user_ids:
        c.membership.join(club_id, user_id, status)


def position_ids(c, club_id):
    return [p.id for p in c.catalog.positions(club_id)]


def make_roster(c, club_id, candidates, now, approve=True):
    """Run a nomination to completion; returns (nomination, {user_id: application}).

    candidates maps user id -> position id.
    """
    nomination = c.nominations.open(club_id, "Board nominations", now - timedelta(days=2), now + timedelta(days=2))
    applications = {}
    for user_id, position_id in candidates.items():
        application = c.nominations.apply(nomination.id, user_id, position_id, now=now)
        if approve:
            application = c.nominations.approve(application.id, actor_id=ADMIN_ID)
        applications[user_id] = application
    c.nominations.close(nomination.id)
    return c.nominations.get(nomination.id), applications


def make_event(c, club_id, now, status=VotingEventStatus.ACTIVE, title="Board election"):
    return c.voting_events.create(
        club_id, title, now - timedelta(hours=1), now + timedelta(days=1), status=status, actor_id=ADMIN_ID
    )


@pytest.fixture
def election(c, now):
    """Club with two seats, five active members, two approved candidates per seat, an active event."""
    club = make_club(c)
    president, secretary = position_ids(c, club.id)
    add_members(c, club.id, [10, 11, 12, 13, 14])
    _, apps = make_roster(c, club.id, {10: president, 11: president, 12: secretary, 13: secretary}, now)
    event = make_event(c, club.id, now)
    return {
        "club": club,
        "president": president,
        "secretary": secretary,
        "apps": apps,
        "event": event,
    }

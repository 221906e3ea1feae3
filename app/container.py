"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories import (
    ActivityRepository,
    ApplicationRepository,
    ClubRepository,
    MemberRepository,
    NominationRepository,
    VoteRepository,
    VotingEventRepository,
    WinnerRepository,
    get_db,
)
from app.services import (
    ActivityLog,
    Authorizer,
    BallotRecorder,
    ClubPositionCatalog,
    DashboardService,
    GrantAuthorizer,
    MembershipRegistry,
    NominationLifecycle,
    VotingEventLifecycle,
    WinnerResolver,
)
from settings import ADMIN_IDS


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn: duckdb.DuckDBPyConnection | None = None, authorizer: Authorizer | None = None) -> None:
        """Initialize all dependencies. Call once at app startup.

        Every repository shares one root connection. Each thread works through
        its own cursor on it, so a service transaction covers all tables it
        touches without seeing another thread's work in progress.
        """
        if self._initialized:
            return

        conn = conn if conn is not None else get_db()
        self.conn = conn

        # Repositories (singletons)
        self._club_repo = ClubRepository(conn)
        self._member_repo = MemberRepository(conn)
        self._nomination_repo = NominationRepository(conn)
        self._application_repo = ApplicationRepository(conn)
        self._event_repo = VotingEventRepository(conn)
        self._vote_repo = VoteRepository(conn)
        self._winner_repo = WinnerRepository(conn)
        self._activity_repo = ActivityRepository(conn)

        # Collaborators
        self.authorizer = authorizer if authorizer is not None else GrantAuthorizer(ADMIN_IDS)
        self.activity = ActivityLog(self._activity_repo)

        # Services (with injected repos)
        self.catalog = ClubPositionCatalog(
            club_repo=self._club_repo,
            member_repo=self._member_repo,
            nomination_repo=self._nomination_repo,
            event_repo=self._event_repo,
            winner_repo=self._winner_repo,
            activity=self.activity,
        )

        self.membership = MembershipRegistry(
            club_repo=self._club_repo,
            member_repo=self._member_repo,
            activity=self.activity,
        )

        self.nominations = NominationLifecycle(
            nomination_repo=self._nomination_repo,
            application_repo=self._application_repo,
            club_repo=self._club_repo,
            event_repo=self._event_repo,
            activity=self.activity,
        )

        self.winners = WinnerResolver(
            event_repo=self._event_repo,
            vote_repo=self._vote_repo,
            winner_repo=self._winner_repo,
            application_repo=self._application_repo,
            club_repo=self._club_repo,
            activity=self.activity,
        )

        self.voting_events = VotingEventLifecycle(
            event_repo=self._event_repo,
            nomination_repo=self._nomination_repo,
            club_repo=self._club_repo,
            member_repo=self._member_repo,
            vote_repo=self._vote_repo,
            resolver=self.winners,
            activity=self.activity,
        )

        self.ballots = BallotRecorder(
            event_repo=self._event_repo,
            application_repo=self._application_repo,
            vote_repo=self._vote_repo,
            member_repo=self._member_repo,
            resolver=self.winners,
            activity=self.activity,
        )

        self.dashboard = DashboardService(
            club_repo=self._club_repo,
            member_repo=self._member_repo,
            nomination_repo=self._nomination_repo,
            event_repo=self._event_repo,
            catalog=self.catalog,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() wires a fresh graph."""
        self._initialized = False


# Global container instance
container = Container()

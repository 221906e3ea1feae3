"""Nomination lifecycle - candidacy windows and their applications."""

from datetime import datetime

from loguru import logger

from app.errors import ConflictError, NotFoundError, ValidationError
from app.models.clubs import ClubStatus
from app.models.common import utcnow
from app.models.nominations import ApplicationStatus, Nomination, NominationApplication, NominationStatus
from app.repositories.clubs import ClubRepository
from app.repositories.nominations import ApplicationRepository, NominationRepository
from app.repositories.nominations.nomination import ACTIVE_NOMINATION_CONFLICT
from app.repositories.voting import VotingEventRepository
from app.services.common import ActivityLog, validate_window

CREATABLE_STATUSES = {NominationStatus.DRAFT, NominationStatus.ACTIVE}


class NominationLifecycle:
    """Nominations move draft -> active -> closed -> archived.

    At most one nomination per club is active. A closed nomination may only
    move on to archived.
    """

    def __init__(
        self,
        nomination_repo: NominationRepository,
        application_repo: ApplicationRepository,
        club_repo: ClubRepository,
        event_repo: VotingEventRepository,
        activity: ActivityLog,
    ):
        self._nominations = nomination_repo
        self._applications = application_repo
        self._clubs = club_repo
        self._events = event_repo
        self._activity = activity

    def get(self, nomination_id: int) -> Nomination:
        nomination = self._nominations.get(nomination_id)
        if nomination is None:
            raise NotFoundError(f"Nomination {nomination_id} not found")
        return nomination

    def find_active(self, club_id: int) -> Nomination | None:
        return self._nominations.find_active(club_id)

    def list_for_club(self, club_id: int) -> list[Nomination]:
        return self._nominations.list_for_club(club_id)

    def open(
        self,
        club_id: int,
        title: str,
        start_date: datetime,
        end_date: datetime,
        description: str | None = None,
        status: str = NominationStatus.ACTIVE,
        max_applicants: int | None = None,
        actor_id: int | None = None,
    ) -> Nomination:
        """Create a nomination for a club (active unless created as draft)."""
        title = validate_window(title, start_date, end_date)
        if status not in CREATABLE_STATUSES:
            raise ValidationError(f"A nomination cannot be created with status {status}.")
        if max_applicants is not None and max_applicants < 1:
            raise ValidationError("Maximum applicants must be at least 1.")

        club = self._clubs.get(club_id)
        if club is None:
            raise NotFoundError(f"Club {club_id} not found")
        if club.status != ClubStatus.ACTIVE:
            raise ValidationError("Nominations can only be opened for active clubs.")

        with self._nominations.transaction():
            if status == NominationStatus.ACTIVE and self._nominations.find_active(club_id):
                raise ConflictError(ACTIVE_NOMINATION_CONFLICT)
            nomination_id = self._nominations.create(
                club_id,
                title,
                start_date,
                end_date,
                status,
                utcnow(),
                description=description,
                max_applicants=max_applicants,
            )

        self._activity.record(actor_id, f"Create Nomination {title}", "nomination")
        return self.get(nomination_id)

    def update_status(self, nomination_id: int, status: str, actor_id: int | None = None) -> Nomination:
        if status not in {s.value for s in NominationStatus}:
            raise ValidationError(f"Invalid nomination status: {status}")

        nomination = self.get(nomination_id)
        if nomination.status == status:
            return nomination
        if nomination.is_finished and not (
            nomination.status == NominationStatus.CLOSED and status == NominationStatus.ARCHIVED
        ):
            raise ConflictError(
                "Closed or archived nominations cannot be changed to any other status. "
                "Please create a new nomination instead."
            )

        with self._nominations.transaction():
            if status == NominationStatus.ACTIVE:
                other = self._nominations.find_active(nomination.club_id)
                if other and other.id != nomination.id:
                    raise ConflictError(ACTIVE_NOMINATION_CONFLICT)
            self._nominations.set_status(nomination, status)

        logger.info("Nomination {}: {} -> {}", nomination_id, nomination.status, status)
        self._activity.record(
            actor_id,
            f"Updated {nomination.title} status from {nomination.status} to {status}",
            "nomination",
        )
        return self.get(nomination_id)

    def close(self, nomination_id: int, actor_id: int | None = None) -> Nomination:
        """Close a nomination; closing a finished one changes nothing."""
        nomination = self.get(nomination_id)
        if nomination.is_finished:
            logger.debug("Nomination {} already {}", nomination_id, nomination.status)
            return nomination
        return self.update_status(nomination_id, NominationStatus.CLOSED, actor_id=actor_id)

    def delete(self, nomination_id: int, actor_id: int | None = None) -> None:
        nomination = self.get(nomination_id)
        with self._nominations.transaction():
            if self._applications.exists_for_nomination(nomination_id):
                raise ConflictError("Cannot delete a nomination that has applications.")
            self._nominations.delete(nomination_id)
        self._activity.record(actor_id, f"Delete Nomination {nomination.title}", "nomination")

    def close_expired(self, now: datetime | None = None) -> list[int]:
        """Close every active nomination whose end date has passed."""
        now = now or utcnow()
        closed = []
        for nomination in self._nominations.list_expired(now):
            self._nominations.set_status(nomination, NominationStatus.CLOSED)
            closed.append(nomination.id)
            self._activity.record(
                None,
                f"Automatically closed expired nomination: {nomination.title} (ID: {nomination.id})",
                "system",
            )

        if closed:
            logger.info("Closed {} expired nominations", len(closed))
        else:
            logger.info("No expired nominations found")
        return closed

    # Applications

    def apply(
        self,
        nomination_id: int,
        user_id: int,
        position_id: int,
        statement: str | None = None,
        now: datetime | None = None,
    ) -> NominationApplication:
        """Submit a pending candidacy for one position."""
        now = now or utcnow()
        nomination = self.get(nomination_id)
        if nomination.status != NominationStatus.ACTIVE:
            raise ValidationError("This nomination is not accepting applications.")
        if not nomination.start_date <= now <= nomination.end_date:
            raise ValidationError("Applications are not currently open for this nomination.")

        position = self._clubs.get_position(position_id)
        if position is None or position.club_id != nomination.club_id or not position.is_active:
            raise ValidationError("The selected position is not available in this nomination.")

        with self._applications.transaction():
            if self._applications.find(nomination_id, user_id, position_id):
                raise ConflictError("You have already applied for this position.")
            if nomination.max_applicants is not None and (
                self._applications.count_for_nomination(nomination_id) >= nomination.max_applicants
            ):
                raise ConflictError("This nomination has reached its maximum number of applicants.")
            application_id = self._applications.create(
                nomination_id, user_id, position_id, ApplicationStatus.PENDING, now, statement
            )

        self._activity.record(user_id, f"Applied for {position.name} in {nomination.title}", "nomination")
        return self._applications.get(application_id)

    def get_application(self, application_id: int) -> NominationApplication:
        application = self._applications.get(application_id)
        if application is None:
            raise NotFoundError(f"Application {application_id} not found")
        return application

    def set_application_status(
        self,
        application_id: int,
        status: str,
        admin_notes: str | None = None,
        actor_id: int | None = None,
    ) -> NominationApplication:
        if status not in {s.value for s in ApplicationStatus}:
            raise ValidationError(f"Invalid application status: {status}")

        application = self.get_application(application_id)
        if self._events.closed_for_nomination(application.nomination_id):
            raise ConflictError("Applications cannot change once their voting event has closed.")

        self._applications.set_status(application_id, status, admin_notes, utcnow())
        self._activity.record(actor_id, f"{status.capitalize()} {application_id} application", "nomination")
        return self.get_application(application_id)

    def approve(self, application_id: int, admin_notes: str | None = None, actor_id: int | None = None):
        return self.set_application_status(application_id, ApplicationStatus.APPROVED, admin_notes, actor_id)

    def reject(self, application_id: int, admin_notes: str | None = None, actor_id: int | None = None):
        return self.set_application_status(application_id, ApplicationStatus.REJECTED, admin_notes, actor_id)

    def applications(self, nomination_id: int, status: str | None = None) -> list[NominationApplication]:
        self.get(nomination_id)
        return self._applications.list_for_nomination(nomination_id, status)

    def candidates(self, nomination_id: int) -> list[NominationApplication]:
        """Approved applications - the roster a voting event draws on."""
        return self.applications(nomination_id, ApplicationStatus.APPROVED)

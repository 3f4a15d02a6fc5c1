from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from recruitment.core.errors import (
    NotFoundError,
    PersistenceError,
    RecruitmentError,
    ValidationError,
    VersionConflictError,
)
from recruitment.domain.application import (
    ApplicationStatus,
    ApplicationSubmission,
    CompetenceEntry,
    StatusUpdate,
)
from recruitment.infrastructure.stores.competence_store import competence_to_dict
from recruitment.infrastructure.stores.models import (
    AvailabilityModel,
    CompetenceModel,
    CompetenceProfileModel,
    PersonModel,
)
from recruitment.infrastructure.stores.sqlalchemy_db import SessionProvider

# years_of_experience is stored as NUMERIC(4, 2)
MAX_YEARS_OF_EXPERIENCE = 99.99


def _availability_to_dict(row: AvailabilityModel) -> Dict[str, Any]:
    return {
        "availability_id": row.availability_id,
        "person_id": row.person_id,
        "from_date": row.from_date.isoformat(),
        "to_date": row.to_date.isoformat(),
        "application_status": row.application_status,
        "version_number": row.version_number,
        "created_at": row.created_at.isoformat() if row.created_at else None,
    }


def _profile_to_dict(row: CompetenceProfileModel) -> Dict[str, Any]:
    if row.competence is None:
        # the competence join is required; a dangling profile means broken data
        raise PersistenceError(
            message="competence profile references a missing competence",
            context={"person_id": row.person_id, "competence_id": row.competence_id},
        )
    return {
        "competence_id": row.competence_id,
        "years_of_experience": row.years_of_experience,
        "competence": competence_to_dict(row.competence),
    }


def _profiles_load_option():
    return selectinload(PersonModel.competence_profiles).joinedload(CompetenceProfileModel.competence).selectinload(
        CompetenceModel.translations
    )


class SqlAlchemyApplicationStore:
    """
    Application workflow: submission, read-all and status transitions.

    - submit_application(): one transaction; profiles are upserted, availabilities inserted
    - list_applications(): every availability with its person and competence profiles
    - update_status(): compare-and-swap on version_number
    """

    def __init__(self, provider: SessionProvider):
        self._provider = provider

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def _upsert_profile(self, session: Session, person_id: int, entry: CompetenceEntry) -> None:
        values = {
            "person_id": person_id,
            "competence_id": entry.competence_id,
            "years_of_experience": entry.years_of_experience,
        }
        dialect = self._provider.dialect
        table = CompetenceProfileModel.__table__

        if dialect in ("postgresql", "sqlite"):
            if dialect == "postgresql":
                from sqlalchemy.dialects.postgresql import insert
            else:
                from sqlalchemy.dialects.sqlite import insert
            stmt = insert(table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[table.c.person_id, table.c.competence_id],
                set_={"years_of_experience": stmt.excluded.years_of_experience},
            )
            session.execute(stmt)
        elif dialect in ("mysql", "mariadb"):
            from sqlalchemy.dialects.mysql import insert

            stmt = insert(table).values(**values)
            stmt = stmt.on_duplicate_key_update(years_of_experience=stmt.inserted.years_of_experience)
            session.execute(stmt)
        else:
            session.merge(CompetenceProfileModel(**values))
            session.flush()

    def submit_application(self, submission: Union[ApplicationSubmission, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Persist a competence + availability application atomically.

        Resubmitting a competence overwrites its years_of_experience. Any
        failure rolls back every row written by this call.
        """
        if isinstance(submission, dict):
            submission = ApplicationSubmission.from_dict(submission)
        username = submission.username

        try:
            with self._provider.transaction() as session:
                person_id = session.execute(
                    select(PersonModel.person_id).where(PersonModel.username == username)
                ).scalar_one_or_none()
                if person_id is None:
                    raise NotFoundError(message=f"no person with username {username!r}", context={"username": username})

                for entry in submission.competencies:
                    if not 0 <= entry.years_of_experience <= MAX_YEARS_OF_EXPERIENCE:
                        raise ValidationError(
                            message=f"years_of_experience needs to be between 0 and {MAX_YEARS_OF_EXPERIENCE}.",
                            context={"competence_id": entry.competence_id},
                        )
                    self._upsert_profile(session, person_id, entry)

                availability_ids: List[int] = []
                for period in submission.periods:
                    from_date, to_date = period.to_dates()
                    row = AvailabilityModel(
                        person_id=person_id,
                        from_date=from_date,
                        to_date=to_date,
                        application_status=ApplicationStatus.UNHANDLED.value,
                        version_number=0,
                    )
                    session.add(row)
                    session.flush()
                    availability_ids.append(row.availability_id)
        except RecruitmentError as exc:
            logger.warning("Application submission for {} rolled back: {}", username, exc)
            raise
        except Exception as exc:
            logger.warning("Application submission for {} rolled back: {!r}", username, exc)
            raise PersistenceError(
                message="could not submit application", context={"username": username}, cause=exc
            ) from exc

        logger.info(
            "Application submitted: username={} person_id={} competences={} availabilities={}",
            username,
            person_id,
            len(submission.competencies),
            availability_ids,
        )
        return {
            "person_id": person_id,
            "competence_profiles": len({c.competence_id for c in submission.competencies}),
            "availabilities": availability_ids,
        }

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_applications(self) -> List[Dict[str, Any]]:
        """Every availability row with its person's name and competence profiles."""
        stmt = (
            select(AvailabilityModel)
            .options(joinedload(AvailabilityModel.person).options(_profiles_load_option()))
            .order_by(AvailabilityModel.availability_id)
        )
        try:
            with self._provider.session() as session:
                rows = session.execute(stmt).scalars().all()
                applications = []
                for row in rows:
                    item = _availability_to_dict(row)
                    item["name"] = row.person.name
                    item["surname"] = row.person.surname
                    item["competence_profiles"] = [_profile_to_dict(p) for p in row.person.competence_profiles]
                    applications.append(item)
        except SQLAlchemyError as exc:
            raise PersistenceError(message="could not list applications", cause=exc) from exc
        return applications

    def get_application(self, username: str) -> Optional[Dict[str, Any]]:
        """The assembled application of one person, or None for an unknown username."""
        stmt = (
            select(PersonModel)
            .where(PersonModel.username == username)
            .options(_profiles_load_option(), selectinload(PersonModel.availabilities))
        )
        try:
            with self._provider.session() as session:
                person = session.execute(stmt).scalar_one_or_none()
                if person is None:
                    return None
                return {
                    "person_id": person.person_id,
                    "name": person.name,
                    "surname": person.surname,
                    "competence_profiles": [_profile_to_dict(p) for p in person.competence_profiles],
                    "availabilities": [_availability_to_dict(a) for a in person.availabilities],
                }
        except SQLAlchemyError as exc:
            raise PersistenceError(
                message="could not find application", context={"username": username}, cause=exc
            ) from exc

    # ------------------------------------------------------------------
    # Status transition
    # ------------------------------------------------------------------

    def update_status(self, update: Union[StatusUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        """
        Move an availability to a new status, gated on the caller's version_number.

        Single conditional UPDATE keyed on (availability_id, version_number);
        zero affected rows means the row is missing or the version is stale.
        """
        if isinstance(update, dict):
            update = StatusUpdate.from_dict(update)
        table = AvailabilityModel.__table__
        stmt = (
            table.update()
            .where(
                table.c.availability_id == update.availability_id,
                table.c.version_number == update.version_number,
            )
            .values(
                application_status=update.application_status.value,
                version_number=table.c.version_number + 1,
            )
        )

        try:
            with self._provider.transaction() as session:
                result = session.execute(stmt)
                if result.rowcount == 0:
                    current = session.execute(
                        select(table.c.version_number).where(table.c.availability_id == update.availability_id)
                    ).scalar_one_or_none()
                    if current is None:
                        raise NotFoundError(
                            message=f"no availability with id {update.availability_id}",
                            context={"availability_id": update.availability_id},
                        )
                    raise VersionConflictError(
                        message=(
                            f"availability {update.availability_id} is at version {current}, "
                            f"not {update.version_number}"
                        ),
                        context={"availability_id": update.availability_id, "presented": update.version_number},
                        current_version=current,
                    )
                row = session.get(AvailabilityModel, update.availability_id)
                updated = _availability_to_dict(row)
        except VersionConflictError as exc:
            logger.warning("Status update rejected: {}", exc)
            raise
        except RecruitmentError:
            raise
        except SQLAlchemyError as exc:
            raise PersistenceError(
                message="could not update application status",
                context={"availability_id": update.availability_id},
                cause=exc,
            ) from exc

        logger.info(
            "Availability {} set to {} (version {})",
            updated["availability_id"],
            updated["application_status"],
            updated["version_number"],
        )
        return updated

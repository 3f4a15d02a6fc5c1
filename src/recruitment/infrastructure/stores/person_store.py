from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from recruitment.core.errors import PersistenceError, ValidationError
from recruitment.domain.person import PersonDTO, PersonRegistration, Role
from recruitment.infrastructure.stores.models import PersonModel
from recruitment.infrastructure.stores.sqlalchemy_db import SessionProvider
from recruitment.utils import validators
from recruitment.utils.passwords import DEFAULT_ITERATIONS, hash_password, verify_password

logger = logging.getLogger(__name__)

MUTABLE_PERSON_FIELDS = frozenset({"name", "surname", "ssn", "email", "username"})


def _person_to_dto(row: PersonModel) -> PersonDTO:
    return PersonDTO(
        person_id=row.person_id,
        name=row.name,
        surname=row.surname,
        ssn=row.ssn,
        email=row.email,
        username=row.username,
        role_id=row.role_id,
    )


class SqlAlchemyPersonStore:
    """
    Person identity records.

    Lookups return None when nothing matches; only a malformed input primitive
    (e.g. an invalid email) raises before any query is made.
    """

    def __init__(self, provider: SessionProvider, *, hash_iterations: int = DEFAULT_ITERATIONS):
        self._provider = provider
        self._hash_iterations = hash_iterations

    def _find_one(self, operation: str, **criteria: Any) -> Optional[PersonDTO]:
        try:
            with self._provider.session() as session:
                stmt = select(PersonModel)
                for column, value in criteria.items():
                    stmt = stmt.where(getattr(PersonModel, column) == value)
                row = session.execute(stmt).scalar_one_or_none()
                return _person_to_dto(row) if row else None
        except SQLAlchemyError as exc:
            raise PersistenceError(message=f"could not {operation}", context=criteria, cause=exc) from exc

    def find_person_by_id(self, person_id: int) -> Optional[PersonDTO]:
        validators.is_positive_integer(person_id, "person_id")
        return self._find_one("find person by id", person_id=int(person_id))

    def find_person_by_email(self, email: str) -> Optional[PersonDTO]:
        validators.is_email_valid(email)
        return self._find_one("find person by email", email=email)

    def find_person_by_username(self, username: str) -> Optional[PersonDTO]:
        validators.is_string_non_zero_length(username, "username")
        return self._find_one("find person by username", username=username)

    def create_person(self, registration: Union[PersonRegistration, Dict[str, Any]]) -> PersonDTO:
        if isinstance(registration, dict):
            registration = PersonRegistration.from_dict(registration)
        if registration.role_id not in (None, Role.APPLICANT):
            logger.warning("Ignoring role_id=%s on registration of %r", registration.role_id, registration.username)

        try:
            with self._provider.transaction() as session:
                row = PersonModel(
                    name=registration.name,
                    surname=registration.surname,
                    ssn=registration.ssn,
                    email=registration.email,
                    username=registration.username,
                    password=hash_password(registration.password, iterations=self._hash_iterations),
                    role_id=int(Role.APPLICANT),
                )
                session.add(row)
                session.flush()
                dto = _person_to_dto(row)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                message="could not create person", context={"username": registration.username}, cause=exc
            ) from exc

        logger.info("Registered person id=%s username=%r", dto.person_id, dto.username)
        return dto

    def update_person(self, person_id: int, **fields: Any) -> Optional[PersonDTO]:
        """Update mutable profile fields; returns None if the person does not exist."""
        validators.is_positive_integer(person_id, "person_id")
        unknown = set(fields) - MUTABLE_PERSON_FIELDS
        if unknown:
            raise ValidationError(
                message=f"cannot update person fields: {', '.join(sorted(unknown))}.",
                context={"person_id": person_id},
            )
        if "email" in fields:
            validators.is_email_valid(fields["email"])

        try:
            with self._provider.transaction() as session:
                row = session.get(PersonModel, int(person_id))
                if row is None:
                    return None
                for key, value in fields.items():
                    setattr(row, key, value)
                session.flush()
                return _person_to_dto(row)
        except SQLAlchemyError as exc:
            raise PersistenceError(
                message="could not update person", context={"person_id": person_id}, cause=exc
            ) from exc

    def set_password_by_email(self, email: str, password: str) -> bool:
        validators.is_email_valid(email)
        validators.is_string_non_zero_length(password, "password")
        try:
            with self._provider.transaction() as session:
                row = session.execute(select(PersonModel).where(PersonModel.email == email)).scalar_one_or_none()
                if row is None:
                    return False
                row.password = hash_password(password, iterations=self._hash_iterations)
        except SQLAlchemyError as exc:
            raise PersistenceError(message="could not set password", context={"email": email}, cause=exc) from exc
        logger.info("Password updated for person id=%s", row.person_id)
        return True

    def login(self, username: str, password: str) -> Optional[PersonDTO]:
        """Return the person when ``username``/``password`` match, else None."""
        try:
            with self._provider.session() as session:
                row = session.execute(
                    select(PersonModel).where(PersonModel.username == username)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError(message="could not log in", context={"username": username}, cause=exc) from exc

        if row is None or not verify_password(password, row.password):
            logger.info("Failed login attempt for username=%r", username)
            return None
        return _person_to_dto(row)

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from recruitment.config import AppConfig
from recruitment.core.errors import PersistenceError
from recruitment.domain.application import ApplicationSubmission, StatusUpdate
from recruitment.domain.person import PersonDTO, PersonRegistration
from recruitment.infrastructure.stores.application_store import SqlAlchemyApplicationStore
from recruitment.infrastructure.stores.competence_store import SqlAlchemyCompetenceStore
from recruitment.infrastructure.stores.models import Base
from recruitment.infrastructure.stores.person_store import SqlAlchemyPersonStore
from recruitment.infrastructure.stores.sqlalchemy_db import SessionProvider, get_db_url
from recruitment.utils.passwords import DEFAULT_ITERATIONS

logger = logging.getLogger(__name__)


class RecruitmentDAO:
    """
    The single data-access object of the recruitment core.

    Owns one connection pool (via SessionProvider) shared by the person,
    competence and application stores. Construct it at startup, call
    ``close()`` at shutdown (or use it as a context manager).
    """

    def __init__(
        self,
        db_url: Optional[str] = None,
        *,
        auto_create_schema: bool = True,
        echo: bool = False,
        pool_pre_ping: bool = True,
        hash_iterations: int = DEFAULT_ITERATIONS,
    ):
        self.db_url = db_url or get_db_url()
        self._provider = SessionProvider(self.db_url, echo=echo, pool_pre_ping=pool_pre_ping)
        self.persons = SqlAlchemyPersonStore(self._provider, hash_iterations=hash_iterations)
        self.competences = SqlAlchemyCompetenceStore(self._provider)
        self.applications = SqlAlchemyApplicationStore(self._provider)
        if auto_create_schema:
            self.create_tables()

    @classmethod
    def from_config(cls, config: AppConfig) -> "RecruitmentDAO":
        return cls(
            config.database.resolved_url(),
            auto_create_schema=config.database.auto_create_schema,
            echo=config.database.echo,
            pool_pre_ping=config.database.pool_pre_ping,
            hash_iterations=config.security.password_hash_iterations,
        )

    @property
    def provider(self) -> SessionProvider:
        return self._provider

    def create_tables(self) -> None:
        """Create missing tables; existing tables are never altered or dropped."""
        try:
            with self._provider.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            Base.metadata.create_all(self._provider.engine)
        except SQLAlchemyError as exc:
            raise PersistenceError(message="could not connect to database", cause=exc) from exc
        logger.info("Database schema ready at %s", self._provider.engine.url.render_as_string(hide_password=True))

    # Person
    def find_person_by_id(self, person_id: int) -> Optional[PersonDTO]:
        return self.persons.find_person_by_id(person_id)

    def find_person_by_email(self, email: str) -> Optional[PersonDTO]:
        return self.persons.find_person_by_email(email)

    def find_person_by_username(self, username: str) -> Optional[PersonDTO]:
        return self.persons.find_person_by_username(username)

    def create_person(self, registration: Union[PersonRegistration, Dict[str, Any]]) -> PersonDTO:
        return self.persons.create_person(registration)

    def update_person(self, person_id: int, **fields: Any) -> Optional[PersonDTO]:
        return self.persons.update_person(person_id, **fields)

    def set_password_by_email(self, email: str, password: str) -> bool:
        return self.persons.set_password_by_email(email, password)

    def login(self, username: str, password: str) -> Optional[PersonDTO]:
        return self.persons.login(username, password)

    # Competence
    def list_competences(self, *, language: Optional[str] = None) -> List[Dict[str, Any]]:
        return self.competences.list_competences(language=language)

    # Application
    def submit_application(self, submission: Union[ApplicationSubmission, Dict[str, Any]]) -> Dict[str, Any]:
        return self.applications.submit_application(submission)

    def list_applications(self) -> List[Dict[str, Any]]:
        return self.applications.list_applications()

    def get_application(self, username: str) -> Optional[Dict[str, Any]]:
        return self.applications.get_application(username)

    def update_status(self, update: Union[StatusUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        return self.applications.update_status(update)

    def close(self) -> None:
        self._provider.dispose()

    def __enter__(self) -> "RecruitmentDAO":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncRecruitmentDAO:
    """
    Coroutine facade over RecruitmentDAO for callers running on an event loop.

    Each call runs in a worker thread and still commits or aborts completely
    before it returns.
    """

    def __init__(self, dao: RecruitmentDAO):
        self._dao = dao

    @property
    def dao(self) -> RecruitmentDAO:
        return self._dao

    async def find_person_by_id(self, person_id: int) -> Optional[PersonDTO]:
        return await asyncio.to_thread(self._dao.find_person_by_id, person_id)

    async def find_person_by_email(self, email: str) -> Optional[PersonDTO]:
        return await asyncio.to_thread(self._dao.find_person_by_email, email)

    async def find_person_by_username(self, username: str) -> Optional[PersonDTO]:
        return await asyncio.to_thread(self._dao.find_person_by_username, username)

    async def create_person(self, registration: Union[PersonRegistration, Dict[str, Any]]) -> PersonDTO:
        return await asyncio.to_thread(self._dao.create_person, registration)

    async def update_person(self, person_id: int, **fields: Any) -> Optional[PersonDTO]:
        return await asyncio.to_thread(self._dao.update_person, person_id, **fields)

    async def set_password_by_email(self, email: str, password: str) -> bool:
        return await asyncio.to_thread(self._dao.set_password_by_email, email, password)

    async def login(self, username: str, password: str) -> Optional[PersonDTO]:
        return await asyncio.to_thread(self._dao.login, username, password)

    async def list_competences(self, *, language: Optional[str] = None) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._dao.list_competences, language=language)

    async def submit_application(self, submission: Union[ApplicationSubmission, Dict[str, Any]]) -> Dict[str, Any]:
        return await asyncio.to_thread(self._dao.submit_application, submission)

    async def list_applications(self) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._dao.list_applications)

    async def get_application(self, username: str) -> Optional[Dict[str, Any]]:
        return await asyncio.to_thread(self._dao.get_application, username)

    async def update_status(self, update: Union[StatusUpdate, Dict[str, Any]]) -> Dict[str, Any]:
        return await asyncio.to_thread(self._dao.update_status, update)

    async def close(self) -> None:
        await asyncio.to_thread(self._dao.close)

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, URL
from sqlalchemy.orm import sessionmaker, Session


DEFAULT_DB_URL = "sqlite:///data/recruitment.db"


def _compose_db_url() -> Optional[str]:
    # DB_NAME/DB_USER/DB_PASS/DB_HOST/DB_PORT/DB_DIALECT, as used by local dev setups
    name = os.getenv("DB_NAME")
    if not name:
        return None
    port = os.getenv("DB_PORT")
    url = URL.create(
        drivername=os.getenv("DB_DIALECT") or "postgresql",
        username=os.getenv("DB_USER") or None,
        password=os.getenv("DB_PASS") or None,
        host=os.getenv("DB_HOST") or None,
        port=int(port) if port else None,
        database=name,
    )
    return url.render_as_string(hide_password=False)


def get_db_url() -> str:
    return (
        os.getenv("RECRUITMENT_DB_URL")
        or os.getenv("DATABASE_URL")
        or _compose_db_url()
        or DEFAULT_DB_URL
    )


def _ensure_sqlite_parent_dir(db_url: str) -> None:
    # sqlite:///relative/path.db or sqlite:////abs/path.db
    if not db_url.startswith("sqlite:"):
        return
    if db_url.startswith("sqlite:///:"):
        path = db_url.replace("sqlite:///", "", 1)
    elif db_url.startswith("sqlite:////"):
        path = db_url.replace("sqlite:////", "/", 1)
    elif db_url.startswith("sqlite:///"):
        path = db_url.replace("sqlite:///", "", 1)
    else:
        # sqlite:// (rare) or sqlite:pure-memory
        return
    if path in (":memory:", ""):
        return
    Path(path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_url: Optional[str] = None, *, echo: bool = False, pool_pre_ping: bool = True) -> Engine:
    url = db_url or get_db_url()
    _ensure_sqlite_parent_dir(url)
    connect_args = {}
    if url.startswith("sqlite:"):
        connect_args = {"check_same_thread": False, "timeout": 30}
    engine = create_engine(url, future=True, echo=echo, pool_pre_ping=pool_pre_ping, connect_args=connect_args)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: Engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


class SessionProvider:
    """
    Owns the engine (connection pool) and hands out sessions.

    - session(): plain session for reads; caller closes it (use as context manager)
    - transaction(): one atomic unit of work, committed on success, rolled back on any error
    """

    def __init__(self, db_url: Optional[str] = None, *, echo: bool = False, pool_pre_ping: bool = True):
        self.db_url = db_url or get_db_url()
        self.engine = create_db_engine(self.db_url, echo=echo, pool_pre_ping=pool_pre_ping)
        self._factory = create_session_factory(self.engine)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def session(self) -> Session:
        return self._factory()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        session = self._factory()
        try:
            with session.begin():
                yield session
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()

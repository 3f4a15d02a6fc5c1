from __future__ import annotations

import pytest
from sqlalchemy import inspect, text

from recruitment.config import AppConfig
from recruitment.core.errors import PersistenceError
from recruitment.infrastructure.stores.dao import RecruitmentDAO
from tests.helpers import make_registration


def test_create_tables_builds_five_tables(dao):
    tables = set(inspect(dao.provider.engine).get_table_names())
    assert tables == {"person", "competence", "competence_translation", "competence_profile", "availability"}


def test_create_tables_keeps_existing_data(db_url):
    with RecruitmentDAO(db_url, hash_iterations=1_000) as first:
        first.create_person(make_registration("henry"))

    with RecruitmentDAO(db_url, hash_iterations=1_000) as second:
        second.create_tables()
        assert second.find_person_by_username("henry") is not None


def test_create_tables_leaves_existing_table_definitions_alone(db_url):
    dao = RecruitmentDAO(db_url, auto_create_schema=False)
    try:
        with dao.provider.transaction() as session:
            session.execute(text("CREATE TABLE competence (competence_id INTEGER PRIMARY KEY, legacy TEXT)"))
        dao.create_tables()
        columns = {c["name"] for c in inspect(dao.provider.engine).get_columns("competence")}
        assert "legacy" in columns
    finally:
        dao.close()


def test_create_tables_unreachable_database(tmp_path):
    # a directory cannot be opened as a SQLite database file
    bad_url = f"sqlite:///{tmp_path}"
    with pytest.raises(PersistenceError, match="could not connect to database"):
        RecruitmentDAO(bad_url)


def test_from_config(db_url):
    config = AppConfig()
    config.database.url = db_url
    config.security.password_hash_iterations = 1_000

    with RecruitmentDAO.from_config(config) as dao:
        assert dao.db_url == db_url
        person = dao.create_person(make_registration("iris"))
        assert dao.login("iris", "iris-secret") == person

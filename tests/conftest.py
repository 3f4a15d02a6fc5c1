# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import recruitment` works without installing.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.helpers import make_registration  # noqa: E402


COMPETENCES = {
    1: {"en": "ticket sales", "sv": "biljettförsäljning"},
    2: {"en": "lotteries", "sv": "lotterier"},
    3: {"en": "roller coaster operation", "sv": "berg- och dalbanedrift"},
}


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'recruitment_test.db'}"


@pytest.fixture
def dao(db_url):
    from recruitment.infrastructure.stores.dao import RecruitmentDAO

    dao = RecruitmentDAO(db_url, hash_iterations=1_000)
    yield dao
    dao.close()


@pytest.fixture
def seeded_dao(dao):
    """DAO with three translated competences and one (id 4) without translations."""
    from recruitment.infrastructure.stores.models import CompetenceModel, CompetenceTranslationModel

    with dao.provider.transaction() as session:
        for competence_id, names in COMPETENCES.items():
            session.add(
                CompetenceModel(
                    competence_id=competence_id,
                    translations=[
                        CompetenceTranslationModel(language=lang, name=name) for lang, name in names.items()
                    ],
                )
            )
        session.add(CompetenceModel(competence_id=4))
    return dao


@pytest.fixture
def alice(seeded_dao):
    return seeded_dao.create_person(make_registration("alice"))


@pytest.fixture
def bob(seeded_dao):
    return seeded_dao.create_person(make_registration("bob"))

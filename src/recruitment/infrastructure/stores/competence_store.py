from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from recruitment.core.errors import PersistenceError
from recruitment.infrastructure.stores.models import CompetenceModel, CompetenceTranslationModel
from recruitment.infrastructure.stores.sqlalchemy_db import SessionProvider

logger = logging.getLogger(__name__)


def translation_to_dict(row: CompetenceTranslationModel) -> Dict[str, Any]:
    return {"language": row.language, "name": row.name}


def competence_to_dict(row: CompetenceModel) -> Dict[str, Any]:
    return {
        "competence_id": row.competence_id,
        "translations": [translation_to_dict(t) for t in row.translations],
    }


class SqlAlchemyCompetenceStore:
    """Read-only job-competence categories with their localized names."""

    def __init__(self, provider: SessionProvider):
        self._provider = provider

    def list_competences(self, *, language: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        All competences that have at least one translation (inner join).

        With ``language`` set, only translations in that language are returned
        and competences lacking one are left out.
        """
        stmt = (
            select(CompetenceModel)
            .join(CompetenceModel.translations)
            .options(contains_eager(CompetenceModel.translations))
            .order_by(CompetenceModel.competence_id, CompetenceTranslationModel.language)
        )
        if language:
            stmt = stmt.where(CompetenceTranslationModel.language == language)

        try:
            with self._provider.session() as session:
                rows = session.execute(stmt).unique().scalars().all()
                result = [competence_to_dict(r) for r in rows]
        except SQLAlchemyError as exc:
            raise PersistenceError(message="could not list competences", cause=exc) from exc

        logger.debug("Listed %d competences (language=%s)", len(result), language)
        return result

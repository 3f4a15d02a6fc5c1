"""
Shared test helpers.
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import func, select


def make_registration(username: str, **overrides: Any) -> Dict[str, Any]:
    data = {
        "name": username.capitalize(),
        "surname": "Tester",
        "ssn": "19900101-1234",
        "email": f"{username}@example.com",
        "username": username,
        "password": f"{username}-secret",
    }
    data.update(overrides)
    return data


def count_rows(dao, model) -> int:
    with dao.provider.session() as session:
        return session.execute(select(func.count()).select_from(model)).scalar_one()

# recruitment/__init__.py
"""
Recruitment - job-application backend core.

- person registration, lookup and login
- competence categories with localized names
- application submission and optimistic-concurrency status review
"""

from __future__ import annotations

__version__ = "1.0.0"


# lazy imports keep `import recruitment` free of SQLAlchemy setup
def __getattr__(name: str):
    if name == "RecruitmentDAO":
        from recruitment.infrastructure.stores.dao import RecruitmentDAO
        return RecruitmentDAO
    if name == "AsyncRecruitmentDAO":
        from recruitment.infrastructure.stores.dao import AsyncRecruitmentDAO
        return AsyncRecruitmentDAO
    if name == "SessionProvider":
        from recruitment.infrastructure.stores.sqlalchemy_db import SessionProvider
        return SessionProvider
    if name == "AppConfig":
        from recruitment.config import AppConfig
        return AppConfig
    if name == "load_config":
        from recruitment.config import load_config
        return load_config
    if name == "configure_logging":
        from recruitment.infrastructure.logging import configure_logging
        return configure_logging

    raise AttributeError(f"module 'recruitment' has no attribute '{name}'")


__all__ = [
    "__version__",
    "RecruitmentDAO",
    "AsyncRecruitmentDAO",
    "SessionProvider",
    "AppConfig",
    "load_config",
    "configure_logging",
]

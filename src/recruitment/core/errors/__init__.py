"""
Unified error module.
"""

from .errors import (
    RecruitmentError,
    NotFoundError,
    ValidationError,
    VersionConflictError,
    PersistenceError,
)

__all__ = [
    "RecruitmentError",
    "NotFoundError",
    "ValidationError",
    "VersionConflictError",
    "PersistenceError",
]

"""
Error taxonomy for the recruitment core.

Every store operation either returns its declared result or raises exactly one
of the errors below; driver-level exceptions are always wrapped in
``PersistenceError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(eq=False)
class RecruitmentError(Exception):
    message: str
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return text


@dataclass(eq=False)
class NotFoundError(RecruitmentError):
    code: str = "NOT_FOUND"


@dataclass(eq=False)
class ValidationError(RecruitmentError):
    code: str = "VALIDATION_ERROR"


@dataclass(eq=False)
class VersionConflictError(RecruitmentError):
    """Raised when the presented version_number no longer matches the stored one."""

    code: str = "VERSION_CONFLICT"
    current_version: Optional[int] = None


@dataclass(eq=False)
class PersistenceError(RecruitmentError):
    """Wraps a low-level database failure; ``message`` names the failing operation."""

    code: str = "PERSISTENCE_ERROR"

"""
Error taxonomy unit tests
"""

import pytest

from recruitment.core.errors import (
    NotFoundError,
    PersistenceError,
    RecruitmentError,
    ValidationError,
    VersionConflictError,
)


class TestRecruitmentError:
    def test_error_str(self):
        err = RecruitmentError(message="Test error", code="TEST")
        assert str(err) == "[TEST] Test error"

    def test_error_with_context(self):
        err = RecruitmentError(message="Failed", context={"key": "value"})
        assert err.context == {"key": "value"}

    def test_str_includes_wrapped_cause(self):
        err = PersistenceError(message="could not submit application", cause=RuntimeError("disk full"))
        assert str(err) == "[PERSISTENCE_ERROR] could not submit application: disk full"


class TestSpecificErrors:
    def test_codes(self):
        assert NotFoundError(message="x").code == "NOT_FOUND"
        assert ValidationError(message="x").code == "VALIDATION_ERROR"
        assert VersionConflictError(message="x").code == "VERSION_CONFLICT"
        assert PersistenceError(message="x").code == "PERSISTENCE_ERROR"

    def test_all_are_recruitment_errors(self):
        for cls in (NotFoundError, ValidationError, VersionConflictError, PersistenceError):
            with pytest.raises(RecruitmentError):
                raise cls(message="boom")

    def test_version_conflict_carries_current_version(self):
        err = VersionConflictError(message="stale", current_version=3)
        assert err.current_version == 3

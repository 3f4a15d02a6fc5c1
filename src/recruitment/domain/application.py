"""
Inbound records for the application workflow.

Callers hand these (or plain dicts of the same shape) to
``SqlAlchemyApplicationStore``; primitive validation has normally already happened,
but date parsing is deferred to ``AvailabilityPeriod.to_dates`` so that a
malformed period aborts the surrounding transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from recruitment.core.errors import ValidationError


DateLike = Union[str, date]


class ApplicationStatus(str, Enum):
    UNHANDLED = "unhandled"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: Union[str, "ApplicationStatus"]) -> "ApplicationStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(message=f"application_status must be one of: {allowed}.") from None


def _parse_date(value: DateLike, var_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(message=f"{var_name} needs to be a date in YYYY-MM-DD format.") from None


@dataclass
class CompetenceEntry:
    competence_id: int
    years_of_experience: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompetenceEntry":
        try:
            return cls(
                competence_id=int(data["competence_id"]),
                years_of_experience=float(data["years_of_experience"]),
            )
        except (KeyError, TypeError, ValueError):
            raise ValidationError(
                message="competence entries need a numeric competence_id and years_of_experience.",
                context={"entry": data},
            ) from None


@dataclass
class AvailabilityPeriod:
    from_date: DateLike
    to_date: DateLike

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AvailabilityPeriod":
        if "from_date" not in data or "to_date" not in data:
            raise ValidationError(message="periods need from_date and to_date.", context={"period": data})
        return cls(from_date=data["from_date"], to_date=data["to_date"])

    def to_dates(self) -> Tuple[date, date]:
        start = _parse_date(self.from_date, "from_date")
        end = _parse_date(self.to_date, "to_date")
        if start > end:
            raise ValidationError(
                message="from_date must not be after to_date.",
                context={"from_date": start.isoformat(), "to_date": end.isoformat()},
            )
        return start, end


@dataclass
class ApplicationSubmission:
    """A competence + availability application for the person behind ``username``."""

    username: str
    competencies: List[CompetenceEntry] = field(default_factory=list)
    periods: List[AvailabilityPeriod] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicationSubmission":
        return cls(
            username=str(data.get("username") or ""),
            competencies=[
                c if isinstance(c, CompetenceEntry) else CompetenceEntry.from_dict(c)
                for c in data.get("competencies") or []
            ],
            periods=[
                p if isinstance(p, AvailabilityPeriod) else AvailabilityPeriod.from_dict(p)
                for p in data.get("periods") or []
            ],
        )


@dataclass
class StatusUpdate:
    availability_id: int
    application_status: ApplicationStatus
    version_number: int

    def __post_init__(self):
        self.application_status = ApplicationStatus.parse(self.application_status)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatusUpdate":
        try:
            availability_id = int(data["availability_id"])
            version_number = int(data["version_number"])
        except (KeyError, TypeError, ValueError):
            raise ValidationError(
                message="availability_id and version_number need to be integers.",
                context={"update": data},
            ) from None
        return cls(
            availability_id=availability_id,
            application_status=data.get("application_status"),
            version_number=version_number,
        )

# src/recruitment/domain/__init__.py
"""
Domain records for the recruitment core:
- person: registration input and the PersonDTO projection
- application: submission / status-update records and ApplicationStatus
"""

from .person import PersonDTO, PersonRegistration, Role
from .application import (
    ApplicationStatus,
    ApplicationSubmission,
    AvailabilityPeriod,
    CompetenceEntry,
    StatusUpdate,
)

__all__ = [
    "PersonDTO",
    "PersonRegistration",
    "Role",
    "ApplicationStatus",
    "ApplicationSubmission",
    "AvailabilityPeriod",
    "CompetenceEntry",
    "StatusUpdate",
]

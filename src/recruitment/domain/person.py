"""
Person records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional


class Role(IntEnum):
    RECRUITER = 1
    APPLICANT = 2


@dataclass
class PersonRegistration:
    """Registration input; any caller-supplied role is ignored on create."""

    name: str
    surname: str
    ssn: str
    email: str
    username: str
    password: str
    role_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonRegistration":
        return cls(
            name=data.get("name", ""),
            surname=data.get("surname", ""),
            ssn=data.get("ssn", ""),
            email=data.get("email", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            role_id=data.get("role_id"),
        )


@dataclass
class PersonDTO:
    """Transport-safe projection of a person row (never carries the password hash)."""

    person_id: int
    name: Optional[str]
    surname: Optional[str]
    ssn: Optional[str]
    email: Optional[str]
    username: Optional[str]
    role_id: int

    @property
    def is_recruiter(self) -> bool:
        return self.role_id == Role.RECRUITER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "person_id": self.person_id,
            "name": self.name,
            "surname": self.surname,
            "ssn": self.ssn,
            "email": self.email,
            "username": self.username,
            "role_id": self.role_id,
        }

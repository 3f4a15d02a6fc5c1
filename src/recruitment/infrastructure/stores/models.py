from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class PersonModel(Base):
    __tablename__ = "person"

    person_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    surname: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    ssn: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    # salted hash, see recruitment.utils.passwords
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role_id: Mapped[int] = mapped_column(Integer, default=2)  # 1=recruiter, 2=applicant

    competence_profiles: Mapped[List["CompetenceProfileModel"]] = relationship(
        back_populates="person", cascade="all, delete-orphan", order_by="CompetenceProfileModel.competence_id"
    )
    availabilities: Mapped[List["AvailabilityModel"]] = relationship(
        back_populates="person", cascade="all, delete-orphan", order_by="AvailabilityModel.availability_id"
    )


class CompetenceModel(Base):
    __tablename__ = "competence"

    competence_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    translations: Mapped[List["CompetenceTranslationModel"]] = relationship(
        back_populates="competence",
        cascade="all, delete-orphan",
        order_by="CompetenceTranslationModel.language",
    )


class CompetenceTranslationModel(Base):
    __tablename__ = "competence_translation"
    __table_args__ = (UniqueConstraint("competence_id", "language", name="uq_competence_translation_language"),)

    competence_translation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    competence_id: Mapped[int] = mapped_column(Integer, ForeignKey("competence.competence_id"), index=True)
    language: Mapped[str] = mapped_column(String(16))
    name: Mapped[str] = mapped_column(String(255))

    competence: Mapped[CompetenceModel] = relationship(back_populates="translations")


class CompetenceProfileModel(Base):
    """One row per (person, competence); resubmission overwrites years_of_experience."""

    __tablename__ = "competence_profile"

    person_id: Mapped[int] = mapped_column(Integer, ForeignKey("person.person_id"), primary_key=True)
    competence_id: Mapped[int] = mapped_column(Integer, ForeignKey("competence.competence_id"), primary_key=True)
    years_of_experience: Mapped[float] = mapped_column(Numeric(4, 2, asdecimal=False))

    person: Mapped[PersonModel] = relationship(back_populates="competence_profiles")
    competence: Mapped[Optional[CompetenceModel]] = relationship()


class AvailabilityModel(Base):
    __tablename__ = "availability"

    availability_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(Integer, ForeignKey("person.person_id"), index=True)
    from_date: Mapped[date] = mapped_column(Date)
    to_date: Mapped[date] = mapped_column(Date)
    application_status: Mapped[str] = mapped_column(String(32), default="unhandled", index=True)
    version_number: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    person: Mapped[PersonModel] = relationship(back_populates="availabilities")

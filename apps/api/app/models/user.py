"""Patient account model."""
from __future__ import annotations

from datetime import datetime
import enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .appointment import Appointment
    from .profile import MedicalComplication, Organization, SocialPlatform


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


GENDER_TYPE = Enum(Gender, name="gender", values_callable=lambda members: [m.value for m in members])


class User(Base):
    """Registered patient."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    address: Mapped[str | None] = mapped_column(String)
    country_code: Mapped[str | None] = mapped_column(String(8))
    nhs_number: Mapped[str | None] = mapped_column(String(32))
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    blood_group: Mapped[str | None] = mapped_column(String(8))
    gender: Mapped[Gender | None] = mapped_column(GENDER_TYPE)
    profile_pic: Mapped[str | None] = mapped_column(String)
    password: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    appointments: Mapped[list["Appointment"]] = relationship("Appointment", back_populates="patient")
    social_platforms: Mapped[list["SocialPlatform"]] = relationship(
        "SocialPlatform", back_populates="user", cascade="all, delete-orphan"
    )
    medical_complications: Mapped[list["MedicalComplication"]] = relationship(
        "MedicalComplication", back_populates="user", cascade="all, delete-orphan"
    )
    organizations: Mapped[list["Organization"]] = relationship(
        "Organization", back_populates="user", cascade="all, delete-orphan"
    )

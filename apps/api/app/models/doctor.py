"""Doctor account model."""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base
from .user import GENDER_TYPE, Gender

if TYPE_CHECKING:
    from .appointment import Appointment


class Doctor(Base):
    """Registered clinician."""

    __tablename__ = "doctors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    address: Mapped[str | None] = mapped_column(String)
    country_code: Mapped[str | None] = mapped_column(String(8))
    nhs_number: Mapped[str | None] = mapped_column(String(32))
    phone: Mapped[str | None] = mapped_column(String(32))
    department: Mapped[str | None] = mapped_column(String(255), index=True)
    role: Mapped[str | None] = mapped_column(String(255))
    hospital: Mapped[str | None] = mapped_column(String(255))
    gender: Mapped[Gender | None] = mapped_column(GENDER_TYPE)
    profile_pic: Mapped[str | None] = mapped_column(String)
    password: Mapped[str] = mapped_column(String, nullable=False)

    appointments: Mapped[list["Appointment"]] = relationship("Appointment", back_populates="doctor")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

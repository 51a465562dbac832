"""Per-user profile collections."""
from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .user import User


class SocialPlatform(Base):
    """A social network handle linked to a patient."""

    __tablename__ = "social_platforms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    platform: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str | None] = mapped_column(String)

    user: Mapped["User"] = relationship("User", back_populates="social_platforms")


class MedicalComplication(Base):
    """A diagnosed condition on a patient's record."""

    __tablename__ = "medical_complications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    complication: Mapped[str] = mapped_column(String, nullable=False)
    diagnosed_at: Mapped[date | None] = mapped_column(Date)

    user: Mapped["User"] = relationship("User", back_populates="medical_complications")


class Organization(Base):
    """An organization membership for a patient."""

    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    organization_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str | None] = mapped_column(String(255))
    joined_at: Mapped[date | None] = mapped_column(Date)

    user: Mapped["User"] = relationship("User", back_populates="organizations")

"""Schemas for registration, login, and profile lookups."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models.user import Gender


class UserProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    address: str | None = None
    country_code: str | None = None
    nhs_number: str | None = None
    phone: str
    blood_group: str | None = None
    gender: Gender | None = None
    profile_pic: str | None = None
    created_at: datetime | None = None


class DoctorProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    address: str | None = None
    country_code: str | None = None
    nhs_number: str | None = None
    phone: str | None = None
    department: str | None = None
    role: str | None = None
    hospital: str | None = None
    gender: Gender | None = None
    profile_pic: str | None = None


class UserRegistrationResponse(BaseModel):
    message: str
    user: UserProfile


class DoctorRegistrationResponse(BaseModel):
    message: str
    doctor: DoctorProfile


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    message: str
    user: UserProfile | None = None
    doctor: DoctorProfile | None = None

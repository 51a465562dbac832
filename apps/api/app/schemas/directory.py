"""Schemas for the doctor and hospital directory."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models.user import Gender


class DoctorCard(BaseModel):
    id: int
    first_name: str
    last_name: str
    specialty: str | None = None
    hospital: str | None = None
    role: str | None = None
    gender: Gender | None = None
    profile_pic: str | None = None


class Department(BaseModel):
    department: str


class DoctorsByDepartmentResponse(BaseModel):
    success: bool = True
    data: dict[str, list[str]] = Field(default_factory=dict)


class HospitalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str | None = None
    city: str | None = None
    phone: str | None = None

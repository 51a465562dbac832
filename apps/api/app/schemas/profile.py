"""Schemas for social platforms, medical complications, and organizations."""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    message: str


class SocialPlatformUpdate(BaseModel):
    platform: str = Field(..., min_length=1, max_length=255)
    url: str | None = None


class SocialPlatformCreate(SocialPlatformUpdate):
    user_id: int


class SocialPlatformOut(SocialPlatformCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class MedicalComplicationUpdate(BaseModel):
    complication: str = Field(..., min_length=1)
    diagnosed_at: date | None = None


class MedicalComplicationCreate(MedicalComplicationUpdate):
    user_id: int


class MedicalComplicationOut(MedicalComplicationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class OrganizationUpdate(BaseModel):
    organization_name: str = Field(..., min_length=1, max_length=255)
    role: str | None = None
    joined_at: date | None = None


class OrganizationCreate(OrganizationUpdate):
    user_id: int


class OrganizationOut(OrganizationCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int

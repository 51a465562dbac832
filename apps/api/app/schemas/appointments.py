"""Schemas for appointment records."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..models.appointment import AppointmentStatus


class AppointmentCreateRequest(BaseModel):
    patient_id: int
    hospital_id: int
    doctor_id: int
    appointment_date: datetime
    status: AppointmentStatus = Field(default=AppointmentStatus.PENDING)


class AppointmentCreateResponse(BaseModel):
    message: str
    appointment_id: int


class AppointmentSummary(BaseModel):
    id: int
    appointment_date: datetime
    status: AppointmentStatus
    patient_name: str
    doctor_name: str
    hospital_name: str


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AppointmentMessage(BaseModel):
    message: str

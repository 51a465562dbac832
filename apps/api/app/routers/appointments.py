"""Appointment record endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import appointments as appointments_schema
from ..services import appointments as appointments_service

router = APIRouter()


@router.post(
    "/appointments",
    response_model=appointments_schema.AppointmentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_appointment(
    payload: appointments_schema.AppointmentCreateRequest,
    session: AsyncSession = Depends(get_session),
) -> appointments_schema.AppointmentCreateResponse:
    """Book a new appointment."""

    return await appointments_service.create_appointment(payload, session)


@router.get("/appointments", response_model=list[appointments_schema.AppointmentSummary])
async def list_appointments(
    session: AsyncSession = Depends(get_session),
) -> list[appointments_schema.AppointmentSummary]:
    """Return all appointments with participant names."""

    return await appointments_service.list_appointments(session)


@router.put("/appointments/{appointment_id}", response_model=appointments_schema.AppointmentMessage)
async def update_appointment(
    appointment_id: int,
    payload: appointments_schema.AppointmentStatusUpdate,
    session: AsyncSession = Depends(get_session),
) -> appointments_schema.AppointmentMessage:
    """Change an appointment's status."""

    return await appointments_service.update_status(appointment_id, payload, session)


@router.delete("/appointments/{appointment_id}", response_model=appointments_schema.AppointmentMessage)
async def delete_appointment(
    appointment_id: int,
    session: AsyncSession = Depends(get_session),
) -> appointments_schema.AppointmentMessage:
    """Remove an appointment."""

    return await appointments_service.delete_appointment(appointment_id, session)

"""Business logic for appointment records."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories import appointments as appointments_repo
from ..schemas import appointments as schemas

logger = logging.getLogger(__name__)


async def create_appointment(
    payload: schemas.AppointmentCreateRequest,
    session: AsyncSession,
) -> schemas.AppointmentCreateResponse:
    """Book an appointment for an existing patient, doctor, and hospital."""

    try:
        async with session.begin():
            appointment_id = await appointments_repo.create_appointment(
                session,
                patient_id=payload.patient_id,
                hospital_id=payload.hospital_id,
                doctor_id=payload.doctor_id,
                appointment_date=_ensure_tz(payload.appointment_date),
                status=payload.status,
            )
    except IntegrityError as exc:
        logger.warning("Appointment references missing records: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unknown patient, doctor, or hospital",
        ) from exc

    return schemas.AppointmentCreateResponse(
        message="Appointment created successfully", appointment_id=appointment_id
    )


async def list_appointments(session: AsyncSession) -> list[schemas.AppointmentSummary]:
    rows = await appointments_repo.list_with_names(session)
    return [
        schemas.AppointmentSummary(
            id=row.id,
            appointment_date=row.appointment_date,
            status=row.status,
            patient_name=row.patient_name,
            doctor_name=row.doctor_name,
            hospital_name=row.hospital_name,
        )
        for row in rows
    ]


async def update_status(
    appointment_id: int,
    payload: schemas.AppointmentStatusUpdate,
    session: AsyncSession,
) -> schemas.AppointmentMessage:
    async with session.begin():
        found = await appointments_repo.set_status(session, appointment_id, payload.status)
        if not found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
    return schemas.AppointmentMessage(message="Appointment updated successfully")


async def delete_appointment(appointment_id: int, session: AsyncSession) -> schemas.AppointmentMessage:
    async with session.begin():
        found = await appointments_repo.delete_appointment(session, appointment_id)
        if not found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
    return schemas.AppointmentMessage(message="Appointment deleted successfully")


def _ensure_tz(value: datetime) -> datetime:
    """Ensure the datetime is timezone-aware in UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

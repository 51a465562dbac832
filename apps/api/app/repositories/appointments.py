"""Appointment persistence helpers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.appointment import Appointment, AppointmentStatus
from ..models.doctor import Doctor
from ..models.hospital import Hospital
from ..models.user import User


@dataclass(slots=True)
class AppointmentRow:
    id: int
    appointment_date: datetime
    status: AppointmentStatus
    patient_name: str
    doctor_name: str
    hospital_name: str


async def create_appointment(
    session: AsyncSession,
    *,
    patient_id: int,
    hospital_id: int,
    doctor_id: int,
    appointment_date: datetime,
    status: AppointmentStatus = AppointmentStatus.PENDING,
) -> int:
    """Persist a new appointment and return its identifier."""

    appointment = Appointment(
        patient_id=patient_id,
        hospital_id=hospital_id,
        doctor_id=doctor_id,
        appointment_date=appointment_date,
        status=status,
    )
    session.add(appointment)
    await session.flush()
    return appointment.id


async def list_with_names(session: AsyncSession) -> list[AppointmentRow]:
    """Return appointments joined with patient, doctor, and hospital names."""

    stmt = (
        select(
            Appointment.id,
            Appointment.appointment_date,
            Appointment.status,
            User.first_name,
            User.last_name,
            Doctor.first_name,
            Doctor.last_name,
            Hospital.name,
        )
        .join(User, Appointment.patient_id == User.id)
        .join(Doctor, Appointment.doctor_id == Doctor.id)
        .join(Hospital, Appointment.hospital_id == Hospital.id)
        .order_by(Appointment.appointment_date.asc(), Appointment.id.asc())
    )
    result = await session.execute(stmt)
    return [
        AppointmentRow(
            id=row[0],
            appointment_date=row[1],
            status=row[2],
            patient_name=f"{row[3]} {row[4]}".strip(),
            doctor_name=f"{row[5]} {row[6]}".strip(),
            hospital_name=row[7],
        )
        for row in result.all()
    ]


async def set_status(session: AsyncSession, appointment_id: int, status: AppointmentStatus) -> bool:
    """Update an appointment's status; return False when it does not exist."""

    appointment = await session.get(Appointment, appointment_id)
    if appointment is None:
        return False
    appointment.status = status
    session.add(appointment)
    return True


async def delete_appointment(session: AsyncSession, appointment_id: int) -> bool:
    """Delete an appointment; return False when it does not exist."""

    appointment = await session.get(Appointment, appointment_id)
    if appointment is None:
        return False
    await session.delete(appointment)
    return True

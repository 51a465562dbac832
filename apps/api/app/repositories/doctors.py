"""Doctor repository helpers."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.doctor import Doctor
from ..models.user import Gender


async def get_by_email(session: AsyncSession, email: str) -> Doctor | None:
    """Return the doctor registered with ``email``."""

    result = await session.execute(select(Doctor).where(Doctor.email == email))
    return result.scalar_one_or_none()


async def create_doctor(
    session: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password_hash: str,
    address: str | None = None,
    country_code: str | None = None,
    nhs_number: str | None = None,
    phone: str | None = None,
    department: str | None = None,
    role: str | None = None,
    hospital: str | None = None,
    gender: Gender | None = None,
    profile_pic: str | None = None,
) -> Doctor:
    """Persist a new doctor and return it with its generated id."""

    doctor = Doctor(
        first_name=first_name,
        last_name=last_name,
        email=email,
        address=address,
        country_code=country_code,
        nhs_number=nhs_number,
        phone=phone,
        department=department,
        role=role,
        hospital=hospital,
        gender=gender,
        profile_pic=profile_pic,
        password=password_hash,
    )
    session.add(doctor)
    await session.flush()
    return doctor


async def list_doctors(session: AsyncSession) -> list[Doctor]:
    """Return every doctor ordered by department then surname."""

    stmt = select(Doctor).order_by(Doctor.department.asc(), Doctor.last_name.asc(), Doctor.id.asc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_departments(session: AsyncSession) -> list[str]:
    """Return the distinct non-empty departments."""

    stmt = (
        select(Doctor.department)
        .where(Doctor.department.is_not(None))
        .distinct()
        .order_by(Doctor.department.asc())
    )
    result = await session.execute(stmt)
    return [department for department in result.scalars().all() if department]

"""Read-only doctor and hospital directory."""
from __future__ import annotations

from collections import defaultdict

from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories import doctors as doctors_repo
from ..repositories import hospitals as hospitals_repo
from ..schemas import directory as schemas

UNASSIGNED_DEPARTMENT = "Unassigned"


async def list_doctors(session: AsyncSession) -> list[schemas.DoctorCard]:
    doctors = await doctors_repo.list_doctors(session)
    return [
        schemas.DoctorCard(
            id=doctor.id,
            first_name=doctor.first_name,
            last_name=doctor.last_name,
            specialty=doctor.department,
            hospital=doctor.hospital,
            role=doctor.role,
            gender=doctor.gender,
            profile_pic=doctor.profile_pic,
        )
        for doctor in doctors
    ]


async def list_departments(session: AsyncSession) -> list[schemas.Department]:
    departments = await doctors_repo.list_departments(session)
    return [schemas.Department(department=name) for name in departments]


async def doctors_by_department(session: AsyncSession) -> schemas.DoctorsByDepartmentResponse:
    """Group doctor names under their department."""

    grouped: dict[str, list[str]] = defaultdict(list)
    for doctor in await doctors_repo.list_doctors(session):
        grouped[doctor.department or UNASSIGNED_DEPARTMENT].append(doctor.full_name)
    return schemas.DoctorsByDepartmentResponse(success=True, data=dict(grouped))


async def list_hospitals(session: AsyncSession) -> list[schemas.HospitalOut]:
    hospitals = await hospitals_repo.list_hospitals(session)
    return [schemas.HospitalOut.model_validate(hospital) for hospital in hospitals]

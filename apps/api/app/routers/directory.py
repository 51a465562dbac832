"""Doctor and hospital directory endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import directory as directory_schema
from ..services import directory as directory_service

router = APIRouter()


@router.get("/doctors", response_model=list[directory_schema.DoctorCard])
async def list_doctors(session: AsyncSession = Depends(get_session)) -> list[directory_schema.DoctorCard]:
    """Return every doctor with their specialty."""

    return await directory_service.list_doctors(session)


@router.get("/departments", response_model=list[directory_schema.Department])
async def list_departments(session: AsyncSession = Depends(get_session)) -> list[directory_schema.Department]:
    """Return the distinct departments that have doctors."""

    return await directory_service.list_departments(session)


@router.get("/api/doctors", response_model=directory_schema.DoctorsByDepartmentResponse)
async def doctors_by_department(
    session: AsyncSession = Depends(get_session),
) -> directory_schema.DoctorsByDepartmentResponse:
    """Return doctor names grouped by department."""

    return await directory_service.doctors_by_department(session)


@router.get("/api/hospitals", response_model=list[directory_schema.HospitalOut])
async def list_hospitals(session: AsyncSession = Depends(get_session)) -> list[directory_schema.HospitalOut]:
    """Return all hospitals."""

    return await directory_service.list_hospitals(session)

"""CRUD endpoints for a patient's social platforms, complications, and organizations."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import profile as profile_schema
from ..services import profile as profile_service

router = APIRouter()


@router.get("/social-platforms/{user_id}", response_model=list[profile_schema.SocialPlatformOut])
async def list_social_platforms(user_id: int, session: AsyncSession = Depends(get_session)):
    return await profile_service.list_entries(profile_service.SOCIAL_PLATFORMS, user_id, session)


@router.post("/social-platforms", response_model=profile_schema.SocialPlatformOut)
async def create_social_platform(
    payload: profile_schema.SocialPlatformCreate,
    session: AsyncSession = Depends(get_session),
):
    return await profile_service.create_entry(profile_service.SOCIAL_PLATFORMS, payload, session)


@router.put("/social-platforms/{row_id}", response_model=profile_schema.MessageResponse)
async def update_social_platform(
    row_id: int,
    payload: profile_schema.SocialPlatformUpdate,
    session: AsyncSession = Depends(get_session),
) -> profile_schema.MessageResponse:
    return await profile_service.update_entry(profile_service.SOCIAL_PLATFORMS, row_id, payload, session)


@router.delete("/social-platforms/{row_id}", response_model=profile_schema.MessageResponse)
async def delete_social_platform(row_id: int, session: AsyncSession = Depends(get_session)) -> profile_schema.MessageResponse:
    return await profile_service.delete_entry(profile_service.SOCIAL_PLATFORMS, row_id, session)


@router.get("/medical-complications/{user_id}", response_model=list[profile_schema.MedicalComplicationOut])
async def list_medical_complications(user_id: int, session: AsyncSession = Depends(get_session)):
    return await profile_service.list_entries(profile_service.MEDICAL_COMPLICATIONS, user_id, session)


@router.post("/medical-complications", response_model=profile_schema.MedicalComplicationOut)
async def create_medical_complication(
    payload: profile_schema.MedicalComplicationCreate,
    session: AsyncSession = Depends(get_session),
):
    return await profile_service.create_entry(profile_service.MEDICAL_COMPLICATIONS, payload, session)


@router.put("/medical-complications/{row_id}", response_model=profile_schema.MessageResponse)
async def update_medical_complication(
    row_id: int,
    payload: profile_schema.MedicalComplicationUpdate,
    session: AsyncSession = Depends(get_session),
) -> profile_schema.MessageResponse:
    return await profile_service.update_entry(profile_service.MEDICAL_COMPLICATIONS, row_id, payload, session)


@router.delete("/medical-complications/{row_id}", response_model=profile_schema.MessageResponse)
async def delete_medical_complication(
    row_id: int,
    session: AsyncSession = Depends(get_session),
) -> profile_schema.MessageResponse:
    return await profile_service.delete_entry(profile_service.MEDICAL_COMPLICATIONS, row_id, session)


@router.get("/organizations/{user_id}", response_model=list[profile_schema.OrganizationOut])
async def list_organizations(user_id: int, session: AsyncSession = Depends(get_session)):
    return await profile_service.list_entries(profile_service.ORGANIZATIONS, user_id, session)


@router.post("/organizations", response_model=profile_schema.OrganizationOut)
async def create_organization(
    payload: profile_schema.OrganizationCreate,
    session: AsyncSession = Depends(get_session),
):
    return await profile_service.create_entry(profile_service.ORGANIZATIONS, payload, session)


@router.put("/organizations/{row_id}", response_model=profile_schema.MessageResponse)
async def update_organization(
    row_id: int,
    payload: profile_schema.OrganizationUpdate,
    session: AsyncSession = Depends(get_session),
) -> profile_schema.MessageResponse:
    return await profile_service.update_entry(profile_service.ORGANIZATIONS, row_id, payload, session)


@router.delete("/organizations/{row_id}", response_model=profile_schema.MessageResponse)
async def delete_organization(row_id: int, session: AsyncSession = Depends(get_session)) -> profile_schema.MessageResponse:
    return await profile_service.delete_entry(profile_service.ORGANIZATIONS, row_id, session)

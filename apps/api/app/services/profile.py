"""Business logic for the per-user profile collections."""
from __future__ import annotations

from dataclasses import dataclass

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.profile import MedicalComplication, Organization, SocialPlatform
from ..repositories import profile as profile_repo
from ..schemas import profile as schemas


@dataclass(frozen=True, slots=True)
class Collection:
    """Binds one profile table to its API schemas and wording."""

    label: str
    model: type
    output: type[BaseModel]


SOCIAL_PLATFORMS = Collection("Social platform", SocialPlatform, schemas.SocialPlatformOut)
MEDICAL_COMPLICATIONS = Collection("Medical complication", MedicalComplication, schemas.MedicalComplicationOut)
ORGANIZATIONS = Collection("Organization", Organization, schemas.OrganizationOut)


async def list_entries(collection: Collection, user_id: int, session: AsyncSession) -> list[BaseModel]:
    rows = await profile_repo.list_for_user(session, collection.model, user_id)
    return [collection.output.model_validate(row) for row in rows]


async def create_entry(collection: Collection, payload: BaseModel, session: AsyncSession) -> BaseModel:
    try:
        async with session.begin():
            row = await profile_repo.create(session, collection.model, **payload.model_dump())
    except IntegrityError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    return collection.output.model_validate(row)


async def update_entry(
    collection: Collection,
    row_id: int,
    payload: BaseModel,
    session: AsyncSession,
) -> schemas.MessageResponse:
    async with session.begin():
        row = await profile_repo.update(session, collection.model, row_id, **payload.model_dump())
        if row is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{collection.label} not found")
    return schemas.MessageResponse(message=f"{collection.label} updated successfully")


async def delete_entry(collection: Collection, row_id: int, session: AsyncSession) -> schemas.MessageResponse:
    async with session.begin():
        deleted = await profile_repo.delete(session, collection.model, row_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{collection.label} not found")
    return schemas.MessageResponse(message=f"{collection.label} deleted successfully")

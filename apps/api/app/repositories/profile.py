"""Persistence helpers shared by the per-user profile collections."""
from __future__ import annotations

from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.profile import MedicalComplication, Organization, SocialPlatform

ProfileModel = TypeVar("ProfileModel", SocialPlatform, MedicalComplication, Organization)


async def list_for_user(session: AsyncSession, model: type[ProfileModel], user_id: int) -> list[ProfileModel]:
    """Return every row of ``model`` owned by the user, oldest first."""

    stmt = select(model).where(model.user_id == user_id).order_by(model.id.asc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create(session: AsyncSession, model: type[ProfileModel], **fields: Any) -> ProfileModel:
    """Insert a row and return it with its generated id."""

    row = model(**fields)
    session.add(row)
    await session.flush()
    return row


async def update(session: AsyncSession, model: type[ProfileModel], row_id: int, **fields: Any) -> ProfileModel | None:
    """Apply ``fields`` to an existing row; return None when it does not exist."""

    row = await session.get(model, row_id)
    if row is None:
        return None
    for name, value in fields.items():
        setattr(row, name, value)
    session.add(row)
    await session.flush()
    return row


async def delete(session: AsyncSession, model: type[ProfileModel], row_id: int) -> bool:
    """Delete a row; return False when it does not exist."""

    row = await session.get(model, row_id)
    if row is None:
        return False
    await session.delete(row)
    await session.flush()
    return True

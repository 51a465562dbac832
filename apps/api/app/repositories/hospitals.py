"""Hospital repository helpers."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.hospital import Hospital


async def list_hospitals(session: AsyncSession) -> list[Hospital]:
    """Return all hospitals ordered by name."""

    result = await session.execute(select(Hospital).order_by(Hospital.name.asc(), Hospital.id.asc()))
    return list(result.scalars().all())

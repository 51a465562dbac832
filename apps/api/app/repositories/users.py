"""User repository helpers."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import Gender, User


async def get_by_id(session: AsyncSession, user_id: int) -> User | None:
    """Return a user by identifier."""

    return await session.get(User, user_id)


async def get_by_email(session: AsyncSession, email: str) -> User | None:
    """Return the user registered with ``email``."""

    stmt: Select[tuple[User]] = select(User).where(User.email == email)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    password_hash: str,
    address: str | None = None,
    country_code: str | None = None,
    nhs_number: str | None = None,
    blood_group: str | None = None,
    gender: Gender | None = None,
    profile_pic: str | None = None,
) -> User:
    """Persist a new user and return it with its generated id."""

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        address=address,
        country_code=country_code,
        nhs_number=nhs_number,
        phone=phone,
        blood_group=blood_group,
        gender=gender,
        profile_pic=profile_pic,
        password=password_hash,
        created_at=datetime.now(timezone.utc),
    )
    session.add(user)
    await session.flush()
    return user

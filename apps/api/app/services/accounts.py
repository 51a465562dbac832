"""Registration and login for patients and doctors."""
from __future__ import annotations

import asyncio
import logging

import bcrypt
from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..models.user import Gender
from ..repositories import doctors as doctors_repo
from ..repositories import users as users_repo
from ..schemas import accounts as schemas
from . import uploads

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


async def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` without blocking the event loop."""

    loop = asyncio.get_running_loop()

    def _hash() -> str:
        salt = bcrypt.gensalt(rounds=settings.password_hash_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    return await loop.run_in_executor(None, _hash)


async def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a stored bcrypt hash."""

    loop = asyncio.get_running_loop()

    def _check() -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    return await loop.run_in_executor(None, _check)


def parse_gender(value: str | None, *, required: bool) -> Gender | None:
    """Map the submitted gender to the enum, rejecting unknown values."""

    if not value:
        if required:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid gender value. It must be one of: Male, Female, Other.",
            )
        return None
    try:
        return Gender(value)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid gender value. It must be one of: Male, Female, Other.",
        ) from exc


async def register_user(
    session: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    password: str,
    gender: str | None,
    address: str | None = None,
    country_code: str | None = None,
    nhs_number: str | None = None,
    blood_group: str | None = None,
    picture: UploadFile | None = None,
) -> schemas.UserRegistrationResponse:
    """Create a patient account."""

    parsed_gender = parse_gender(gender, required=True)
    _require(first_name, last_name, email, phone, password)
    password_hash = await hash_password(password)
    profile_pic = await uploads.save_profile_picture(picture)

    try:
        async with session.begin():
            if await users_repo.get_by_email(session, email) is not None:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered")
            user = await users_repo.create_user(
                session,
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                password_hash=password_hash,
                address=address,
                country_code=country_code,
                nhs_number=nhs_number,
                blood_group=blood_group,
                gender=parsed_gender,
                profile_pic=profile_pic,
            )
    except IntegrityError as exc:
        logger.warning("User registration conflicted for %s: %s", email, exc)
        await uploads.discard_profile_picture(profile_pic)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered") from exc
    except Exception:
        await uploads.discard_profile_picture(profile_pic)
        raise

    return schemas.UserRegistrationResponse(
        message="User registered successfully!",
        user=schemas.UserProfile.model_validate(user),
    )


async def register_doctor(
    session: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    gender: str | None = None,
    address: str | None = None,
    country_code: str | None = None,
    nhs_number: str | None = None,
    phone: str | None = None,
    department: str | None = None,
    role: str | None = None,
    hospital: str | None = None,
    picture: UploadFile | None = None,
) -> schemas.DoctorRegistrationResponse:
    """Create a doctor account."""

    parsed_gender = parse_gender(gender, required=False)
    _require(first_name, last_name, email, password)
    password_hash = await hash_password(password)
    profile_pic = await uploads.save_profile_picture(picture)

    try:
        async with session.begin():
            if await doctors_repo.get_by_email(session, email) is not None:
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered")
            doctor = await doctors_repo.create_doctor(
                session,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
                address=address,
                country_code=country_code,
                nhs_number=nhs_number,
                phone=phone,
                department=department,
                role=role,
                hospital=hospital,
                gender=parsed_gender,
                profile_pic=profile_pic,
            )
    except IntegrityError as exc:
        logger.warning("Doctor registration conflicted for %s: %s", email, exc)
        await uploads.discard_profile_picture(profile_pic)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered") from exc
    except Exception:
        await uploads.discard_profile_picture(profile_pic)
        raise

    return schemas.DoctorRegistrationResponse(
        message="Doctor registered successfully!",
        doctor=schemas.DoctorProfile.model_validate(doctor),
    )


async def login(payload: schemas.LoginRequest, session: AsyncSession) -> schemas.LoginResponse:
    """Authenticate against patients first, then doctors."""

    user = await users_repo.get_by_email(session, payload.email)
    if user is not None:
        if await verify_password(payload.password, user.password):
            return schemas.LoginResponse(
                message="User logged in successfully",
                user=schemas.UserProfile.model_validate(user),
            )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)

    doctor = await doctors_repo.get_by_email(session, payload.email)
    if doctor is not None and await verify_password(payload.password, doctor.password):
        return schemas.LoginResponse(
            message="Doctor logged in successfully",
            doctor=schemas.DoctorProfile.model_validate(doctor),
        )

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)


async def get_user_profile(user_id: int, session: AsyncSession) -> schemas.UserProfile:
    """Return a patient's profile or raise 404."""

    user = await users_repo.get_by_id(session, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return schemas.UserProfile.model_validate(user)


def _require(*values: str | None) -> None:
    if any(not (value or "").strip() for value in values):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please provide all required fields.")

"""Registration, login, and patient profile endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import accounts as accounts_schema
from ..services import accounts as accounts_service

router = APIRouter()

NAME_MAX = 255


@router.post("/register/user", response_model=accounts_schema.UserRegistrationResponse)
async def register_user(
    first_name: str = Form(..., max_length=NAME_MAX),
    last_name: str = Form(..., max_length=NAME_MAX),
    email: str = Form(..., max_length=NAME_MAX),
    phone: str = Form(...),
    password: str = Form(...),
    gender: str | None = Form(default=None),
    address: str | None = Form(default=None),
    country_code: str | None = Form(default=None),
    nhs_number: str | None = Form(default=None),
    blood_group: str | None = Form(default=None),
    profile_pic: UploadFile | None = File(default=None),
    session: AsyncSession = Depends(get_session),
) -> accounts_schema.UserRegistrationResponse:
    """Register a patient, optionally with a profile picture."""

    return await accounts_service.register_user(
        session,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        password=password,
        gender=gender,
        address=address,
        country_code=country_code,
        nhs_number=nhs_number,
        blood_group=blood_group,
        picture=profile_pic,
    )


@router.post("/register/doctor", response_model=accounts_schema.DoctorRegistrationResponse)
async def register_doctor(
    first_name: str = Form(..., max_length=NAME_MAX),
    last_name: str = Form(..., max_length=NAME_MAX),
    email: str = Form(..., max_length=NAME_MAX),
    password: str = Form(...),
    gender: str | None = Form(default=None),
    address: str | None = Form(default=None),
    country_code: str | None = Form(default=None),
    nhs_number: str | None = Form(default=None),
    phone: str | None = Form(default=None),
    department: str | None = Form(default=None),
    role: str | None = Form(default=None),
    hospital: str | None = Form(default=None),
    profile_pic: UploadFile | None = File(default=None),
    session: AsyncSession = Depends(get_session),
) -> accounts_schema.DoctorRegistrationResponse:
    """Register a doctor, optionally with a profile picture."""

    return await accounts_service.register_doctor(
        session,
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
        gender=gender,
        address=address,
        country_code=country_code,
        nhs_number=nhs_number,
        phone=phone,
        department=department,
        role=role,
        hospital=hospital,
        picture=profile_pic,
    )


@router.post("/login", response_model=accounts_schema.LoginResponse, response_model_exclude_none=True)
async def login(
    payload: accounts_schema.LoginRequest,
    session: AsyncSession = Depends(get_session),
) -> accounts_schema.LoginResponse:
    """Log in as a patient or a doctor."""

    return await accounts_service.login(payload, session)


@router.get("/api/user/{user_id}", response_model=accounts_schema.UserProfile)
async def get_user(user_id: int, session: AsyncSession = Depends(get_session)) -> accounts_schema.UserProfile:
    """Return a patient's profile."""

    return await accounts_service.get_user_profile(user_id, session)

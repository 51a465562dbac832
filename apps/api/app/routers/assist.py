"""Translation and prescription endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import get_session
from ..schemas import assist as assist_schema
from ..services import assist as assist_service

router = APIRouter()


@router.post("/detect-and-translate", response_model=assist_schema.TranslateResponse)
async def detect_and_translate(
    payload: assist_schema.TranslateRequest,
    session: AsyncSession = Depends(get_session),
) -> assist_schema.TranslateResponse:
    """Detect the input language, translate it, and store the note."""

    return await assist_service.translate_note(payload, session)


@router.post("/generate-prescription", response_model=assist_schema.PrescriptionResponse)
async def generate_prescription(payload: assist_schema.PrescriptionRequest) -> assist_schema.PrescriptionResponse:
    """Draft a prescription from described symptoms."""

    return await assist_service.draft_prescription(payload)

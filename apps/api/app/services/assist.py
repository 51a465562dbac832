"""Translation notes and prescription drafting for clinicians."""
from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories import notes as notes_repo
from ..schemas import assist as schemas
from . import llm, translation

logger = logging.getLogger(__name__)


async def translate_note(payload: schemas.TranslateRequest, session: AsyncSession) -> schemas.TranslateResponse:
    """Translate the text and keep a copy of both versions."""

    try:
        result = await translation.detect_and_translate(payload.text, payload.target_language)
    except translation.TranslationError as exc:
        logger.exception("Translation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="An error occurred during language detection or translation.",
        ) from exc

    try:
        async with session.begin():
            await notes_repo.create_note(
                session,
                original_text=payload.text,
                translated_text=result.translated_text,
                source_language=result.detected_language,
                target_language=payload.target_language,
            )
    except SQLAlchemyError as exc:
        logger.exception("Error storing translation note")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error") from exc

    return schemas.TranslateResponse(
        detected_language=result.detected_language,
        translated_text=result.translated_text,
    )


async def draft_prescription(payload: schemas.PrescriptionRequest) -> schemas.PrescriptionResponse:
    """Ask the language model for a prescription draft."""

    try:
        prescription = await llm.generate_prescription(payload.text)
    except llm.LLMQuotaExceededError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="API quota exceeded. Please try again later or contact support.",
        ) from exc
    except llm.LLMUnavailableError as exc:
        logger.exception("Prescription generation unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to generate prescription. Please try again later.",
        ) from exc

    return schemas.PrescriptionResponse(prescription=prescription)

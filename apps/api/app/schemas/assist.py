"""Schemas for translation and prescription assistance."""
from __future__ import annotations

from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    text: str = Field(..., min_length=1)
    target_language: str = Field(..., min_length=1, description="ISO-639 language code")


class TranslateResponse(BaseModel):
    detected_language: str
    translated_text: str


class PrescriptionRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Symptoms described by the patient")


class PrescriptionResponse(BaseModel):
    prescription: str

"""Prescription drafting built on Gemini.

Models are tried in order (``gemini_model`` then ``gemini_model_fallbacks``);
a missing model moves on to the next one, an exhausted quota stops at once.
"""
from __future__ import annotations

import asyncio
import logging
from functools import lru_cache

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from ..core.config import settings

SYSTEM_PROMPT = "You are a medical assistant that provides prescriptions."
NO_PRESCRIPTION = "No prescription generated."

logger = logging.getLogger(__name__)


class LLMUnavailableError(RuntimeError):
    """No configured Gemini model could produce a prescription."""


class LLMQuotaExceededError(LLMUnavailableError):
    """The provider reported that the API quota is exhausted."""


def _api_key() -> str:
    return settings.gemini_api_key.strip()


@lru_cache
def _configure(api_key: str) -> None:
    genai.configure(api_key=api_key)


_models: dict[str, genai.GenerativeModel] = {}


def _get_model(name: str) -> genai.GenerativeModel:
    """Return the prescription model called ``name``, building it on first use."""

    api_key = _api_key()
    if not api_key:
        raise LLMUnavailableError("GEMINI_API_KEY is missing")
    _configure(api_key)

    model = _models.get(name)
    if model is None:
        model = genai.GenerativeModel(name, system_instruction=SYSTEM_PROMPT)
        _models[name] = model
    return model


def _model_names() -> list[str]:
    names = [name.strip() for name in (settings.gemini_model, *settings.gemini_model_fallbacks)]
    return list(dict.fromkeys(name for name in names if name))


def _draft(model_name: str, prompt: str) -> str:
    response = _get_model(model_name).generate_content(prompt)
    return (getattr(response, "text", "") or "").strip()


async def generate_prescription(symptoms: str) -> str:
    """Return a drafted prescription for the described symptoms."""

    if not _api_key():
        raise LLMUnavailableError("GEMINI_API_KEY is missing")

    prompt = f"Based on the following symptoms, provide a medical prescription: {symptoms.strip()}"
    loop = asyncio.get_running_loop()
    failure: Exception | None = None

    for model_name in _model_names():
        try:
            text = await loop.run_in_executor(None, _draft, model_name, prompt)
        except google_exceptions.ResourceExhausted as exc:
            logger.warning("Gemini quota exhausted on %s: %s", model_name, exc)
            raise LLMQuotaExceededError("API quota exceeded") from exc
        except google_exceptions.NotFound as exc:
            logger.warning("Gemini model %s not available: %s", model_name, exc)
            _models.pop(model_name, None)
            failure = exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("Gemini generate_content failed for %s", model_name)
            failure = exc
        else:
            return text or NO_PRESCRIPTION

    raise LLMUnavailableError("No Gemini models responded") from failure

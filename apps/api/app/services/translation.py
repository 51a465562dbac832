"""Google Cloud Translation client (v2 REST API)."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..core.config import settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = httpx.Timeout(10.0, connect=5.0)


class TranslationError(RuntimeError):
    """Raised when the translation provider cannot serve a request."""


@dataclass(slots=True)
class TranslationResult:
    detected_language: str
    translated_text: str


async def _post_with_retry(client: httpx.AsyncClient, url: str, payload: dict[str, Any]) -> dict[str, Any]:
    """POST ``payload``, backing off exponentially while the provider answers 429."""

    delay = settings.translation_retry_delay_seconds
    retries_left = settings.translation_max_retries
    params = {"key": settings.google_translation_api_key}

    while True:
        response = await client.post(url, json=payload, params=params)
        if response.status_code == httpx.codes.TOO_MANY_REQUESTS and retries_left > 0:
            logger.warning("Translation rate limit hit; retrying in %.1f seconds", delay)
            await asyncio.sleep(delay)
            retries_left -= 1
            delay *= 2
            continue
        response.raise_for_status()
        return response.json()


async def detect_and_translate(
    text: str,
    target_language: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> TranslationResult:
    """Detect the language of ``text`` and translate it into ``target_language``."""

    if not settings.google_translation_api_key.strip():
        raise TranslationError("GOOGLE_TRANSLATION_API_KEY is missing")

    base_url = settings.translation_base_url.rstrip("/")
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT)
    try:
        detection = await _post_with_retry(http, f"{base_url}/detect", {"q": text})
        detected_language = detection["data"]["detections"][0][0]["language"]

        translation = await _post_with_retry(
            http,
            base_url,
            {"q": text, "source": detected_language, "target": target_language, "format": "text"},
        )
        translated_text = translation["data"]["translations"][0]["translatedText"]
    except httpx.HTTPError as exc:
        raise TranslationError(f"Translation request failed: {exc}") from exc
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise TranslationError("Unexpected translation response shape") from exc
    finally:
        if owns_client:
            await http.aclose()

    return TranslationResult(detected_language=detected_language, translated_text=translated_text)

import json

import httpx
import pytest

from app.services import translation


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(translation.settings, "google_translation_api_key", "test-key", raising=False)
    monkeypatch.setattr(
        translation.settings,
        "translation_base_url",
        "https://translation.example/language/translate/v2",
        raising=False,
    )
    monkeypatch.setattr(translation.settings, "translation_retry_delay_seconds", 0.0, raising=False)
    monkeypatch.setattr(translation.settings, "translation_max_retries", 2, raising=False)


def _google_handler(requests: list[httpx.Request], *, throttle: int = 0):
    remaining = {"throttle": throttle}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if remaining["throttle"] > 0:
            remaining["throttle"] -= 1
            return httpx.Response(429, json={"error": "rate limited"})
        body = json.loads(request.content)
        if request.url.path.endswith("/detect"):
            return httpx.Response(200, json={"data": {"detections": [[{"language": "es", "confidence": 1}]]}})
        assert body["source"] == "es"
        return httpx.Response(
            200, json={"data": {"translations": [{"translatedText": f"[{body['target']}] {body['q']}"}]}}
        )

    return handler


@pytest.mark.asyncio
async def test_detect_and_translate(configured) -> None:
    requests: list[httpx.Request] = []
    async with httpx.AsyncClient(transport=httpx.MockTransport(_google_handler(requests))) as client:
        result = await translation.detect_and_translate("me duele la cabeza", "en", client=client)

    assert result.detected_language == "es"
    assert result.translated_text == "[en] me duele la cabeza"
    assert [request.url.path for request in requests] == [
        "/language/translate/v2/detect",
        "/language/translate/v2",
    ]
    assert all(request.url.params["key"] == "test-key" for request in requests)


@pytest.mark.asyncio
async def test_rate_limited_requests_are_retried(configured) -> None:
    requests: list[httpx.Request] = []
    handler = _google_handler(requests, throttle=2)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await translation.detect_and_translate("hola", "fr", client=client)

    assert result.translated_text == "[fr] hola"
    assert len(requests) == 4


@pytest.mark.asyncio
async def test_rate_limit_beyond_retry_budget_fails(configured) -> None:
    requests: list[httpx.Request] = []
    handler = _google_handler(requests, throttle=5)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(translation.TranslationError):
            await translation.detect_and_translate("hola", "fr", client=client)

    assert len(requests) == 3


@pytest.mark.asyncio
async def test_unexpected_payload_is_translation_error(configured) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}}))
    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(translation.TranslationError):
            await translation.detect_and_translate("hola", "en", client=client)


@pytest.mark.asyncio
async def test_missing_api_key(monkeypatch) -> None:
    monkeypatch.setattr(translation.settings, "google_translation_api_key", "", raising=False)

    with pytest.raises(translation.TranslationError):
        await translation.detect_and_translate("hola", "en")

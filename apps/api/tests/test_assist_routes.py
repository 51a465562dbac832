from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.db.session import get_session
from app.main import app
from app.repositories import notes as notes_repo
from app.services import llm, translation


class DummySession:
    def begin(self):
        class _Tx:
            async def __aenter__(self_inner):
                return self

            async def __aexit__(self_inner, exc_type, exc, tb):
                return False

        return _Tx()


@pytest.fixture
def session_override():
    async def override_session():
        yield DummySession()

    app.dependency_overrides[get_session] = override_session
    yield
    app.dependency_overrides.pop(get_session, None)


async def _post(path: str, body: dict):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        return await client.post(path, json=body)


@pytest.mark.asyncio
async def test_translate_stores_note(monkeypatch, session_override) -> None:
    monkeypatch.setattr(
        translation,
        "detect_and_translate",
        AsyncMock(return_value=translation.TranslationResult(detected_language="de", translated_text="Hello")),
    )
    create_note = AsyncMock()
    monkeypatch.setattr(notes_repo, "create_note", create_note)

    response = await _post("/detect-and-translate", {"text": "Hallo", "target_language": "en"})

    assert response.status_code == 200
    assert response.json() == {"detected_language": "de", "translated_text": "Hello"}
    assert create_note.await_args.kwargs == {
        "original_text": "Hallo",
        "translated_text": "Hello",
        "source_language": "de",
        "target_language": "en",
    }


@pytest.mark.asyncio
async def test_translate_provider_failure_is_502(monkeypatch, session_override) -> None:
    monkeypatch.setattr(
        translation, "detect_and_translate", AsyncMock(side_effect=translation.TranslationError("down"))
    )

    response = await _post("/detect-and-translate", {"text": "Hallo", "target_language": "en"})

    assert response.status_code == 502


@pytest.mark.asyncio
async def test_translate_database_failure_is_500(monkeypatch, session_override) -> None:
    monkeypatch.setattr(
        translation,
        "detect_and_translate",
        AsyncMock(return_value=translation.TranslationResult(detected_language="de", translated_text="Hello")),
    )
    monkeypatch.setattr(
        notes_repo, "create_note", AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("down")))
    )

    response = await _post("/detect-and-translate", {"text": "Hallo", "target_language": "en"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Database error"


@pytest.mark.asyncio
async def test_translate_requires_text() -> None:
    response = await _post("/detect-and-translate", {"text": "", "target_language": "en"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_generate_prescription(monkeypatch) -> None:
    monkeypatch.setattr(llm, "generate_prescription", AsyncMock(return_value="Ibuprofen 200mg."))

    response = await _post("/generate-prescription", {"text": "back pain"})

    assert response.status_code == 200
    assert response.json() == {"prescription": "Ibuprofen 200mg."}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected_status"),
    [
        (llm.LLMQuotaExceededError("quota"), 403),
        (llm.LLMUnavailableError("down"), 503),
    ],
)
async def test_generate_prescription_errors(monkeypatch, error, expected_status) -> None:
    monkeypatch.setattr(llm, "generate_prescription", AsyncMock(side_effect=error))

    response = await _post("/generate-prescription", {"text": "back pain"})

    assert response.status_code == expected_status

from types import SimpleNamespace

import pytest
from google.api_core import exceptions as google_exceptions

from app.services import llm


class FakeModel:
    def __init__(self, *, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate_content(self, prompt: str):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(llm.settings, "gemini_api_key", "test-key", raising=False)
    monkeypatch.setattr(llm.settings, "gemini_model", "primary", raising=False)
    monkeypatch.setattr(llm.settings, "gemini_model_fallbacks", ["fallback", "primary"], raising=False)


@pytest.mark.asyncio
async def test_generate_prescription_without_api_key_is_unavailable(monkeypatch) -> None:
    monkeypatch.setattr(llm.settings, "gemini_api_key", "", raising=False)

    with pytest.raises(llm.LLMUnavailableError):
        await llm.generate_prescription("headache")


@pytest.mark.asyncio
async def test_generate_prescription_returns_model_text(monkeypatch, configured) -> None:
    model = FakeModel(text="  Paracetamol 500mg twice daily.  ")
    monkeypatch.setattr(llm, "_get_model", lambda name: model)

    result = await llm.generate_prescription("fever and headache ")

    assert result == "Paracetamol 500mg twice daily."
    assert model.prompts == [
        "Based on the following symptoms, provide a medical prescription: fever and headache"
    ]


@pytest.mark.asyncio
async def test_empty_response_yields_placeholder(monkeypatch, configured) -> None:
    monkeypatch.setattr(llm, "_get_model", lambda name: FakeModel(text=""))

    assert await llm.generate_prescription("cough") == llm.NO_PRESCRIPTION


@pytest.mark.asyncio
async def test_missing_model_falls_back_to_next_candidate(monkeypatch, configured) -> None:
    models = {
        "primary": FakeModel(error=google_exceptions.NotFound("no such model")),
        "fallback": FakeModel(text="Rest and fluids."),
    }
    requested: list[str] = []

    def fake_get_model(name: str) -> FakeModel:
        requested.append(name)
        return models[name]

    monkeypatch.setattr(llm, "_get_model", fake_get_model)

    assert await llm.generate_prescription("sore throat") == "Rest and fluids."
    assert requested == ["primary", "fallback"]


@pytest.mark.asyncio
async def test_quota_exhaustion_is_reported_separately(monkeypatch, configured) -> None:
    model = FakeModel(error=google_exceptions.ResourceExhausted("quota"))
    monkeypatch.setattr(llm, "_get_model", lambda name: model)

    with pytest.raises(llm.LLMQuotaExceededError):
        await llm.generate_prescription("rash")
    assert len(model.prompts) == 1


@pytest.mark.asyncio
async def test_all_models_failing_is_unavailable(monkeypatch, configured) -> None:
    monkeypatch.setattr(llm, "_get_model", lambda name: FakeModel(error=RuntimeError("boom")))

    with pytest.raises(llm.LLMUnavailableError) as exc:
        await llm.generate_prescription("nausea")
    assert not isinstance(exc.value, llm.LLMQuotaExceededError)

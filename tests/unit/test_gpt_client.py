"""Unit tests for the generation service boundary (no network)."""

from types import SimpleNamespace

import pytest

from interview_questions.errors import GenerationFailedError
from interview_questions.generation import gpt_client
from interview_questions.generation.prompts import build_generation_request


class FakeCompletions:
    def __init__(self, content=None, error=None, choices=None):
        self.content = content
        self.error = error
        self.choices = choices
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.choices is not None:
            return SimpleNamespace(choices=self.choices)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _install(monkeypatch, completions):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(gpt_client, "_client", client)


@pytest.mark.unit
async def test_returns_message_text_and_forwards_parameters(monkeypatch):
    completions = FakeCompletions(content='[{"question":"Q","category":"Skills"}]')
    _install(monkeypatch, completions)
    request = build_generation_request("Jane Doe, Python")

    text = await gpt_client.call_llm(request)

    assert text == '[{"question":"Q","category":"Skills"}]'
    call = completions.calls[0]
    assert call["model"] == gpt_client.LLM_MODEL
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 2500
    assert call["messages"] == [
        {"role": "system", "content": request.system_instruction},
        {"role": "user", "content": request.user_message},
    ]


@pytest.mark.unit
async def test_empty_content_becomes_empty_string(monkeypatch):
    _install(monkeypatch, FakeCompletions(content=None))

    assert await gpt_client.call_llm(build_generation_request("resume")) == ""


@pytest.mark.unit
async def test_completion_without_choices_is_generation_failed(monkeypatch):
    _install(monkeypatch, FakeCompletions(choices=[]))

    with pytest.raises(GenerationFailedError) as exc_info:
        await gpt_client.call_llm(build_generation_request("resume"))

    assert "no choices" in exc_info.value.detail


@pytest.mark.unit
async def test_client_errors_become_generation_failed(monkeypatch):
    _install(monkeypatch, FakeCompletions(error=ConnectionError("connection reset")))

    with pytest.raises(GenerationFailedError) as exc_info:
        await gpt_client.call_llm(build_generation_request("resume"))

    assert "connection reset" in exc_info.value.detail
    assert "GROQ_API_KEY" in exc_info.value.message


@pytest.mark.unit
async def test_missing_api_key_becomes_generation_failed(monkeypatch):
    monkeypatch.setattr(gpt_client, "_client", None)
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(GenerationFailedError):
        await gpt_client.call_llm(build_generation_request("resume"))


@pytest.mark.unit
async def test_client_is_created_once_without_retries(monkeypatch):
    monkeypatch.setattr(gpt_client, "_client", None)
    monkeypatch.setenv("GROQ_API_KEY", "test-key")

    first = gpt_client._get_client()

    assert gpt_client._get_client() is first
    assert first.max_retries == 0
    assert str(first.base_url).rstrip("/") == gpt_client.LLM_BASE_URL.rstrip("/")

"""
Provider adapters and the generation client, with the SDK clients replaced by fakes.
"""
from types import SimpleNamespace

import httpx
import openai
import pytest

from conftest import StubProvider
from resume_ace.core.config import Settings
from resume_ace.core.errors import ConfigError, GenerationError
from resume_ace.llm.gemini_provider import GeminiProvider
from resume_ace.llm.openai_provider import OpenAIProvider
from resume_ace.llm.router import build_provider, get_model_for_task, get_temperature_for_task
from resume_ace.services.generation import GenerationClient, GenerationRequest
from resume_ace.services.prompts import TaskKind


def gemini_with(generate_content):
    provider = GeminiProvider(api_key="test-key")
    provider.client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return provider


def openai_with(create):
    provider = OpenAIProvider(api_key="sk-test")
    provider.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return provider


@pytest.mark.anyio
async def test_gemini_returns_text_and_usage():
    captured = {}

    async def generate_content(model, contents, config):
        captured.update(model=model, contents=contents, config=config)
        usage = SimpleNamespace(prompt_token_count=12, candidates_token_count=30)
        return SimpleNamespace(text='{"score": 80}', usage_metadata=usage)

    response = await gemini_with(generate_content).generate("prompt", model="gemini-2.5-flash", temperature=0.2)

    assert response.content == '{"score": 80}'
    assert (response.tokens_in, response.tokens_out) == (12, 30)
    assert captured["model"] == "gemini-2.5-flash"
    assert captured["contents"] == "prompt"
    assert captured["config"].response_mime_type == "application/json"
    assert captured["config"].temperature == 0.2


@pytest.mark.anyio
async def test_gemini_transport_error_becomes_generation_error():
    async def generate_content(model, contents, config):
        raise httpx.ConnectError("connection refused")

    with pytest.raises(GenerationError, match="connection refused"):
        await gemini_with(generate_content).generate("prompt", model="gemini-2.5-flash")


@pytest.mark.anyio
async def test_gemini_empty_text():
    async def generate_content(model, contents, config):
        return SimpleNamespace(text=None, usage_metadata=None)

    response = await gemini_with(generate_content).generate("prompt", model="gemini-2.5-flash")

    assert response.content == ""
    assert response.tokens_in == 0


@pytest.mark.anyio
async def test_openai_returns_first_choice():
    captured = {}

    async def create(**kwargs):
        captured.update(kwargs)
        choice = SimpleNamespace(message=SimpleNamespace(content="Dear team"), finish_reason="stop")
        return SimpleNamespace(choices=[choice], usage=SimpleNamespace(prompt_tokens=5, completion_tokens=7))

    response = await openai_with(create).generate("prompt", model="gpt-4o-mini")

    assert response.content == "Dear team"
    assert response.metadata == {"finish_reason": "stop"}
    assert captured["messages"] == [{"role": "user", "content": "prompt"}]
    assert captured["response_format"] == {"type": "json_object"}


@pytest.mark.anyio
async def test_openai_api_error_becomes_generation_error():
    async def create(**kwargs):
        raise openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))

    with pytest.raises(GenerationError, match="OpenAI API error"):
        await openai_with(create).generate("prompt", model="gpt-4o-mini", json_mode=False)


def test_build_provider_selects_sdk():
    assert isinstance(build_provider(Settings(api_key="k", llm_provider="gemini")), GeminiProvider)
    assert isinstance(build_provider(Settings(api_key="k", llm_provider="openai")), OpenAIProvider)

    with pytest.raises(ConfigError):
        build_provider(Settings(api_key="k", llm_provider="llama"))


def test_model_and_temperature_routing():
    settings = Settings(api_key="k", llm_model="gemini-2.5-pro")

    assert get_model_for_task(TaskKind.ATS_SCORE, settings) == "gemini-2.5-pro"
    assert get_temperature_for_task(TaskKind.ATS_SCORE) < get_temperature_for_task(TaskKind.COVER_LETTER_TEXT)


@pytest.mark.anyio
async def test_generation_client_passes_model_and_returns_raw_text():
    provider = StubProvider(content="raw output")
    client = GenerationClient(provider, Settings(api_key="k"))

    text = await client.generate(GenerationRequest(TaskKind.COVER_LETTER_TEXT, "the prompt"))

    assert text == "raw output"
    assert provider.calls == [{"prompt": "the prompt", "model": "gemini-2.5-flash", "temperature": 0.7}]


@pytest.mark.anyio
async def test_generation_client_does_not_retry():
    provider = StubProvider(error=TimeoutError("slow"))
    client = GenerationClient(provider, Settings(api_key="k"))

    with pytest.raises(GenerationError, match="slow"):
        await client.generate(GenerationRequest(TaskKind.ATS_SCORE, "p"))

    assert len(provider.calls) == 1

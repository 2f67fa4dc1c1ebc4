from __future__ import annotations

import httpx
import pytest

from poi_generator.config import Settings
from poi_generator.errors import CompletionFormatError, ConfigurationError
from poi_generator.llm import LLMRequest, OpenAIChatConfig, OpenAIChatLLMClient
from tests.mocks.chat_completions import RecordingHandler, completion_payload


def _client(client: httpx.AsyncClient) -> OpenAIChatLLMClient:
    cfg = OpenAIChatConfig(api_key="test-key", base_url="https://api.openai.com/v1")
    return OpenAIChatLLMClient(cfg, client=client)


@pytest.mark.asyncio
async def test_chat_adapter_sends_expected_request_and_extracts_content() -> None:
    handler = RecordingHandler(payload=completion_payload("Louvre - Famous art museum"))
    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        llm = _client(client)
        resp = await llm.generate(LLMRequest(prompt="PROMPT"))

    request = handler.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert handler.last_body == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "system", "content": "PROMPT"}],
        "max_tokens": 150,
        "temperature": 0.7,
    }

    assert resp.output_text == "Louvre - Famous art museum"
    assert resp.raw["id"] == "chatcmpl-test"
    assert resp.usage.total_tokens == 33


@pytest.mark.asyncio
async def test_request_overrides_token_cap_and_temperature() -> None:
    handler = RecordingHandler(payload=completion_payload("x"))
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        llm = _client(client)
        await llm.generate(LLMRequest(prompt="P", role="user", max_tokens=20, temperature=0.0))

    body = handler.last_body
    assert body["messages"] == [{"role": "user", "content": "P"}]
    assert body["max_tokens"] == 20
    assert body["temperature"] == 0.0


@pytest.mark.asyncio
async def test_non_2xx_status_raises() -> None:
    handler = RecordingHandler(status_code=429, payload={"error": {"message": "rate limited"}})
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        llm = _client(client)
        with pytest.raises(httpx.HTTPStatusError):
            await llm.generate(LLMRequest(prompt="P"))


@pytest.mark.asyncio
async def test_transport_failure_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        llm = OpenAIChatLLMClient(OpenAIChatConfig(api_key="k"), client=client)
        with pytest.raises(httpx.ConnectError):
            await llm.generate(LLMRequest(prompt="P"))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"choices": []},
        {"object": "chat.completion"},
        {"choices": [{"index": 0}]},
        {"choices": [{"message": {"role": "assistant", "content": None}}]},
        ["not", "an", "object"],
    ],
)
async def test_malformed_payload_raises_completion_format_error(payload) -> None:
    handler = RecordingHandler(payload=payload)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        llm = _client(client)
        with pytest.raises(CompletionFormatError):
            await llm.generate(LLMRequest(prompt="P"))


@pytest.mark.asyncio
async def test_empty_content_is_returned_as_empty_text() -> None:
    handler = RecordingHandler(payload=completion_payload(""))
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        resp = await _client(client).generate(LLMRequest(prompt="P"))
    assert resp.output_text == ""


def test_from_settings_requires_api_key() -> None:
    with pytest.raises(ConfigurationError):
        OpenAIChatLLMClient.from_settings(Settings(_env_file=None, openai_api_key="  "))


def test_from_settings_uses_configured_model() -> None:
    settings = Settings(_env_file=None, openai_api_key="k", openai_model="gpt-4o-mini")
    llm = OpenAIChatLLMClient.from_settings(settings)
    assert llm.model == "gpt-4o-mini"
    assert llm.build_body(LLMRequest(prompt="P"))["model"] == "gpt-4o-mini"


@pytest.mark.asyncio
async def test_non_json_body_raises_completion_format_error() -> None:
    handler = RecordingHandler(text="<html>gateway</html>")
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(CompletionFormatError):
            await _client(client).generate(LLMRequest(prompt="P"))

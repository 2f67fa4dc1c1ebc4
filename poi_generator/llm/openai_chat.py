"""OpenAI Chat Completions adapter (HTTP-based).

Calls `POST {base_url}/chat/completions` with httpx. Transport errors and
non-2xx statuses are raised by httpx and propagate to the caller; a payload
without `choices[0].message.content` raises CompletionFormatError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from poi_generator.config import Settings, get_settings
from poi_generator.errors import CompletionFormatError, ConfigurationError
from poi_generator.llm.base import LLMClient, LLMRequest, LLMResponse, LLMUsage


@dataclass(frozen=True)
class OpenAIChatConfig:
    """Configuration for the OpenAI Chat Completions adapter."""

    api_key: str
    base_url: str = 'https://api.openai.com/v1'
    model: str = 'gpt-3.5-turbo'
    max_tokens: int = 150
    temperature: float = 0.7
    timeout: float = 60.0


class OpenAIChatLLMClient(LLMClient):
    """LLM adapter that calls OpenAI's Chat Completions API."""

    def __init__(self, config: OpenAIChatConfig, client: httpx.AsyncClient | None = None) -> None:
        self._cfg = config
        self._client = client

    @property
    def model(self) -> str:
        return self._cfg.model

    @staticmethod
    def from_settings(settings: Settings | None = None) -> 'OpenAIChatLLMClient':
        settings = settings or get_settings()
        api_key = settings.openai_api_key.strip()
        if not api_key:
            raise ConfigurationError('APP_OPENAI_API_KEY is required to use OpenAIChatLLMClient.')
        cfg = OpenAIChatConfig(
            api_key=api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
            temperature=settings.openai_temperature,
            timeout=settings.openai_timeout,
        )
        return OpenAIChatLLMClient(cfg)

    def build_body(self, request: LLMRequest) -> dict[str, Any]:
        return {
            'model': self._cfg.model,
            'messages': [{'role': request.role, 'content': request.prompt}],
            'max_tokens': request.max_tokens if request.max_tokens is not None else self._cfg.max_tokens,
            'temperature': request.temperature if request.temperature is not None else self._cfg.temperature,
        }

    async def generate(self, request: LLMRequest) -> LLMResponse:
        url = f'{self._cfg.base_url.rstrip("/")}/chat/completions'
        headers = {
            'Authorization': f'Bearer {self._cfg.api_key}',
            'Content-Type': 'application/json',
        }
        body = self.build_body(request)

        if self._client is not None:
            return await self._post(self._client, url, body, headers)

        async with httpx.AsyncClient() as client:
            return await self._post(client, url, body, headers)

    async def _post(
            self,
            client: httpx.AsyncClient,
            url: str,
            body: dict[str, Any],
            headers: dict[str, str],
    ) -> LLMResponse:
        resp = await client.post(url, json=body, headers=headers, timeout=self._cfg.timeout)
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError as exc:
            raise CompletionFormatError('Completion body is not JSON.') from exc
        return LLMResponse(
            output_text=_extract_message_content(payload),
            raw=payload,
            usage=_extract_usage(payload),
        )


def _extract_message_content(payload: Any) -> str:
    """Return `choices[0].message.content` or raise CompletionFormatError.

    An empty string is a valid (if useless) completion and is returned as-is.
    """
    if not isinstance(payload, dict):
        raise CompletionFormatError('Completion payload is not a JSON object.')

    choices = payload.get('choices')
    if not isinstance(choices, list) or not choices:
        raise CompletionFormatError('Completion payload has no choices.')

    first = choices[0]
    message = first.get('message') if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise CompletionFormatError('First choice has no message.')

    content = message.get('content')
    if not isinstance(content, str):
        raise CompletionFormatError('First choice message has no text content.')
    return content


def _extract_usage(payload: dict[str, Any]) -> LLMUsage:
    usage = payload.get('usage')
    if not isinstance(usage, dict):
        return LLMUsage()

    prompt_tokens = usage.get('prompt_tokens')
    completion_tokens = usage.get('completion_tokens')
    total_tokens = usage.get('total_tokens')

    return LLMUsage(
        prompt_tokens=prompt_tokens if isinstance(prompt_tokens, int) else None,
        completion_tokens=completion_tokens if isinstance(completion_tokens, int) else None,
        total_tokens=total_tokens if isinstance(total_tokens, int) else None,
    )

"""Mock LLM adapter.

Use this for:
- deterministic tests
- offline development without an API key
"""

from __future__ import annotations

from collections.abc import Callable

from poi_generator.llm.base import LLMClient, LLMRequest, LLMResponse


class MockLLMClient(LLMClient):
    """A mock model that returns pre-canned completion text.

    Provide either:
    - a static `output` string, or
    - a callable `fn` that maps request -> completion text.

    Every request is recorded in `requests` so tests can inspect the prompt.
    """

    def __init__(self, output: str = '', fn: Callable[[LLMRequest], str] | None = None) -> None:
        self._output = output
        self._fn = fn
        self.requests: list[LLMRequest] = []

    async def generate(self, request: LLMRequest) -> LLMResponse:
        self.requests.append(request)
        text = self._fn(request) if self._fn is not None else self._output
        return LLMResponse(
            output_text=text,
            raw={'mock': True, 'choices': [{'message': {'role': 'assistant', 'content': text}}]},
        )

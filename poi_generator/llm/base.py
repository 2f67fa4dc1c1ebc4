"""LLM adapter interface.

The generator only depends on this contract, so the chat-completions client
can be swapped for a mock in tests or another provider in deployment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LLMRequest:
    """
    A request to generate model output.

    Attributes:
        prompt: Fully rendered prompt string.
        role: Chat role the prompt is sent under.
        max_tokens: Optional completion token cap; the client default applies when None.
        temperature: Optional sampling temperature; the client default applies when None.
        metadata: Opaque dict for tracing.
    """

    prompt: str
    role: str = 'system'
    max_tokens: int | None = None
    temperature: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LLMUsage:
    """Best-effort token usage summary (provider-dependent)."""

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


@dataclass(frozen=True)
class LLMResponse:
    """A response from the model adapter.

    Attributes:
        output_text: Message content of the first choice.
        raw: Provider-specific raw payload (kept for debugging/telemetry).
        usage: Best-effort token usage
    """

    output_text: str
    raw: dict[str, Any]
    usage: LLMUsage = LLMUsage()


class LLMClient(ABC):
    """Model inference adapter."""

    @abstractmethod
    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate a response from the model."""
        raise NotImplementedError

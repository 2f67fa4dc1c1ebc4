"""LLM adapters.

This package intentionally contains ONLY model inference adapters.

Rules:
- No prompt building here.
- No parsing of the completion text here.
- No retries.
"""
from .base import LLMClient, LLMRequest, LLMResponse, LLMUsage
from .mock import MockLLMClient
from .openai_chat import OpenAIChatConfig, OpenAIChatLLMClient

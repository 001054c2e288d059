"""LLM adapters — Anthropic Messages API client."""

from debugr.adapters.llm.anthropic_adapter import (
    AnthropicAdapter,
    LLMError,
    MarshalError,
    StatusError,
    TransportError,
    UnmarshalError,
)

__all__ = [
    "AnthropicAdapter",
    "LLMError",
    "MarshalError",
    "StatusError",
    "TransportError",
    "UnmarshalError",
]

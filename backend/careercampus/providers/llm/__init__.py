"""LLM provider module.

LLM provider interface and adapters.
"""

from careercampus.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)
from careercampus.providers.llm.gemini_adapter import GeminiAdapter
from careercampus.providers.llm.mock_adapter import MockLLMProvider

__all__ = [
    # Base types
    "LLMMessage",
    "LLMProvider",
    "LLMResponse",
    "TaskType",
    # Adapters
    "GeminiAdapter",
    "MockLLMProvider",
]

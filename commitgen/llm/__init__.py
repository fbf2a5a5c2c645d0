"""LLM Client Package"""

from commitgen.llm.base import (
    ChatMessage,
    CompletionRequest,
    CompletionResponse,
    LLMClient,
    LLMError,
    LLMResponse,
    NoCompletionError,
)
from commitgen.llm.groq import GroqClient

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "CompletionResponse",
    "LLMClient",
    "LLMError",
    "LLMResponse",
    "NoCompletionError",
    "GroqClient",
]

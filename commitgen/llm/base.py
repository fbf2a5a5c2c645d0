"""LLM Base Classes and Completion Wire Types"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class NoCompletionError(LLMError):
    """Raised when the endpoint answers with an empty choice list."""
    pass


@dataclass
class ChatMessage:
    role: str
    content: str


@dataclass
class CompletionRequest:
    """Body of a chat completion request."""
    model: str
    messages: list[ChatMessage] = field(default_factory=list)
    temperature: float = 0.7
    max_tokens: int = 1000

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass
class CompletionResponse:
    """Parsed chat completion response. Only message contents are kept."""
    id: str
    choices: list[str] = field(default_factory=list)
    tokens_used: int = 0

    @classmethod
    def from_dict(cls, data) -> 'CompletionResponse':
        """Parse a decoded JSON body, raising LLMError when its shape is wrong."""
        if not isinstance(data, dict):
            raise LLMError("Unexpected response from completion endpoint: body is not a JSON object")

        response_id = data.get("id")
        choices = data.get("choices")
        if not isinstance(response_id, str) or not isinstance(choices, list):
            raise LLMError("Unexpected response from completion endpoint: missing 'id' or 'choices'")

        contents = []
        for choice in choices:
            message = choice.get("message") if isinstance(choice, dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            if not isinstance(content, str):
                raise LLMError("Unexpected response from completion endpoint: choice without message content")
            contents.append(content)

        usage = data.get("usage")
        tokens_used = usage.get("total_tokens", 0) if isinstance(usage, dict) else 0

        return cls(id=response_id, choices=contents, tokens_used=tokens_used or 0)

    def first_content(self) -> str:
        if not self.choices:
            raise NoCompletionError("No completion returned by the model.")
        return self.choices[0]


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, diff: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

from dataclasses import dataclass
from typing import Any, Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class ProviderUnavailableError(RuntimeError):
    """Raised by a provider that cannot serve the request; callers fall back."""


class GenerativeClient(Protocol):
    async def complete_json(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 900,
    ) -> Any: ...


class EmbeddingClient(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class AIClient(GenerativeClient, EmbeddingClient, Protocol):
    pass

from typing import Any, Sequence

from app.ai.types import ChatMessage, ProviderUnavailableError


class FallbackProvider:
    """Provider that never answers, so every caller takes its deterministic fallback."""

    async def complete_json(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 900,
    ) -> Any:
        raise ProviderUnavailableError("Generative provider disabled (AI_PROVIDER=fallback).")

    async def embed(self, text: str) -> list[float]:
        raise ProviderUnavailableError("Embedding provider disabled (AI_PROVIDER=fallback).")

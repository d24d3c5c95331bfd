from __future__ import annotations

import asyncio
from typing import Any, Sequence

from app.ai.types import ChatMessage, ProviderUnavailableError


class ScriptedClient:
    """In-memory provider returning canned answers keyed by prompt content."""

    def __init__(
        self,
        *,
        suggestions: Any = None,
        keywords: Any = None,
        vectors: dict[str, list[float]] | None = None,
        default_vector: list[float] | None = None,
        error: Exception | None = None,
    ):
        self.suggestions = suggestions
        self.keywords = keywords
        self.vectors = vectors or {}
        self.default_vector = default_vector
        self.error = error
        self.prompts: list[str] = []
        self.embedded: list[str] = []

    async def complete_json(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 900,
    ) -> Any:
        prompt = messages[-1].content
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if prompt.startswith("Extract the most important professional keywords"):
            return self.keywords
        return self.suggestions

    async def embed(self, text: str) -> list[float]:
        self.embedded.append(text)
        if self.error is not None:
            raise self.error
        for prefix, vector in self.vectors.items():
            if text.startswith(prefix):
                return vector
        if self.default_vector is None:
            raise RuntimeError("no vector scripted")
        return self.default_vector


class StalledClient:
    """Provider whose completions never return; counts started and cancelled calls."""

    def __init__(self):
        self.started = 0
        self.cancelled = 0

    async def complete_json(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 900,
    ) -> Any:
        self.started += 1
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise

    async def embed(self, text: str) -> list[float]:
        raise ProviderUnavailableError("embeddings disabled")

from __future__ import annotations

import json
import os
from typing import Any, Optional, Sequence

from openai import AsyncOpenAI

from app.ai.types import ChatMessage, ProviderUnavailableError


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        embedding_model: str = "text-embedding-3-small",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 0,
    ):
        self._model = model
        self._embedding_model = embedding_model
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s,
            max_retries=max_retries,
        )

    async def complete_json(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        max_tokens: int = 900,
    ) -> Any:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=payload,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        if not content:
            raise ProviderUnavailableError("Generative provider returned an empty response.")
        return json.loads(_strip_code_fence(content))

    async def embed(self, text: str) -> list[float]:
        response = await self._client.embeddings.create(
            model=self._embedding_model,
            input=text,
        )
        if not response.data:
            raise ProviderUnavailableError("Embedding provider returned no vectors.")
        return [float(value) for value in response.data[0].embedding]


def _strip_code_fence(content: str) -> str:
    text = content.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


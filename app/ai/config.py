import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    embedding_model: str
    api_key: str
    base_url: str | None
    timeout_s: float
    max_retries: int
    keyword_enhancement: bool

    @property
    def live_enabled(self) -> bool:
        if self.provider != "openai":
            return False
        return bool(self.api_key) and not _looks_like_placeholder(self.api_key)


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    if provider not in {"openai", "fallback"}:
        raise ValueError(f"Unsupported AI_PROVIDER='{provider}'")
    return AIConfig(
        provider=provider,
        model=os.getenv("AI_MODEL", "gpt-4o-mini").strip(),
        embedding_model=os.getenv("EMBEDDING_MODEL", "text-embedding-3-small").strip(),
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or "").strip() or None,
        timeout_s=float(os.getenv("OPENAI_TIMEOUT_S", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "0")),
        keyword_enhancement=_env_bool("KEYWORD_ENHANCEMENT_ENABLED", True),
    )

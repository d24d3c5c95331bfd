import logging

from app.ai.config import load_ai_config
from app.ai.types import AIClient

from app.ai.providers.fallback_provider import FallbackProvider
from app.ai.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "fallback":
        return FallbackProvider()

    if not cfg.live_enabled:
        logger.info("ai_provider_unconfigured provider=%s; using deterministic fallback", cfg.provider)
        return FallbackProvider()

    return OpenAIProvider(
        model=cfg.model,
        embedding_model=cfg.embedding_model,
        api_key=cfg.api_key,
        base_url=cfg.base_url,
        timeout_s=cfg.timeout_s,
        max_retries=cfg.max_retries,
    )


def keyword_enhancement_enabled() -> bool:
    return load_ai_config().keyword_enhancement

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.ai.types import ChatMessage, GenerativeClient
from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import SuggestionBundle, SuggestionProvenance

logger = logging.getLogger(__name__)

FALLBACK_SUGGESTIONS = SuggestionBundle(
    general=("Focus on quantifiable achievements", "Use more action verbs"),
    specific=("Add more relevant keywords from the job description",),
    action_verbs=("Implemented", "Developed", "Managed", "Created", "Optimized"),
    power_phrases=("Increased efficiency by", "Led team of", "Reduced costs by"),
    content_quality_score=75,
)

_SYSTEM_PROMPT = (
    "You are an expert resume writer and ATS specialist. "
    "Respond with a single JSON object and nothing else."
)


class _ProviderSuggestions(BaseModel):
    """Shape expected back from the generative provider."""

    model_config = ConfigDict(populate_by_name=True)

    general: list[str]
    specific: list[str]
    action_verbs: list[str] = Field(alias="actionVerbs")
    power_phrases: list[str] = Field(alias="powerPhrases")
    content_quality_score: float = Field(alias="contentQualityScore", allow_inf_nan=False)

    @field_validator("general", "specific", "action_verbs", "power_phrases")
    @classmethod
    def _strip_items(cls, value: list[str]) -> list[str]:
        return [item.strip() for item in value if item and item.strip()]


@dataclass(frozen=True)
class SuggestionOutcome:
    bundle: SuggestionBundle
    provenance: SuggestionProvenance


def build_suggestion_prompt(
    resume_text: str,
    job_description: str,
    resume_keywords: list[str],
    job_keywords: list[str],
) -> str:
    max_chars = int(get_scoring_value("suggestions.max_text_chars", 2000))
    max_keywords = int(get_scoring_value("suggestions.max_keywords", 15))
    return (
        "Analyze this resume against the job description and provide specific, actionable suggestions.\n\n"
        f"RESUME:\n{resume_text[:max_chars]}\n\n"
        f"JOB DESCRIPTION:\n{job_description[:max_chars]}\n\n"
        f"RESUME KEYWORDS: {', '.join(resume_keywords[:max_keywords])}\n"
        f"JOB KEYWORDS: {', '.join(job_keywords[:max_keywords])}\n\n"
        "Please provide:\n"
        "1. 3-5 general improvement suggestions\n"
        "2. 3-5 specific suggestions for this job\n"
        "3. 10 powerful action verbs to use\n"
        "4. 5 impact phrases to incorporate\n"
        "5. Content quality score (0-100)\n\n"
        "Format as JSON:\n"
        "{\n"
        '  "general": ["suggestion1", "suggestion2"],\n'
        '  "specific": ["suggestion1", "suggestion2"],\n'
        '  "actionVerbs": ["verb1", "verb2"],\n'
        '  "powerPhrases": ["phrase1", "phrase2"],\n'
        '  "contentQualityScore": 85\n'
        "}"
    )


def parse_suggestion_payload(payload: Any) -> SuggestionBundle | None:
    if not isinstance(payload, dict):
        return None
    try:
        parsed = _ProviderSuggestions.model_validate(payload)
    except ValidationError:
        return None
    return SuggestionBundle(
        general=tuple(parsed.general[:5]),
        specific=tuple(parsed.specific[:5]),
        action_verbs=tuple(parsed.action_verbs[:10]),
        power_phrases=tuple(parsed.power_phrases[:5]),
        content_quality_score=max(0.0, min(100.0, parsed.content_quality_score)),
    )


async def generate_ai_suggestions_detailed(
    resume_text: str,
    job_description: str,
    resume_keywords: list[str],
    job_keywords: list[str],
    *,
    client: GenerativeClient | None = None,
) -> SuggestionOutcome:
    if client is None:
        return SuggestionOutcome(bundle=FALLBACK_SUGGESTIONS, provenance="fallback")

    prompt = build_suggestion_prompt(resume_text, job_description, resume_keywords, job_keywords)
    try:
        payload = await client.complete_json(
            [
                ChatMessage(role="system", content=_SYSTEM_PROMPT),
                ChatMessage(role="user", content=prompt),
            ],
            temperature=float(get_scoring_value("suggestions.temperature", 0.7)),
            max_tokens=int(get_scoring_value("suggestions.max_tokens", 1000)),
        )
    except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
        logger.warning("suggestions_llm_failed prompt_len=%s: %s", len(prompt), exc)
        return SuggestionOutcome(bundle=FALLBACK_SUGGESTIONS, provenance="fallback")

    bundle = parse_suggestion_payload(payload)
    if bundle is None:
        logger.warning("suggestions_llm_invalid_schema payload_type=%s", type(payload).__name__)
        return SuggestionOutcome(bundle=FALLBACK_SUGGESTIONS, provenance="fallback")
    return SuggestionOutcome(bundle=bundle, provenance="ai")


async def generate_ai_suggestions(
    resume_text: str,
    job_description: str,
    resume_keywords: list[str],
    job_keywords: list[str],
    *,
    client: GenerativeClient | None = None,
) -> SuggestionBundle:
    outcome = await generate_ai_suggestions_detailed(
        resume_text,
        job_description,
        resume_keywords,
        job_keywords,
        client=client,
    )
    return outcome.bundle

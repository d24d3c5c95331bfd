from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Any

from app.ai.types import ChatMessage, GenerativeClient
from app.core.config.scoring import get_scoring_value

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\s]")

STOPWORDS = frozenset(
    {
        # Articles, pronouns, determiners
        "a", "an", "the", "this", "that", "these", "those", "i", "me", "my", "mine", "myself",
        "we", "us", "our", "ours", "ourselves", "you", "your", "yours", "yourself", "he", "him",
        "his", "she", "her", "hers", "it", "its", "they", "them", "their", "theirs", "what",
        "which", "who", "whom", "whose", "each", "every", "either", "neither", "some", "any",
        "all", "both", "few", "many", "much", "more", "most", "other", "another", "such", "own",
        # Auxiliaries / modals
        "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "having",
        "do", "does", "did", "doing", "will", "would", "shall", "should", "can", "could", "may",
        "might", "must", "ought",
        # Prepositions / conjunctions
        "and", "but", "or", "nor", "so", "yet", "for", "of", "at", "by", "to", "from", "in",
        "into", "onto", "on", "off", "out", "over", "under", "up", "down", "with", "within",
        "without", "about", "above", "below", "after", "before", "between", "through",
        "during", "against", "among", "until", "while", "since", "because", "although",
        "though", "if", "then", "than", "as", "per", "via", "upon", "across", "toward",
        "towards", "around",
        # Adverbs / fillers
        "not", "no", "only", "very", "too", "also", "just", "again", "further", "once", "here",
        "there", "when", "where", "why", "how", "now", "ever", "still", "well", "even", "etc",
        "same", "able",
    }
)


@dataclass(frozen=True)
class KeywordExtraction:
    keywords: list[str]
    enhanced: bool


def _tokenize(text: str) -> list[str]:
    cleaned = _NON_WORD_RE.sub(" ", (text or "").lower())
    return cleaned.split()


def extract_basic_keywords(text: str, max_keywords: int = 30) -> list[str]:
    """Rank stopword-filtered tokens by frequency; ties keep first-occurrence order."""
    if max_keywords <= 0:
        return []
    min_length = int(get_scoring_value("keywords.min_token_length", 3))
    counts: Counter[str] = Counter(
        token for token in _tokenize(text) if len(token) >= min_length and token not in STOPWORDS
    )
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:max_keywords]]


def _enhancer_prompt(text: str, basic_keywords: list[str]) -> list[ChatMessage]:
    text_chars = int(get_scoring_value("keywords.enhancer_text_chars", 1500))
    output_cap = int(get_scoring_value("keywords.enhancer_output", 20))
    user_prompt = (
        "Extract the most important professional keywords and skills from this text. Focus on:\n"
        "- Technical skills and technologies\n"
        "- Professional competencies\n"
        "- Industry-specific terms\n"
        "- Action verbs and achievements\n\n"
        f"Text: {text[:text_chars]}\n\n"
        f"Current keywords: {', '.join(basic_keywords)}\n\n"
        f"Return only the most relevant keywords as a JSON array, maximum {output_cap} items:\n"
        '["keyword1", "keyword2", "keyword3"]'
    )
    return [
        ChatMessage(role="system", content="You extract resume and job keywords. Respond with JSON only."),
        ChatMessage(role="user", content=user_prompt),
    ]


def _normalize_enhanced(payload: Any) -> list[str] | None:
    if not isinstance(payload, list):
        return None
    output_cap = int(get_scoring_value("keywords.enhancer_output", 20))
    keywords: list[str] = []
    for item in payload:
        if not isinstance(item, str):
            continue
        keyword = item.strip().lower()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
        if len(keywords) >= output_cap:
            break
    return keywords or None


async def enhance_keywords(
    text: str,
    basic_keywords: list[str],
    enhancer: GenerativeClient,
) -> list[str] | None:
    try:
        payload = await enhancer.complete_json(
            _enhancer_prompt(text, basic_keywords),
            temperature=0.3,
            max_tokens=300,
        )
    except Exception as exc:  # noqa: BLE001 - basic keywords are the fallback
        logger.warning("keyword_enhancement_failed text_len=%s: %s", len(text), exc)
        return None
    enhanced = _normalize_enhanced(payload)
    if enhanced is None:
        logger.warning("keyword_enhancement_invalid payload_type=%s", type(payload).__name__)
    return enhanced


async def extract_keywords_detailed(
    text: str,
    max_keywords: int = 30,
    *,
    enhancer: GenerativeClient | None = None,
) -> KeywordExtraction:
    basic = extract_basic_keywords(text, max_keywords)
    if enhancer is None or not basic:
        return KeywordExtraction(keywords=basic, enhanced=False)

    enhancer_input = int(get_scoring_value("keywords.enhancer_input", 15))
    enhanced = await enhance_keywords(text, basic[:enhancer_input], enhancer)
    if enhanced is None:
        return KeywordExtraction(keywords=basic, enhanced=False)
    return KeywordExtraction(keywords=enhanced[:max_keywords], enhanced=True)


async def extract_keywords(
    text: str,
    max_keywords: int = 30,
    *,
    enhancer: GenerativeClient | None = None,
) -> list[str]:
    extraction = await extract_keywords_detailed(text, max_keywords, enhancer=enhancer)
    return extraction.keywords

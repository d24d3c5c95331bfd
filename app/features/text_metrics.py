"""Auxiliary resume signals. None of these feed the overall score."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

ACTION_VERBS = (
    "managed", "developed", "created", "implemented", "designed",
    "led", "coordinated", "analyzed", "improved", "optimized",
    "increased", "decreased", "reduced", "enhanced", "streamlined",
    "facilitated", "delivered", "achieved", "exceeded", "maintained",
    "supervised", "trained", "mentored", "collaborated", "negotiated",
    "resolved", "generated", "produced", "established", "launched",
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_ALPHA_RE = re.compile(r"[^a-z]")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]+")

_ACHIEVEMENT_PATTERNS = (
    re.compile(r"\d+%"),
    re.compile(r"\$\d+[,\d]*"),
    re.compile(r"\d+\s*(?:people|employees|team members)", re.IGNORECASE),
    re.compile(r"\d+\s*(?:years|months)", re.IGNORECASE),
    re.compile(r"increased\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"decreased\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"reduced\s+by\s+\d+", re.IGNORECASE),
)

_SECTION_CONTENT_PATTERNS: dict[str, re.Pattern[str]] = {
    "contact": re.compile(r"(?:contact|email|phone|address)[:\s]*([^\n]+)", re.IGNORECASE),
    "summary": re.compile(r"(?:summary|objective|profile|about)[:\s]*([^\n]+)", re.IGNORECASE),
    "experience": re.compile(r"(?:experience|work history|employment)[:\s]*([^\n]+)", re.IGNORECASE),
    "education": re.compile(r"(?:education|academic|degree)[:\s]*([^\n]+)", re.IGNORECASE),
    "skills": re.compile(r"(?:skills|competencies|technologies)[:\s]*([^\n]+)", re.IGNORECASE),
}


class SignalCount(BaseModel):
    found: list[str] = Field(default_factory=list)
    count: int = 0
    score: float = Field(default=0.0, ge=0.0, le=100.0)


class TextMetrics(BaseModel):
    action_verbs: list[str] = Field(default_factory=list)
    action_verb_signal: SignalCount
    quantifiable_achievements: SignalCount
    readability: float = Field(ge=0.0, le=100.0)
    word_count: int = 0
    section_content: dict[str, list[str]] = Field(default_factory=dict)


def extract_action_verbs(text: str) -> list[str]:
    words = (text or "").lower().split()
    return [verb for verb in ACTION_VERBS if any(verb in word for word in words)]


def count_syllables(text: str) -> int:
    total = 0
    for word in (text or "").lower().split():
        clean = _NON_ALPHA_RE.sub("", word)
        if len(clean) <= 3:
            total += 1
            continue
        groups = _VOWEL_GROUP_RE.findall(clean)
        total += len(groups) if groups else 1
    return total


def calculate_readability(text: str) -> float:
    """Flesch reading ease, clamped to [0, 100]."""
    sentences = [part for part in _SENTENCE_SPLIT_RE.split(text or "") if part.strip()]
    words = (text or "").split()
    if not sentences or not words:
        return 0.0
    syllables = count_syllables(text)
    score = 206.835 - 1.015 * (len(words) / len(sentences)) - 84.6 * (syllables / len(words))
    return max(0.0, min(100.0, score))


def check_action_verbs(text: str) -> SignalCount:
    lowered = (text or "").lower()
    found = [verb for verb in ACTION_VERBS[:20] if verb in lowered]
    return SignalCount(found=found, count=len(found), score=min(100.0, len(found) / 10 * 100))


def check_quantifiable_achievements(text: str) -> SignalCount:
    found: list[str] = []
    for pattern in _ACHIEVEMENT_PATTERNS:
        found.extend(pattern.findall(text or ""))
    return SignalCount(found=found, count=len(found), score=min(100.0, len(found) / 5 * 100))


def extract_section_content(text: str, section: str) -> list[str] | None:
    pattern = _SECTION_CONTENT_PATTERNS.get(section)
    if pattern is None:
        return None
    matches = [match.strip() for match in pattern.findall(text or "")]
    return matches or None


def build_text_metrics(text: str) -> TextMetrics:
    section_content: dict[str, list[str]] = {}
    for section in _SECTION_CONTENT_PATTERNS:
        lines = extract_section_content(text, section)
        if lines:
            section_content[section] = lines

    return TextMetrics(
        action_verbs=extract_action_verbs(text),
        action_verb_signal=check_action_verbs(text),
        quantifiable_achievements=check_quantifiable_achievements(text),
        readability=round(calculate_readability(text), 2),
        word_count=len((text or "").split()),
        section_content=section_content,
    )

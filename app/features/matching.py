from __future__ import annotations

from difflib import SequenceMatcher

from app.core.config.scoring import get_scoring_value
from app.features.scoring import round_half_up
from app.schemas.analysis import MatchResult


def _is_variant(job_key: str, resume_key: str, min_ratio: float, prefix_len: int) -> bool:
    if min(len(job_key), len(resume_key)) <= prefix_len:
        return False
    if job_key[:prefix_len] != resume_key[:prefix_len]:
        return False
    return SequenceMatcher(None, job_key, resume_key).ratio() >= min_ratio


def calculate_keyword_match(resume_keywords: list[str], job_keywords: list[str]) -> MatchResult:
    """Partition job keywords into matched and missing against the resume keywords.

    Matching is case-insensitive. With ``matching.fuzzy_variants`` on, inflected
    forms that share a prefix and are close by ``SequenceMatcher`` ratio also match
    ("developer" and "developed"); short tokens such as "sql" only match exactly.
    """
    if not job_keywords:
        return MatchResult(score=0.0, matched=(), missing=(), match_percentage=0)

    fuzzy = bool(get_scoring_value("matching.fuzzy_variants", True))
    min_ratio = float(get_scoring_value("matching.variant_min_ratio", 0.7))
    prefix_len = int(get_scoring_value("matching.variant_prefix_chars", 4))

    resume_keys = [keyword.strip().lower() for keyword in resume_keywords if keyword.strip()]
    resume_set = set(resume_keys)

    matched: list[str] = []
    missing: list[str] = []
    for keyword in job_keywords:
        key = keyword.strip().lower()
        if key in resume_set or (
            fuzzy and any(_is_variant(key, candidate, min_ratio, prefix_len) for candidate in resume_keys)
        ):
            matched.append(keyword)
        else:
            missing.append(keyword)

    ratio = len(matched) / len(job_keywords)
    return MatchResult(
        score=min(100.0, ratio * 100),
        matched=tuple(matched),
        missing=tuple(missing),
        match_percentage=min(100, round_half_up(ratio * 100)),
    )

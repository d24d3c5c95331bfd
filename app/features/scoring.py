from __future__ import annotations

import math

from app.core.config.scoring import get_scoring_weights
from app.schemas.analysis import ScoreBreakdown, ScoreComponents


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _bounded(name: str, value: float, upper: float = 100.0) -> float:
    if not math.isfinite(value):
        raise ValueError(f"Score component '{name}' is not a finite number: {value!r}")
    return max(0.0, min(upper, float(value)))


def component_scores(components: ScoreComponents) -> dict[str, float]:
    """Per-component scores on a 0-100 scale, keyed like ``weights`` in scoring.yaml."""
    return {
        "ats_compatibility": _bounded("ats_compatibility", components.structure_analysis.score),
        "keyword_match": _bounded("keyword_match", components.keyword_match.score),
        "content_quality": _bounded("content_quality", components.ai_suggestions.content_quality_score),
        "section_completeness": _bounded("section_completeness", components.structure_analysis.section_score),
        "overall_readability": _bounded("overall_readability", components.similarity_score, upper=1.0) * 100,
    }


def calculate_overall_score(components: ScoreComponents) -> float:
    weights = get_scoring_weights()
    scores = component_scores(components)
    total = sum(scores[name] * weight for name, weight in weights.items())
    return min(total, 100.0)


def build_breakdown(components: ScoreComponents) -> ScoreBreakdown:
    scores = component_scores(components)
    return ScoreBreakdown(**{name: round_half_up(value) for name, value in scores.items()})

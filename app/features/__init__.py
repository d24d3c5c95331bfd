from .feedback import generate_detailed_feedback
from .keywords import (
    KeywordExtraction,
    extract_basic_keywords,
    extract_keywords,
    extract_keywords_detailed,
)
from .matching import calculate_keyword_match
from .scoring import build_breakdown, calculate_overall_score, round_half_up
from .structure import validate_resume_structure
from .suggestions import (
    FALLBACK_SUGGESTIONS,
    SuggestionOutcome,
    generate_ai_suggestions,
    generate_ai_suggestions_detailed,
)
from .text_metrics import TextMetrics, build_text_metrics, calculate_readability

__all__ = [
    "KeywordExtraction",
    "extract_basic_keywords",
    "extract_keywords",
    "extract_keywords_detailed",
    "validate_resume_structure",
    "calculate_keyword_match",
    "FALLBACK_SUGGESTIONS",
    "SuggestionOutcome",
    "generate_ai_suggestions",
    "generate_ai_suggestions_detailed",
    "calculate_overall_score",
    "build_breakdown",
    "round_half_up",
    "generate_detailed_feedback",
    "TextMetrics",
    "build_text_metrics",
    "calculate_readability",
]

from __future__ import annotations

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import Feedback, FeedbackInput

SUMMARY_EXCELLENT = (
    "Excellent resume! Your resume is well-optimized for ATS systems and shows strong "
    "alignment with the job requirements."
)
SUMMARY_GOOD = (
    "Good resume with room for improvement. Focus on the suggestions below to increase your chances."
)
SUMMARY_NEEDS_WORK = (
    "Your resume needs significant improvements to pass ATS screening. Follow the recommendations below."
)

STRENGTH_KEYWORDS = "Strong keyword alignment with job requirements"
STRENGTH_STRUCTURE = "Good ATS-friendly formatting and structure"
STRENGTH_CONTENT = "High-quality content with good impact statements"
WEAKNESS_STRUCTURE = "Several formatting and structure issues detected"
WEAKNESS_CONTENT = "Content could be more impactful and specific"


def _threshold(path: str, default: float) -> float:
    return float(get_scoring_value(path, default))


def summarize(overall_score: float) -> str:
    if overall_score >= _threshold("feedback.summary.excellent", 80):
        return SUMMARY_EXCELLENT
    if overall_score >= _threshold("feedback.summary.good", 60):
        return SUMMARY_GOOD
    return SUMMARY_NEEDS_WORK


def generate_detailed_feedback(analysis: FeedbackInput) -> Feedback:
    """Compose summary, strengths, weaknesses and recommendations.

    Each sub-result is optional; an absent one contributes nothing, while a
    present one with a zero score is still evaluated.
    """
    keyword_match = analysis.keyword_match
    structure = analysis.structure_analysis
    suggestions = analysis.ai_suggestions

    strengths: list[str] = []
    weaknesses: list[str] = []

    if keyword_match is not None:
        if keyword_match.match_percentage >= _threshold("feedback.strengths.keyword_match_percentage", 70):
            strengths.append(STRENGTH_KEYWORDS)
    if structure is not None:
        if structure.score >= _threshold("feedback.strengths.structure_score", 80):
            strengths.append(STRENGTH_STRUCTURE)
    if suggestions is not None:
        if suggestions.content_quality_score >= _threshold("feedback.strengths.content_quality", 80):
            strengths.append(STRENGTH_CONTENT)

    if keyword_match is not None:
        missing_count = len(keyword_match.missing)
        if missing_count > _threshold("feedback.weaknesses.missing_keywords", 5):
            weaknesses.append(f"Missing {missing_count} important keywords from the job description")
    if structure is not None and structure.issues:
        weaknesses.append(WEAKNESS_STRUCTURE)
    if suggestions is not None:
        if suggestions.content_quality_score < _threshold("feedback.weaknesses.content_quality", 70):
            weaknesses.append(WEAKNESS_CONTENT)

    general_cap = int(get_scoring_value("feedback.recommendations.general", 3))
    specific_cap = int(get_scoring_value("feedback.recommendations.specific", 3))
    structure_cap = int(get_scoring_value("feedback.recommendations.structure", 2))

    recommendations: list[str] = []
    if suggestions is not None:
        recommendations.extend(suggestions.general[:general_cap])
        recommendations.extend(suggestions.specific[:specific_cap])
    if structure is not None:
        recommendations.extend(structure.recommendations[:structure_cap])

    return Feedback(
        summary=summarize(analysis.overall_score),
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        recommendations=tuple(recommendations),
    )

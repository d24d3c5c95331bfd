from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone

from app.ai.factory import get_ai_client, keyword_enhancement_enabled
from app.ai.types import EmbeddingClient, GenerativeClient
from app.core.config.scoring import get_scoring_value
from app.features import (
    build_breakdown,
    calculate_keyword_match,
    calculate_overall_score,
    extract_keywords_detailed,
    generate_ai_suggestions_detailed,
    generate_detailed_feedback,
    round_half_up,
    validate_resume_structure,
)
from app.schemas.analysis import (
    AISuggestions,
    AnalysisReport,
    FeedbackInput,
    KeywordAnalysis,
    Provenance,
    ReportMetadata,
    ScoreComponents,
    StructureAnalysis,
)
from app.semantic import calculate_similarity_detailed

logger = logging.getLogger(__name__)


class AnalysisInputError(ValueError):
    pass


class AnalysisError(RuntimeError):
    pass


def validate_inputs(resume_text: str, job_description: str) -> None:
    min_resume = int(get_scoring_value("inputs.min_resume_chars", 50))
    min_job = int(get_scoring_value("inputs.min_job_description_chars", 20))

    resume = (resume_text or "").strip()
    job = (job_description or "").strip()
    if not resume:
        raise AnalysisInputError("Resume text is required.")
    if not job:
        raise AnalysisInputError("Job description is required.")
    if len(resume) < min_resume:
        raise AnalysisInputError(f"Resume text must be at least {min_resume} characters long.")
    if len(job) < min_job:
        raise AnalysisInputError(f"Job description must be at least {min_job} characters long.")


async def analyze_resume(
    resume_text: str,
    job_description: str,
    file_name: str = "Resume",
    *,
    ai_client: GenerativeClient | None = None,
    embedding_client: EmbeddingClient | None = None,
    enhance_keywords: bool | None = None,
    now: datetime | None = None,
) -> AnalysisReport:
    """Score a resume against a job description and build the full report.

    Providers default to ``get_ai_client()``. Pass ``now`` to pin the report
    timestamp; with identical inputs and provider answers the report is identical.
    """
    validate_inputs(resume_text, job_description)

    started = time.perf_counter()
    try:
        report = await _run_pipeline(
            resume_text,
            job_description,
            file_name,
            ai_client=ai_client,
            embedding_client=embedding_client,
            enhance_keywords=enhance_keywords,
            now=now,
        )
    except asyncio.CancelledError:
        raise
    except Exception as exc:
        logger.exception("resume_analysis_failed file=%s resume_len=%s", file_name, len(resume_text))
        raise AnalysisError(f"Failed to analyze resume: {exc}") from exc

    logger.info(
        "resume_analysis_completed file=%s overall=%s provenance=%s latency_ms=%s",
        file_name,
        report.overall_score,
        report.metadata.provenance.model_dump(),
        int((time.perf_counter() - started) * 1000),
    )
    return report


async def _gather_or_cancel(*aws):
    """Like ``asyncio.gather`` but cancels and awaits the siblings when one fails."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def _run_pipeline(
    resume_text: str,
    job_description: str,
    file_name: str,
    *,
    ai_client: GenerativeClient | None,
    embedding_client: EmbeddingClient | None,
    enhance_keywords: bool | None,
    now: datetime | None,
) -> AnalysisReport:
    if ai_client is None or embedding_client is None:
        default_client = get_ai_client()
        ai_client = ai_client or default_client
        embedding_client = embedding_client or default_client
    if enhance_keywords is None:
        enhance_keywords = keyword_enhancement_enabled()

    max_keywords = int(get_scoring_value("keywords.max_extracted", 30))
    enhancer = ai_client if enhance_keywords else None

    resume_extraction, job_extraction, similarity, structure = await _gather_or_cancel(
        extract_keywords_detailed(resume_text, max_keywords, enhancer=enhancer),
        extract_keywords_detailed(job_description, max_keywords, enhancer=enhancer),
        calculate_similarity_detailed(resume_text, job_description, embedder=embedding_client),
        asyncio.to_thread(validate_resume_structure, resume_text),
    )
    resume_keywords = resume_extraction.keywords
    job_keywords = job_extraction.keywords

    keyword_match = calculate_keyword_match(resume_keywords, job_keywords)
    suggestions = await generate_ai_suggestions_detailed(
        resume_text,
        job_description,
        resume_keywords,
        job_keywords,
        client=ai_client,
    )

    components = ScoreComponents(
        similarity_score=similarity.score,
        keyword_match=keyword_match,
        structure_analysis=structure,
        ai_suggestions=suggestions.bundle,
    )
    overall_score = calculate_overall_score(components)
    feedback = generate_detailed_feedback(
        FeedbackInput(
            overall_score=overall_score,
            keyword_match=keyword_match,
            structure_analysis=structure,
            ai_suggestions=suggestions.bundle,
        )
    )

    display_cap = int(get_scoring_value("keywords.max_display", 20))
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return AnalysisReport(
        overall_score=round_half_up(overall_score),
        breakdown=build_breakdown(components),
        keyword_analysis=KeywordAnalysis(
            matched=keyword_match.matched,
            missing=keyword_match.missing,
            resume_keywords=tuple(resume_keywords[:display_cap]),
            job_keywords=tuple(job_keywords[:display_cap]),
        ),
        structure_analysis=StructureAnalysis(
            sections=structure.sections,
            issues=structure.issues,
            recommendations=structure.recommendations,
        ),
        ai_suggestions=AISuggestions(
            general=suggestions.bundle.general,
            specific=suggestions.bundle.specific,
            action_verbs=suggestions.bundle.action_verbs,
            power_phrases=suggestions.bundle.power_phrases,
        ),
        feedback=feedback,
        metadata=ReportMetadata(
            file_name=file_name,
            analysis_date=timestamp,
            text_length=len(resume_text),
            word_count=len(resume_text.split()),
            provenance=Provenance(
                keywords="enhanced" if resume_extraction.enhanced or job_extraction.enhanced else "basic",
                similarity=similarity.provenance,
                suggestions=suggestions.provenance,
            ),
        ),
    )

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SECTION_NAMES = ("contact", "summary", "experience", "education", "skills")

KeywordProvenance = Literal["enhanced", "basic"]
SimilarityProvenance = Literal["embedding", "lexical"]
SuggestionProvenance = Literal["ai", "fallback"]


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SectionMap(_Frozen):
    contact: bool
    summary: bool
    experience: bool
    education: bool
    skills: bool

    def found_count(self) -> int:
        return sum(1 for name in SECTION_NAMES if getattr(self, name))

    def missing(self) -> list[str]:
        return [name for name in SECTION_NAMES if not getattr(self, name)]


class StructureResult(_Frozen):
    sections: SectionMap
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = Field(default=(), max_length=8)
    score: int = Field(ge=0, le=100)
    section_score: float = Field(ge=0.0, le=100.0)


class MatchResult(_Frozen):
    score: float = Field(ge=0.0, le=100.0)
    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    match_percentage: int = Field(ge=0, le=100)


class SuggestionBundle(_Frozen):
    general: tuple[str, ...] = Field(default=(), max_length=5)
    specific: tuple[str, ...] = Field(default=(), max_length=5)
    action_verbs: tuple[str, ...] = Field(default=(), max_length=10)
    power_phrases: tuple[str, ...] = Field(default=(), max_length=5)
    content_quality_score: float = Field(ge=0.0, le=100.0)


class ScoreComponents(_Frozen):
    """Inputs of the weighted aggregate; ``similarity_score`` is in [0, 1]."""

    similarity_score: float
    keyword_match: MatchResult
    structure_analysis: StructureResult
    ai_suggestions: SuggestionBundle


class FeedbackInput(_Frozen):
    overall_score: float
    keyword_match: MatchResult | None = None
    structure_analysis: StructureResult | None = None
    ai_suggestions: SuggestionBundle | None = None


class Feedback(_Frozen):
    summary: str
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


class ScoreBreakdown(_Frozen):
    ats_compatibility: int = Field(ge=0, le=100)
    keyword_match: int = Field(ge=0, le=100)
    content_quality: int = Field(ge=0, le=100)
    section_completeness: int = Field(ge=0, le=100)
    overall_readability: int = Field(ge=0, le=100)


class KeywordAnalysis(_Frozen):
    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    resume_keywords: tuple[str, ...] = ()
    job_keywords: tuple[str, ...] = ()


class StructureAnalysis(_Frozen):
    sections: SectionMap
    issues: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


class AISuggestions(_Frozen):
    general: tuple[str, ...] = ()
    specific: tuple[str, ...] = ()
    action_verbs: tuple[str, ...] = ()
    power_phrases: tuple[str, ...] = ()


class Provenance(_Frozen):
    keywords: KeywordProvenance
    similarity: SimilarityProvenance
    suggestions: SuggestionProvenance


class ReportMetadata(_Frozen):
    file_name: str
    analysis_date: str
    text_length: int = Field(ge=0)
    word_count: int = Field(ge=0)
    provenance: Provenance


class AnalysisReport(_Frozen):
    overall_score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    keyword_analysis: KeywordAnalysis
    structure_analysis: StructureAnalysis
    ai_suggestions: AISuggestions
    feedback: Feedback
    metadata: ReportMetadata

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AnalyzeRequest(_Frozen):
    resume_text: str = Field(default="", max_length=50000)
    job_description: str = Field(default="", max_length=50000)
    file_name: str = Field(default="Resume", max_length=255)


class TextMetricsRequest(_Frozen):
    text: str = Field(default="", min_length=1, max_length=50000)


class UploadedDocument(_Frozen):
    file_name: str
    file_type: str
    text: str
    text_length: int
    word_count: int


class UploadResponse(_Frozen):
    success: bool = True
    data: UploadedDocument
    timestamp: str


class SupportedFormat(_Frozen):
    extension: str
    mime_type: str
    description: str

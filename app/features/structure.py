"""Heuristic section detection and ATS-hostility checks.

Detection is substring and regex matching over the raw text, not a parse of
section boundaries. A marker used in running prose ("five years of experience")
counts as a section, and "photography" trips the image check. Scores are
calibrated against that behaviour, so do not tighten the matching without
re-tuning the weights.
"""

from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_value
from app.features.scoring import round_half_up
from app.schemas.analysis import SECTION_NAMES, SectionMap, StructureResult

SECTION_MARKERS: dict[str, tuple[str, ...]] = {
    "contact": ("contact", "email", "phone", "address"),
    "summary": ("summary", "objective", "profile", "about"),
    "experience": ("experience", "work history", "employment", "career"),
    "education": ("education", "academic", "degree", "university", "college"),
    "skills": ("skills", "competencies", "technologies", "tools"),
}

ISSUE_IMAGES = "Contains images or graphics that may not be parsed by ATS"
ISSUE_TABLES = "Contains tables that may not be parsed correctly by ATS"
ISSUE_FORMATTING = "Contains formatting that may not be preserved by ATS"
ISSUE_HEADERS = "Contains headers or footers that may interfere with ATS parsing"
ISSUE_PAGE_NUMBERS = "Contains page numbers that may interfere with ATS parsing"
ISSUE_LINE_BREAKS = "Contains excessive line breaks that may affect ATS parsing"
ISSUE_SPECIAL_CHARS = "Contains excessive special characters that may affect ATS parsing"
ISSUE_FONTS = "Contains font specifications that may not be preserved by ATS"

_FORMATTING_PATTERNS = (
    re.compile(r"\*\*.*?\*\*"),
    re.compile(r"\*.*?\*"),
    re.compile(r"_.*?_"),
    re.compile(r"`.*?`"),
)
_PAGE_NUMBER_RE = re.compile(r"\bpage\s+\d+\b", re.IGNORECASE)
_LINE_BREAK_RUN_RE = re.compile(r"\n\s*\n\s*\n")
# ASCII word class, Unicode whitespace: accented letters count as special, a no-break space does not.
_SPECIAL_CHAR_RE = re.compile(r"[^A-Za-z0-9_\s.,;:!?\-()\[\]{}@#$%&+=/]")

MISSING_SECTION_RECOMMENDATIONS: dict[str, str] = {
    "contact": "Add a clear contact information section with email and phone number",
    "summary": "Include a professional summary or objective statement",
    "experience": "Add a detailed work experience section with quantifiable achievements",
    "education": "Include your educational background and relevant certifications",
    "skills": "Add a skills section highlighting relevant technical and soft skills",
}
ATS_HYGIENE_RECOMMENDATIONS = (
    "Use simple, clean formatting without images, tables, or excessive styling",
    "Avoid headers, footers, and page numbers",
    "Use standard fonts and avoid special formatting characters",
)
GENERAL_RECOMMENDATIONS = (
    "Use bullet points for better readability",
    'Include quantifiable achievements (e.g., "Increased sales by 25%")',
    "Use action verbs to start bullet points",
    "Keep the resume to 1-2 pages maximum",
)


def detect_sections(text: str) -> SectionMap:
    lowered = (text or "").lower()
    found = {
        name: any(marker in lowered for marker in SECTION_MARKERS[name])
        for name in SECTION_NAMES
    }
    return SectionMap(**found)


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(needle in text for needle in needles)


def check_ats_compatibility(text: str) -> list[str]:
    """Run the fixed battery of checks; each category adds at most one issue."""
    text = text or ""
    issues: list[str] = []

    if _contains_any(text, ("image", "graphic", "photo")):
        issues.append(ISSUE_IMAGES)

    if _contains_any(text, ("table", "grid")):
        issues.append(ISSUE_TABLES)

    if any(pattern.search(text) for pattern in _FORMATTING_PATTERNS):
        issues.append(ISSUE_FORMATTING)

    if _contains_any(text, ("header", "footer")):
        issues.append(ISSUE_HEADERS)

    if _PAGE_NUMBER_RE.search(text):
        issues.append(ISSUE_PAGE_NUMBERS)

    if _LINE_BREAK_RUN_RE.search(text):
        issues.append(ISSUE_LINE_BREAKS)

    ratio = float(get_scoring_value("structure.special_char_ratio", 0.1))
    special_count = len(_SPECIAL_CHAR_RE.findall(text))
    if special_count and special_count > len(text) * ratio:
        issues.append(ISSUE_SPECIAL_CHARS)

    if _contains_any(text, ("font", "size", "pt")):
        issues.append(ISSUE_FONTS)

    return issues


def build_recommendations(sections: SectionMap, issues: list[str]) -> list[str]:
    recommendations = [MISSING_SECTION_RECOMMENDATIONS[name] for name in sections.missing()]
    if issues:
        recommendations.extend(ATS_HYGIENE_RECOMMENDATIONS)
    recommendations.extend(GENERAL_RECOMMENDATIONS)
    limit = int(get_scoring_value("structure.max_recommendations", 8))
    return recommendations[:limit]


def calculate_structure_score(section_score: float, issue_count: int) -> int:
    penalty = float(get_scoring_value("structure.issue_penalty", 10))
    bonus = float(get_scoring_value("structure.clean_bonus", 10))
    bonus_floor = float(get_scoring_value("structure.clean_bonus_min_section_score", 80))

    score = max(0.0, section_score - penalty * issue_count)
    if section_score >= bonus_floor and issue_count == 0:
        score = min(100.0, score + bonus)
    return round_half_up(score)


def validate_resume_structure(text: str) -> StructureResult:
    sections = detect_sections(text)
    section_score = 100.0 * sections.found_count() / len(SECTION_NAMES)
    issues = check_ats_compatibility(text)
    return StructureResult(
        sections=sections,
        issues=tuple(issues),
        recommendations=tuple(build_recommendations(sections, issues)),
        score=calculate_structure_score(section_score, len(issues)),
        section_score=section_score,
    )

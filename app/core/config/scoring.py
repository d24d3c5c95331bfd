from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"

WEIGHT_KEYS = (
    "ats_compatibility",
    "keyword_match",
    "content_quality",
    "section_completeness",
    "overall_readability",
)
DEFAULT_WEIGHTS: dict[str, float] = {
    "ats_compatibility": 0.25,
    "keyword_match": 0.30,
    "content_quality": 0.20,
    "section_completeness": 0.15,
    "overall_readability": 0.10,
}


class ScoringConfigError(RuntimeError):
    pass


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from repo-level config/scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if not _SCORING_CONFIG_PATH.exists():
        raise ScoringConfigError(
            f"Scoring config not found at '{_SCORING_CONFIG_PATH}'. "
            "Expected file: config/scoring.yaml"
        )

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScoringConfigError(
            f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScoringConfigError(
            f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise ScoringConfigError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'weights.keyword_match'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def validate_weights(weights: dict[str, float]) -> dict[str, float]:
    missing = [key for key in WEIGHT_KEYS if key not in weights]
    if missing:
        raise ScoringConfigError(f"Scoring weights missing keys: {', '.join(missing)}")
    for key in WEIGHT_KEYS:
        if weights[key] < 0:
            raise ScoringConfigError(f"Scoring weight '{key}' must not be negative.")
    total = sum(weights[key] for key in WEIGHT_KEYS)
    if not math.isclose(total, 1.0, abs_tol=1e-6):
        raise ScoringConfigError(f"Scoring weights must sum to 1.0, got {total:.6f}.")
    return weights


def get_scoring_weights() -> dict[str, float]:
    raw = get_scoring_value("weights", None)
    if not isinstance(raw, dict):
        return dict(DEFAULT_WEIGHTS)
    try:
        weights = {key: float(raw.get(key, DEFAULT_WEIGHTS[key])) for key in WEIGHT_KEYS}
    except (TypeError, ValueError) as exc:
        raise ScoringConfigError(f"Scoring weights must be numeric: {exc}") from exc
    return validate_weights(weights)

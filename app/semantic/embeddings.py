from __future__ import annotations

import math


class VectorLengthMismatchError(ValueError):
    """Embedding vectors of different lengths; the provider broke its contract."""


def cosine_similarity(left: list[float], right: list[float]) -> float:
    if len(left) != len(right):
        raise VectorLengthMismatchError(
            f"Vectors must have the same length (got {len(left)} and {len(right)})"
        )
    dot = sum(a * b for a, b in zip(left, right))
    left_norm = math.sqrt(sum(a * a for a in left))
    right_norm = math.sqrt(sum(b * b for b in right))
    if left_norm <= 0 or right_norm <= 0:
        return 0.0
    return dot / (left_norm * right_norm)


def _word_set(text: str) -> set[str]:
    return set((text or "").lower().split())


def jaccard_similarity(left_text: str, right_text: str) -> float:
    left = _word_set(left_text)
    right = _word_set(right_text)
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from app.ai.types import EmbeddingClient
from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import SimilarityProvenance

from .embeddings import VectorLengthMismatchError, cosine_similarity, jaccard_similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarityResult:
    score: float
    provenance: SimilarityProvenance


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


async def calculate_similarity_detailed(
    text_a: str,
    text_b: str,
    *,
    embedder: EmbeddingClient | None = None,
) -> SimilarityResult:
    if embedder is None:
        return SimilarityResult(score=jaccard_similarity(text_a, text_b), provenance="lexical")

    max_chars = int(get_scoring_value("similarity.max_text_chars", 2000))
    try:
        vector_a, vector_b = await asyncio.gather(
            embedder.embed(text_a[:max_chars]),
            embedder.embed(text_b[:max_chars]),
        )
    except Exception as exc:  # noqa: BLE001 - lexical overlap is the fallback
        logger.warning("similarity_embedding_failed len_a=%s len_b=%s: %s", len(text_a), len(text_b), exc)
        return SimilarityResult(score=jaccard_similarity(text_a, text_b), provenance="lexical")

    try:
        score = cosine_similarity(vector_a, vector_b)
    except VectorLengthMismatchError as exc:
        logger.warning("similarity_vector_length_mismatch provider_contract_violation: %s", exc)
        return SimilarityResult(score=jaccard_similarity(text_a, text_b), provenance="lexical")
    return SimilarityResult(score=_clamp_unit(score), provenance="embedding")


async def calculate_similarity(
    text_a: str,
    text_b: str,
    *,
    embedder: EmbeddingClient | None = None,
) -> float:
    result = await calculate_similarity_detailed(text_a, text_b, embedder=embedder)
    return result.score

from .embeddings import VectorLengthMismatchError, cosine_similarity, jaccard_similarity
from .similarity import SimilarityResult, calculate_similarity, calculate_similarity_detailed

__all__ = [
    "VectorLengthMismatchError",
    "cosine_similarity",
    "jaccard_similarity",
    "SimilarityResult",
    "calculate_similarity",
    "calculate_similarity_detailed",
]

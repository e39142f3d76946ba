"""Cosine similarity and ranking over schema embeddings."""

from typing import List, Mapping, Tuple

from schemavec.embedding.projector import magnitude
from schemavec.errors import DimensionMismatchError


def cosine_similarity(a: List[float], b: List[float]) -> float:
    """
    Cosine of the angle between ``a`` and ``b``.

    Returns 0.0 when either vector is all zeros.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(f"Cannot compare vectors of length {len(a)} and {len(b)}.")
    denom = magnitude(a) * magnitude(b)
    if denom == 0:
        return 0.0
    return sum(x * y for x, y in zip(a, b)) / denom


def rank_by_similarity(
    query: List[float],
    candidates: Mapping[str, List[float]],
    top_k: int = 5,
) -> List[Tuple[str, float]]:
    """Return the ``top_k`` (name, score) pairs most similar to ``query``."""
    scored = [(name, cosine_similarity(query, vector)) for name, vector in candidates.items()]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:top_k]

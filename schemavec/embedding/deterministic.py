"""
Deterministic offline text embedding.

This is the default model behind LearnedEmbeddingAdapter when no real
text-embedding model (sentence-transformers, a hosted API, ...) is plugged
in. It lets the learned path run end-to-end without:

    • network access
    • API keys or environment variables
    • heavyweight ML dependencies

It mimics the *shape* of a model embedding, not its meaning:
    • fixed dimensionality
    • deterministic output for identical inputs
    • input-sensitive variation for different inputs
    • normalized to unit length
"""

from typing import List

from schemavec.embedding.projector import normalize

DEFAULT_DIM = 1536


def compute_embedding(text: str, dim: int = DEFAULT_DIM) -> List[float]:
    """
    Compute a deterministic, input-sensitive embedding vector.

    Parameters
    ----------
    text : str
        The input text, typically rendered CREATE TABLE statements.
    dim : int
        Output length.

    Returns
    -------
    List[float]
        A ``dim``-length unit vector, or the zero vector for empty text.

    Each UTF-8 byte contributes ``(byte % 97) / 97`` to slot
    ``position % dim``, so the output is stable and varies with the input.
    """
    vec = [0.0] * dim
    for i, ch in enumerate(text.encode("utf-8")):
        vec[i % dim] += (ch % 97) / 97.0
    return normalize(vec)

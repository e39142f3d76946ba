"""
Combiner: blends generator outputs into one normalized embedding.

    result[i] = sum over generators g of weight_g * vector_g[i]

followed by normalization. Because the result is normalized, scaling every
weight by the same positive factor does not change it; changing the ratio
between weights does.
"""

from typing import List, Mapping, Sequence, Tuple

from schemavec.embedding.projector import normalize
from schemavec.errors import ConfigurationError, DimensionMismatchError


def combine(vectors_with_weights: Sequence[Tuple[List[float], float]]) -> List[float]:
    """
    Weighted sum of vectors, normalized.

    Raises
    ------
    ConfigurationError
        If no vectors are given.
    DimensionMismatchError
        If the vectors do not all share one length.
    """
    if not vectors_with_weights:
        raise ConfigurationError("combine() needs at least one vector.")

    size = len(vectors_with_weights[0][0])
    for position, (vector, _) in enumerate(vectors_with_weights):
        if len(vector) != size:
            raise DimensionMismatchError(
                f"Vector {position} has length {len(vector)}, expected {size}."
            )

    result = [0.0] * size
    for vector, weight in vectors_with_weights:
        if not weight:
            continue
        for i, value in enumerate(vector):
            result[i] += weight * value

    return normalize(result)


def combine_named(
    vectors: Mapping[str, List[float]],
    generator_weights: Mapping[str, float],
) -> List[float]:
    """
    Combine vectors keyed by generator name using ``{name: weight}``.

    Generators missing from ``generator_weights`` get weight 0. A weight for
    a generator that produced no vector is a ConfigurationError.
    """
    unknown = sorted(set(generator_weights) - set(vectors))
    if unknown:
        raise ConfigurationError(
            f"Weights given for generators with no vector: {', '.join(unknown)}."
        )

    pairs: List[Tuple[List[float], float]] = []
    for name, vector in vectors.items():
        pairs.append((vector, generator_weights.get(name, 0.0)))
    return combine(pairs)


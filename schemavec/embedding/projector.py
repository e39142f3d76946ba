"""
Weighted hash projection: the primitive every signal extractor builds on.

A word's integer index is mapped to a vector slot with ``index % len(vector)``.
Different words landing on the same slot simply add up; collisions are the
price of a fixed-size vector and are never corrected.
"""

from typing import List


def slot_for(word_index: int, size: int) -> int:
    """Slot that ``word_index`` hashes to in a vector of length ``size``."""
    return word_index % size


def accumulate(vector: List[float], word_index: int, weight: float) -> None:
    """Add ``weight`` to the slot of ``word_index``, in place."""
    vector[slot_for(word_index, len(vector))] += weight


def spread(
    vector: List[float],
    word_index: int,
    weight: float,
    decay: float,
    radius: int = 1,
) -> None:
    """
    Accumulate ``weight`` at the word's slot plus a decayed share around it.

    Neighbor ``s ± d`` receives ``weight * decay ** d`` for ``d`` in
    ``1..radius``, wrapping around the ends of the vector. The radius is
    capped at ``(len(vector) - 1) // 2`` so no slot is reached twice.
    """
    size = len(vector)
    slot = slot_for(word_index, size)
    vector[slot] += weight
    radius = min(radius, (size - 1) // 2)
    for distance in range(1, radius + 1):
        share = weight * decay**distance
        vector[(slot - distance) % size] += share
        vector[(slot + distance) % size] += share


def magnitude(vector: List[float]) -> float:
    return sum(x * x for x in vector) ** 0.5


def normalize(vector: List[float]) -> List[float]:
    """
    Return ``vector`` scaled to unit Euclidean length.

    A zero-magnitude vector (empty input) is returned unchanged as a copy
    instead of dividing by zero.
    """
    norm = magnitude(vector)
    if norm == 0:
        return list(vector)
    return [x / norm for x in vector]

"""
Public API for the embedding subsystem.

Callers can rely on:

    from schemavec.embedding import PrimaryKeyAwareEmbeddingGenerator
    from schemavec.embedding import combine, WordIndex

without needing to know the internal module layout.
"""

from typing import Dict, Type

from .base import SignalExtractor
from .combiner import combine, combine_named
from .deterministic import compute_embedding
from .enhanced import EnhancedEmbeddingGenerator
from .foreign_key import ForeignKeyAwareEmbeddingGenerator
from .learned import LearnedEmbeddingAdapter, reduce_dimensions
from .primary_key import PrimaryKeyAwareEmbeddingGenerator
from .projector import accumulate, normalize, spread
from .tokenizer import tokenize
from .word_index import LockedWordIndex, WordIndex

# Hashing extractors by generator name, in the order the pipeline runs them.
EXTRACTORS: Dict[str, Type[SignalExtractor]] = {
    EnhancedEmbeddingGenerator.name: EnhancedEmbeddingGenerator,
    PrimaryKeyAwareEmbeddingGenerator.name: PrimaryKeyAwareEmbeddingGenerator,
    ForeignKeyAwareEmbeddingGenerator.name: ForeignKeyAwareEmbeddingGenerator,
}

__all__ = [
    "EXTRACTORS",
    "EnhancedEmbeddingGenerator",
    "ForeignKeyAwareEmbeddingGenerator",
    "LearnedEmbeddingAdapter",
    "LockedWordIndex",
    "PrimaryKeyAwareEmbeddingGenerator",
    "SignalExtractor",
    "WordIndex",
    "accumulate",
    "combine",
    "combine_named",
    "compute_embedding",
    "normalize",
    "reduce_dimensions",
    "spread",
    "tokenize",
]

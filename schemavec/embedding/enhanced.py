"""
EnhancedEmbeddingGenerator: balanced weighting with positional smoothing.

Every weight this variant assigns to a slot is also spread, decayed, onto
the neighboring slots (see projector.spread). The window decay and radius
come from EmbeddingConfig.
"""

from typing import List

from schemavec.embedding.base import SignalExtractor
from schemavec.embedding.projector import spread
from schemavec.embedding.word_index import WordIndex
from schemavec.types import WeightTable


class EnhancedEmbeddingGenerator(SignalExtractor):
    name = "enhanced"
    default_weights = WeightTable(
        base=1.0,
        primary_key_token=3.0,
        foreign_key_token=2.0,
        primary_key_extra=5.0,
        foreign_key_extra=3.0,
        referenced_extra=0.0,
        domain_keyword=0.0,
        conditional=0.0,
        entity=4.0,
    )

    def _apply(self, vector: List[float], word_index: WordIndex, word: str, weight: float) -> None:
        if not weight:
            return
        spread(
            vector,
            word_index.get_or_add(word),
            weight,
            decay=self.config.window_decay,
            radius=self.config.window_radius,
        )

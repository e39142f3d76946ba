"""
Shared skeleton for the hashing signal extractors.

Each extractor walks the same eight steps over a schema and differs only in
its weight table and keyword lists:

    1. tokenize the schema text
    2. every token: base weight, plus extra when it is the primary key or
       one of the foreign key columns
    3. the primary key as a whole unit
    4. every foreign key as a whole unit, plus its referenced entity and
       any join-pattern bonus
    5. domain keywords, unconditionally
    6. conditional keywords, only when they occur in the token stream
    7. every entity name
    8. normalize

Steps whose weight is 0 for a variant are skipped outright, including the
WordIndex insert, so they leave no trace in the vocabulary.
"""

from typing import List, Optional, Sequence, Tuple

from schemavec.config import EmbeddingConfig
from schemavec.embedding.projector import accumulate, normalize
from schemavec.embedding.tokenizer import tokenize
from schemavec.embedding.word_index import WordIndex
from schemavec.schema import ForeignKeyInput, coerce_foreign_keys
from schemavec.types import WeightTable


class SignalExtractor:
    """
    Base class for the weighted hashing generators.

    Subclasses set ``name``, ``default_weights`` and their keyword lists.

    Parameters
    ----------
    config : EmbeddingConfig, optional
        Embedding size, weight overrides and tokenizer options. Defaults to
        ``EmbeddingConfig()``.
    """

    name = ""
    default_weights: WeightTable

    # Accumulated unconditionally (step 5).
    domain_keywords: Tuple[str, ...] = ()

    # Accumulated only when present as a token (step 6).
    conditional_keywords: Tuple[str, ...] = ()

    # Substrings checked against each foreign key column (step 4). A match
    # adds the conditional weight at that foreign key's slot, once per key.
    join_patterns: Tuple[str, ...] = ()

    def __init__(self, config: Optional[EmbeddingConfig] = None) -> None:
        self.config = config or EmbeddingConfig()
        self.weights = self.config.weights_for(self.name, self.default_weights)

    def _apply(self, vector: List[float], word_index: WordIndex, word: str, weight: float) -> None:
        if not weight:
            return
        accumulate(vector, word_index.get_or_add(word), weight)

    def accumulate_signals(
        self,
        schema_text: str,
        entities: Sequence[str],
        primary_key: str,
        foreign_keys: Sequence[ForeignKeyInput],
        word_index: Optional[WordIndex] = None,
    ) -> List[float]:
        """
        Return the raw (pre-normalization) weighted vector for a schema.

        An empty token stream yields the all-zero vector; no other step runs.
        """
        index = word_index if word_index is not None else WordIndex()
        vector = [0.0] * self.config.embedding_size

        tokens = tokenize(schema_text, remove_stop_words=self.config.remove_stop_words)
        if not tokens:
            return vector

        weights = self.weights
        pk = (primary_key or "").strip().lower()
        fks = coerce_foreign_keys(foreign_keys)
        fk_columns = {fk["column"] for fk in fks}

        # Step 2: literal tokens
        for token in tokens:
            weight = weights["base"]
            if pk and token == pk:
                weight += weights["primary_key_token"]
            if token in fk_columns:
                weight += weights["foreign_key_token"]
            self._apply(vector, index, token, weight)

        # Step 3: primary key
        if pk:
            self._apply(vector, index, pk, weights["primary_key_extra"])

        # Step 4: foreign keys
        for fk in fks:
            column = fk["column"]
            self._apply(vector, index, column, weights["foreign_key_extra"])

            referenced = fk.get("referenced_table") or fk.get("referenced_column")
            if referenced:
                self._apply(vector, index, referenced, weights["referenced_extra"])

            if any(pattern in column for pattern in self.join_patterns):
                self._apply(vector, index, column, weights["conditional"])

        # Step 5: domain bias
        for keyword in self.domain_keywords:
            self._apply(vector, index, keyword, weights["domain_keyword"])

        # Step 6: conditional keywords
        present = set(tokens)
        for keyword in self.conditional_keywords:
            if keyword in present:
                self._apply(vector, index, keyword, weights["conditional"])

        # Step 7: entities
        for entity in entities:
            name = entity.strip().lower()
            if name:
                self._apply(vector, index, name, weights["entity"])

        return vector

    def generate_embedding(
        self,
        schema_text: str,
        entities: Sequence[str],
        primary_key: str,
        foreign_keys: Sequence[ForeignKeyInput],
        word_index: Optional[WordIndex] = None,
    ) -> List[float]:
        """Return the normalized embedding for a schema (step 8)."""
        return normalize(
            self.accumulate_signals(schema_text, entities, primary_key, foreign_keys, word_index)
        )

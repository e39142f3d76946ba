"""PrimaryKeyAwareEmbeddingGenerator: emphasizes the primary key and key types."""

from schemavec.embedding.base import SignalExtractor
from schemavec.types import WeightTable


class PrimaryKeyAwareEmbeddingGenerator(SignalExtractor):
    name = "primary_key"
    default_weights = WeightTable(
        base=1.0,
        primary_key_token=10.0,
        foreign_key_token=3.0,
        primary_key_extra=15.0,
        foreign_key_extra=0.0,
        referenced_extra=0.0,
        domain_keyword=5.0,
        conditional=3.0,
        entity=2.0,
    )
    domain_keywords = ("primary", "key", "id", "identifier")

    # Common primary key column types.
    conditional_keywords = ("int", "bigint", "uuid", "guid")

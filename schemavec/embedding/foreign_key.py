"""ForeignKeyAwareEmbeddingGenerator: emphasizes relationships between tables."""

from schemavec.embedding.base import SignalExtractor
from schemavec.types import WeightTable


class ForeignKeyAwareEmbeddingGenerator(SignalExtractor):
    name = "foreign_key"
    default_weights = WeightTable(
        base=1.0,
        primary_key_token=3.0,
        foreign_key_token=10.0,
        primary_key_extra=0.0,
        foreign_key_extra=15.0,
        referenced_extra=5.0,
        domain_keyword=5.0,
        conditional=3.0,
        entity=2.0,
    )
    domain_keywords = ("foreign", "key", "references", "constraint")

    # Referential action words, e.g. "ON DELETE SET NULL".
    conditional_keywords = ("on", "delete", "cascade", "set", "null", "update")

    join_patterns = ("_id", "_fk")

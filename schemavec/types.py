"""
schemavec/types.py

Centralized type definitions for schemavec.

This module defines the TypedDicts and Protocols shared by the schema
helpers, the signal extractors, the combiner and the CLI. Keeping them in
one place gives:

    • A single source of truth for column records and weight tables
    • Clear contracts between the schema layer and the embedding engine
    • Easy construction of fixtures in tests
"""

from typing import Dict, List, Optional, Protocol, TypedDict


# ---------------------------------------------------------------------------
# ColumnRecord
# ---------------------------------------------------------------------------
# One row of the schema-introspection query: a single column of a single
# table, in the order the database reported it.
#
# total=False because referenced_table / referenced_column only exist on
# foreign key columns, and most drivers omit the boolean flags when false.
# ---------------------------------------------------------------------------
class ColumnRecord(TypedDict, total=False):
    table: str
    column: str
    data_type: str
    is_nullable: bool
    is_identity: bool
    is_primary_key: bool
    is_foreign_key: bool
    referenced_table: Optional[str]
    referenced_column: Optional[str]


# ---------------------------------------------------------------------------
# ForeignKeyRef
# ---------------------------------------------------------------------------
# A foreign key column paired with the entity it points at. Extractors also
# accept plain strings wherever a ForeignKeyRef is expected.
# ---------------------------------------------------------------------------
class ForeignKeyRef(TypedDict, total=False):
    column: str
    referenced_table: Optional[str]
    referenced_column: Optional[str]


# ---------------------------------------------------------------------------
# WeightTable
# ---------------------------------------------------------------------------
# Per-variant weights applied by the signal extractors. A weight of 0.0
# disables the corresponding step for that variant.
# ---------------------------------------------------------------------------
class WeightTable(TypedDict):
    base: float
    primary_key_token: float
    foreign_key_token: float
    primary_key_extra: float
    foreign_key_extra: float
    referenced_extra: float
    domain_keyword: float
    conditional: float
    entity: float


# ---------------------------------------------------------------------------
# SchemaEmbeddingResult
# ---------------------------------------------------------------------------
# Returned by schemavec.pipeline.embed_schema():
#   • vectors   → one normalized vector per generator that ran
#   • embedding → the combined, normalized vector
#   • vocabulary_size → distinct words seen by the shared WordIndex
#     (the largest per-extractor index when extractors ran in parallel)
# ---------------------------------------------------------------------------
class SchemaEmbeddingResult(TypedDict):
    vectors: Dict[str, List[float]]
    embedding: List[float]
    vocabulary_size: int


# ---------------------------------------------------------------------------
# TextEmbeddingModel
# ---------------------------------------------------------------------------
# Anything that maps text to a vector: a sentence-transformers model wrapped
# in a lambda, a hosted API client, or the offline deterministic embedding.
# ---------------------------------------------------------------------------
class TextEmbeddingModel(Protocol):
    def __call__(self, text: str) -> List[float]: ...

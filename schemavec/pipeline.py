"""
End-to-end schema embedding.

This module is the single place that runs every generator over one schema
and combines their outputs:

    schema text + SchemaMetadata
        → EnhancedEmbeddingGenerator
        → PrimaryKeyAwareEmbeddingGenerator
        → ForeignKeyAwareEmbeddingGenerator
        → LearnedEmbeddingAdapter (only when supplied)
        → combine_named(vectors, config.generator_weights)

By default the extractors run one after another and share a single
WordIndex, so the same word hashes to the same slot in every generator's
vector. Callers embedding several schemas for comparison pass one WordIndex
to every call. With ``parallel=True`` each extractor gets its own WordIndex and
runs on a thread pool; nothing is shared, so no locking is needed.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from schemavec.config import EmbeddingConfig
from schemavec.embedding import EXTRACTORS, LearnedEmbeddingAdapter, WordIndex, combine_named
from schemavec.errors import ConfigurationError
from schemavec.schema import SchemaMetadata
from schemavec.types import SchemaEmbeddingResult


def _run_extractor(
    name: str,
    schema_text: str,
    metadata: SchemaMetadata,
    config: EmbeddingConfig,
    word_index: WordIndex,
) -> List[float]:
    extractor = EXTRACTORS[name](config)
    return extractor.generate_embedding(
        schema_text,
        metadata.entities,
        metadata.primary_key,
        metadata.foreign_keys,
        word_index=word_index,
    )


def embed_schema(
    schema_text: str,
    metadata: SchemaMetadata,
    config: Optional[EmbeddingConfig] = None,
    learned: Optional[LearnedEmbeddingAdapter] = None,
    parallel: bool = False,
    word_index: Optional[WordIndex] = None,
) -> SchemaEmbeddingResult:
    """
    Run every generator over a schema and combine the results.

    Parameters
    ----------
    schema_text : str
        Rendered CREATE TABLE statements for all tables.
    metadata : SchemaMetadata
        Entities, primary key and foreign keys for the same schema.
    config : EmbeddingConfig, optional
        Defaults to ``EmbeddingConfig()``.
    learned : LearnedEmbeddingAdapter, optional
        Adds a "learned" vector. Its output length must equal
        ``config.embedding_size`` or combining fails.
    parallel : bool
        Run the extractors concurrently with independent vocabularies.
    word_index : WordIndex, optional
        Vocabulary to share with other schemas in the same batch, so that
        schemas compared against each other hash words consistently. Only
        valid for sequential runs.

    Raises
    ------
    DimensionMismatchError
        If the learned vector's length differs from the extractors'.
    ConfigurationError
        If the config weights a generator that will not run (checked before
        any generator runs), or a shared word_index is combined with
        parallel=True.
    """
    config = config or EmbeddingConfig()
    if parallel and word_index is not None:
        raise ConfigurationError("A shared word_index cannot be used with parallel=True.")

    available = set(EXTRACTORS)
    if learned is not None:
        available.add(learned.name)
    missing = sorted(set(config.generator_weights) - available)
    if missing:
        raise ConfigurationError(
            f"Weights given for generators that will not run: {', '.join(missing)}."
        )

    vectors: Dict[str, List[float]] = {}

    if parallel:
        indices = {name: WordIndex() for name in EXTRACTORS}
        with ThreadPoolExecutor(max_workers=len(EXTRACTORS)) as pool:
            futures = {
                name: pool.submit(_run_extractor, name, schema_text, metadata, config, indices[name])
                for name in EXTRACTORS
            }
            for name, future in futures.items():
                vectors[name] = future.result()
        vocabulary_size = max(index.count for index in indices.values())
    else:
        shared = word_index if word_index is not None else WordIndex()
        for name in EXTRACTORS:
            vectors[name] = _run_extractor(name, schema_text, metadata, config, shared)
        vocabulary_size = shared.count

    if learned is not None:
        vectors[learned.name] = learned.generate(schema_text)

    return SchemaEmbeddingResult(
        vectors=vectors,
        embedding=combine_named(vectors, config.generator_weights),
        vocabulary_size=vocabulary_size,
    )

"""
Exception hierarchy for schemavec.

Every error raised on purpose by the package derives from
SchemaEmbeddingError so the CLI can report it cleanly. None of these are
retried: the core performs no I/O, so a failure is either a programming
error or a bad configuration.
"""


class SchemaEmbeddingError(Exception):
    """Base class for all schemavec errors."""


class NotFoundError(SchemaEmbeddingError, LookupError):
    """A WordIndex lookup asked for an index that was never assigned."""


class DimensionMismatchError(SchemaEmbeddingError, ValueError):
    """Vectors of unequal length were passed to the combiner."""


class ConfigurationError(SchemaEmbeddingError, ValueError):
    """An embedding size, weight or generator name is invalid."""


class ModelOutputError(SchemaEmbeddingError, ValueError):
    """A text embedding model returned a vector that cannot be used."""

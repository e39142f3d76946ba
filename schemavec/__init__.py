"""schemavec: weighted multi-signal hashing embeddings for database schemas."""

__version__ = "0.1.0"

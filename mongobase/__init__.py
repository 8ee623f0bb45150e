"""Base model for MongoDB documents with insert, update and soft-delete metadata, a user repository and demonstrations."""

__version__ = "1.0.0"

__all__ = ["model", "demo", "repository"]
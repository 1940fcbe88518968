"""
Core business logic module.

Contains the ingestion pipeline, retrieval, answer generation and the
exception hierarchy shared by every layer.
"""

from agency_rag.core.exceptions import (
    AgencyRAGException,
    AnswerGenerationError,
    ChunkerConfigurationError,
    ConcurrentProcessingError,
    DocumentNotFoundError,
    DocumentNotReadyError,
    DocumentProcessingError,
    EmbeddingError,
    ExtractionError,
    IncompleteIndexError,
    IndexUnavailableError,
    StorageFetchError,
    UnsupportedFileTypeError,
)

__all__ = [
    "AgencyRAGException",
    "AnswerGenerationError",
    "ChunkerConfigurationError",
    "ConcurrentProcessingError",
    "DocumentNotFoundError",
    "DocumentNotReadyError",
    "DocumentProcessingError",
    "EmbeddingError",
    "ExtractionError",
    "IncompleteIndexError",
    "IndexUnavailableError",
    "StorageFetchError",
    "UnsupportedFileTypeError",
]

"""
Exception hierarchy for the agency strategy RAG service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class AgencyRAGException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message (details stay in .details)."""
        return self.message


class DocumentNotFoundError(AgencyRAGException):
    """Raised when a referenced document does not exist."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id}", details)


class ChunkerConfigurationError(AgencyRAGException):
    """Raised when the chunk window cannot make forward progress."""

    def __init__(self, chunk_size: int, chunk_overlap: int) -> None:
        super().__init__(
            f"Invalid chunk window: size={chunk_size}, overlap={chunk_overlap} "
            "(require size > 0 and 0 <= overlap < size)",
            {"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
        )


class ConcurrentProcessingError(AgencyRAGException):
    """Raised when another pipeline run already holds the document."""

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(
            f"Document {document_id} is already being processed",
            {"document_id": document_id},
        )


class DocumentProcessingError(AgencyRAGException):
    """Base exception for per-document pipeline stage failures."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message (persisted on the failed document)
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class StorageFetchError(DocumentProcessingError):
    """Raised when raw file bytes cannot be fetched from object storage."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        super().__init__(message, details={"file_path": file_path} if file_path else None)
        self.file_path = file_path


class UnsupportedFileTypeError(DocumentProcessingError):
    """Raised when a declared MIME type has no extraction rule."""

    def __init__(self, file_type: str | None) -> None:
        super().__init__(f"Unsupported file type: {file_type}", details={"file_type": file_type})
        self.file_type = file_type


class ExtractionError(DocumentProcessingError):
    """Raised when an extraction library fails on the file."""

    def __init__(self, message: str, file_type: str | None = None) -> None:
        super().__init__(message, details={"file_type": file_type} if file_type else None)
        self.file_type = file_type


class EmbeddingError(DocumentProcessingError):
    """Raised when the embedding provider fails."""

    pass


class IndexUnavailableError(DocumentProcessingError):
    """Raised when a vector index operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize index error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, delete, get)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details=details)


class IncompleteIndexError(IndexUnavailableError):
    """Raised when expected chunk keys are missing after an upsert run."""

    def __init__(self, document_id: str, missing_keys: list[str]) -> None:
        super().__init__(
            f"{len(missing_keys)} chunk vector(s) missing from index after upsert",
            operation="verify",
            details={"document_id": document_id, "missing_keys": missing_keys[:20]},
        )
        self.missing_keys = missing_keys


class DocumentNotReadyError(AgencyRAGException):
    """Raised when a document has no extracted text yet."""

    def __init__(self, document_id: str) -> None:
        super().__init__(
            "Document text extraction not completed or failed",
            {"document_id": document_id},
        )


class AnswerGenerationError(AgencyRAGException):
    """Raised when the chat model call fails."""

    pass

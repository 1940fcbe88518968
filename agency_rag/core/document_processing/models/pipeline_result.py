"""
Pipeline result and processing status models.

Dependencies: pydantic, agency_rag.boundary.db.document_model
System role: Return types for DocumentPipeline.process() and status reads
"""

from pydantic import BaseModel, ConfigDict, Field

from agency_rag.boundary.db.document_model import DocumentModel, DocumentStatus


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    document_id: str = Field(description="Unique document identifier")
    status: DocumentStatus = Field(description="Final status written by the run")
    chunk_count: int = Field(default=0, description="Number of chunks indexed")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
    error: str | None = Field(default=None, description="Failure reason, if any")


class ProcessingStatus(BaseModel):
    """
    Processing status of one document as exposed to callers.

    completed is true exactly when status is completed.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: DocumentStatus
    completed: bool
    chunks_count: int | None = Field(default=None, alias="chunksCount")
    error: str | None = None

    @classmethod
    def from_document(cls, document: DocumentModel) -> "ProcessingStatus":
        """Build the status object from a document record (NULL status reads as pending)."""
        status = document.effective_status
        return cls(
            status=status,
            completed=status == DocumentStatus.COMPLETED,
            chunks_count=document.chunks_count,
            error=document.error_message,
        )

"""
Document ORM model.

Represents an uploaded project document with its processing status.
The record is created by the upload flow (outside this service) with no
status; the ingestion pipeline owns every later transition.

Dependencies: sqlalchemy, agency_rag.boundary.db.base
System role: Document persistence for ingestion tracking
"""

import enum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from agency_rag.boundary.db.base import Base, TimestampMixin


class DocumentStatus(str, enum.Enum):
    """
    Document processing lifecycle states.

    PENDING: Uploaded, awaiting ingestion (a NULL status reads as pending)
    PROCESSING: A pipeline run holds the document
    COMPLETED: Text extracted and every chunk indexed
    FAILED: A stage failed; error_message holds the reason
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DocumentModel(Base, TimestampMixin):
    """
    Document ORM model tracking ingestion pipeline state.

    Attributes:
        id: Document ID assigned by the upload flow
        project_id: Owning project; every vector carries it as a filter key
        organization_id: Owning organization
        name: Original filename
        file_type: Declared MIME type, drives extractor dispatch
        file_path: Object key of the raw bytes in the documents bucket
        extracted_text: Full extracted text, set before chunking
        status: Processing state, NULL until the first run
        chunks_count: Number of indexed chunks, set on completion
        error_message: Reason for the last failure
        vector_key_count: Upper bound of chunk keys that may exist in the index
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)

    project_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    organization_id: Mapped[str] = mapped_column(String(128), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Original filename")
    file_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_path: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Object key for the raw document",
    )

    extracted_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[DocumentStatus | None] = mapped_column(
        Enum(DocumentStatus, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    chunks_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    error_message: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    vector_key_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    @property
    def effective_status(self) -> DocumentStatus:
        """Status with NULL read as pending."""
        return self.status or DocumentStatus.PENDING

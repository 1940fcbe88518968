"""
Document domain models and schemas.

Request/response schemas for document processing, status and summary
operations. Field names are camelCase on the wire.

Dependencies: pydantic
System role: Document API contracts
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from agency_rag.boundary.db.document_model import DocumentStatus


class ProcessDocumentResponse(BaseModel):
    """Response for a manual (re)processing call."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    chunks_count: int = Field(alias="chunksCount", description="Number of chunks indexed")


class DocumentStatusResponse(BaseModel):
    """Processing status of one document."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId")
    status: DocumentStatus
    completed: bool
    chunks_count: int | None = Field(default=None, alias="chunksCount")
    error: str | None = None
    has_extracted_text: bool = Field(alias="hasExtractedText")


class SummaryRequest(BaseModel):
    """Request schema for summarizing a document."""

    length: Literal["short", "medium", "long"] = Field(
        default="medium",
        description="short: 2-3 sentences, medium: 3-5 paragraphs, long: all major points",
    )


class SummaryResponse(BaseModel):
    """Generated document summary."""

    summary: str

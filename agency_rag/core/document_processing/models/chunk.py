"""
Chunk domain model for document processing pipeline.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """One chunk of a document's extracted text."""

    document_id: str = Field(description="Owning document ID")
    project_id: str = Field(description="Owning project ID")
    organization_id: str = Field(description="Owning organization ID")
    index: int = Field(ge=0, description="Sequential position among the document's chunks")
    text: str = Field(description="Chunk text (raw window slice)")

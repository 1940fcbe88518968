"""
Vector index schemas.

Pydantic models for the metadata stored with each chunk vector and the
results returned by a project-scoped query.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChunkVectorMetadata(BaseModel):
    """
    Metadata attached to each chunk vector.

    Serialized with the camelCase keys the index stores (documentId,
    projectId, organizationId); projectId is the filter key every query
    uses. chunk_index and text keep their snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId", description="Owning document ID")
    project_id: str = Field(alias="projectId", description="Owning project ID (query filter)")
    organization_id: str = Field(alias="organizationId", description="Owning organization ID")
    chunk_index: int = Field(ge=0, description="Position of the chunk within the document")
    text: str = Field(description="Chunk text, returned as retrieval context")

    def to_index_metadata(self) -> dict[str, Any]:
        """Return the metadata dict as written to the index."""
        return self.model_dump(by_alias=True)


class VectorSearchResult(BaseModel):
    """Single result from a project-scoped vector query."""

    key: str = Field(description="Chunk key ({documentId}-chunk-{i})")
    score: float = Field(description="Similarity score, higher is closer")
    metadata: ChunkVectorMetadata = Field(description="Chunk metadata")

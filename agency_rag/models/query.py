"""
Project query schemas.

Dependencies: pydantic
System role: Query API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Request schema for asking a question about a project's documents."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(min_length=1, description="Question to answer")
    max_results: int = Field(
        default=5,
        ge=1,
        le=50,
        alias="maxResults",
        description="Maximum number of chunks to retrieve",
    )


class SourceChunk(BaseModel):
    """Retrieved chunk backing an answer."""

    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="documentId")
    text: str
    score: float


class QueryResponse(BaseModel):
    """Answer with the chunks it was generated from."""

    answer: str
    sources: list[SourceChunk]

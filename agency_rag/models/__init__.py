"""API request/response schemas."""

from agency_rag.models.document import (
    DocumentStatusResponse,
    ProcessDocumentResponse,
    SummaryRequest,
    SummaryResponse,
)
from agency_rag.models.query import QueryRequest, QueryResponse, SourceChunk

__all__ = [
    "DocumentStatusResponse",
    "ProcessDocumentResponse",
    "SummaryRequest",
    "SummaryResponse",
    "QueryRequest",
    "QueryResponse",
    "SourceChunk",
]

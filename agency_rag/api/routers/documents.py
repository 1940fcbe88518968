"""
Document API endpoints.

Routes:
- POST /documents/{document_id}/process - Run (or re-run) ingestion
- GET /documents/{document_id}/status - Processing status
- POST /documents/{document_id}/summary - Summarize extracted text

Dependencies: agency_rag.application.services, agency_rag.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from agency_rag.api.deps import get_document_service
from agency_rag.application.services.document_service import DocumentService
from agency_rag.models.document import (
    DocumentStatusResponse,
    ProcessDocumentResponse,
    SummaryRequest,
    SummaryResponse,
)

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/{document_id}/process", response_model=ProcessDocumentResponse)
@handle_service_errors
async def process_document(
    document_id: str,
    force: bool = Query(default=False, description="Reprocess even if a run appears in progress"),
    service: DocumentService = Depends(get_document_service),
) -> ProcessDocumentResponse:
    """
    Process a document through the ingestion pipeline.

    On a stage failure the document is marked failed and the error is
    returned to the caller.

    Raises:
        HTTPException(404): Document not found
        HTTPException(409): Document already being processed
        HTTPException(500): Pipeline stage failed
    """
    logger.info("Manual document processing requested", extra={"document_id": document_id, "force": force})
    result = await service.process_document(document_id, force=force)
    return ProcessDocumentResponse(success=True, chunks_count=result.chunk_count)


@router.get("/{document_id}/status", response_model=DocumentStatusResponse)
@handle_service_errors
async def get_document_status(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentStatusResponse:
    """Get a document's processing status."""
    return await service.get_status(document_id)


@router.post("/{document_id}/summary", response_model=SummaryResponse)
@handle_service_errors
async def summarize_document(
    document_id: str,
    request: SummaryRequest,
    service: DocumentService = Depends(get_document_service),
) -> SummaryResponse:
    """
    Summarize a document's extracted text.

    Raises:
        HTTPException(404): Document not found
        HTTPException(409): Text extraction not completed
        HTTPException(502): Chat model failed
    """
    summary = await service.summarize(document_id, request.length)
    return SummaryResponse(summary=summary)

"""
Project query API endpoint.

Routes:
- POST /projects/{project_id}/query - Answer a question from the project's documents

Dependencies: agency_rag.application.services, agency_rag.models
System role: Question answering HTTP API
"""

from fastapi import APIRouter, Depends

from agency_rag.api.deps import get_query_service
from agency_rag.application.services.query_service import QueryService
from agency_rag.models.query import QueryRequest, QueryResponse

from .router_utils import handle_service_errors

router = APIRouter(prefix="/projects", tags=["query"])


@router.post("/{project_id}/query", response_model=QueryResponse)
@handle_service_errors
async def query_project(
    project_id: str,
    request: QueryRequest,
    service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """Answer a question using only the project's indexed chunks."""
    return await service.query(project_id, request.question, request.max_results)

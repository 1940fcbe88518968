"""FastAPI dependency providers."""

from agency_rag.api.deps.dependencies import (
    get_document_service,
    get_query_service,
    get_service_cache,
)

__all__ = ["get_document_service", "get_query_service", "get_service_cache"]

"""
Application services.

Exports: DocumentService, QueryService
"""

from agency_rag.application.services.document_service import DocumentService
from agency_rag.application.services.query_service import QueryService

__all__ = ["DocumentService", "QueryService"]

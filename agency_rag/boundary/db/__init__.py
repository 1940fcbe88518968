"""
Database boundary layer: ORM model, CRUD operations and connection management.

Dependencies: sqlalchemy, agency_rag.configs
System role: Persistent storage for document records and their
processing status.
"""

from agency_rag.boundary.db.base import Base, TimestampMixin
from agency_rag.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
)
from agency_rag.boundary.db.document_crud import DocumentCRUD, document_crud
from agency_rag.boundary.db.document_model import DocumentModel, DocumentStatus

__all__ = [
    "Base",
    "TimestampMixin",
    "get_async_engine",
    "get_async_session_factory",
    "DocumentModel",
    "DocumentStatus",
    "DocumentCRUD",
    "document_crud",
]

"""
Document CRUD operations.

Create and read helpers for DocumentModel. Status transitions are owned
by the pipeline's DocumentStatusUpdater, not by this module.

Dependencies: sqlalchemy, agency_rag.boundary.db.document_model
System role: Document persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agency_rag.boundary.db.document_model import DocumentModel


class DocumentCRUD:
    """CRUD operations for DocumentModel."""

    async def create(self, session: AsyncSession, **kwargs) -> DocumentModel:
        """
        Create a new document record.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance
        """
        instance = DocumentModel(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: str) -> DocumentModel | None:
        """
        Retrieve a single document by primary key.

        Args:
            session: Async database session
            id: Document ID

        Returns:
            DocumentModel if found, None otherwise
        """
        stmt = select(DocumentModel).where(DocumentModel.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


document_crud = DocumentCRUD()

"""
Document status updater.

Owns every status transition a pipeline run makes on a document record:
NULL/pending/completed/failed -> processing -> completed (or failed with
an error message). Each operation runs in its own short transaction.

Dependencies: sqlalchemy, agency_rag.boundary.db
System role: Database persistence layer for the ingestion pipeline
"""

import logging

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import async_sessionmaker

from agency_rag.boundary.db.document_model import DocumentModel, DocumentStatus
from agency_rag.core.exceptions import (
    ConcurrentProcessingError,
    DocumentNotFoundError,
    DocumentNotReadyError,
)

logger = logging.getLogger(__name__)

MAX_ERROR_LENGTH = 2000
UNKNOWN_ERROR = "Unknown processing error"


class DocumentStatusUpdater:
    """Update document status in the document database during processing."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize with a session factory.

        Args:
            session_factory: async_sessionmaker bound to the document database
        """
        self._session_factory = session_factory

    async def get(self, document_id: str) -> DocumentModel | None:
        """Load a document record, or None if it does not exist."""
        async with self._session_factory() as session:
            result = await session.execute(select(DocumentModel).where(DocumentModel.id == document_id))
            return result.scalar_one_or_none()

    async def _update(self, document_id: str, *conditions, **values) -> int:
        async with self._session_factory() as session:
            try:
                stmt = (
                    update(DocumentModel)
                    .where(DocumentModel.id == document_id, *conditions)
                    .values(**values)
                    .execution_options(synchronize_session=False)
                )
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount
            except Exception as e:
                logger.error(f"{__name__}:_update - {type(e).__name__}: {e}")
                await session.rollback()
                raise

    async def claim(self, document_id: str, force: bool = False) -> None:
        """
        Move a document to PROCESSING unless another run already holds it.

        Clears chunks_count and error_message left by an earlier run.

        Args:
            document_id: Document ID
            force: Take the document even if it is already PROCESSING

        Raises:
            DocumentNotFoundError: Document does not exist
            ConcurrentProcessingError: Document is PROCESSING and force is False
        """
        conditions = []
        if not force:
            conditions.append(
                or_(DocumentModel.status.is_(None), DocumentModel.status != DocumentStatus.PROCESSING)
            )

        updated = await self._update(
            document_id,
            *conditions,
            status=DocumentStatus.PROCESSING,
            chunks_count=None,
            error_message=None,
        )
        if not updated:
            if await self.get(document_id) is None:
                raise DocumentNotFoundError(document_id)
            raise ConcurrentProcessingError(document_id)

        logger.info(
            f"{__name__}:claim - Document marked as PROCESSING",
            extra={"document_id": document_id, "force": force},
        )

    async def save_extracted_text(self, document_id: str, text: str) -> None:
        """Persist the full extracted text before chunking."""
        if not await self._update(document_id, extracted_text=text):
            raise DocumentNotFoundError(document_id)

    async def set_vector_key_count(self, document_id: str, count: int) -> None:
        """Record how many chunk keys may currently exist in the index for the document."""
        if not await self._update(document_id, vector_key_count=count):
            raise DocumentNotFoundError(document_id)

    async def mark_completed(self, document_id: str, chunks_count: int) -> None:
        """
        Mark document as COMPLETED with its chunk count.

        Only allowed once extracted text has been persisted.

        Raises:
            DocumentNotFoundError: Document does not exist
            DocumentNotReadyError: Document has no extracted text
        """
        updated = await self._update(
            document_id,
            DocumentModel.extracted_text.is_not(None),
            status=DocumentStatus.COMPLETED,
            chunks_count=chunks_count,
            error_message=None,
        )
        if not updated:
            if await self.get(document_id) is None:
                raise DocumentNotFoundError(document_id)
            raise DocumentNotReadyError(document_id)

        logger.info(
            f"{__name__}:mark_completed - Document marked as COMPLETED",
            extra={"document_id": document_id, "chunks_count": chunks_count},
        )

    async def mark_failed(self, document_id: str, error_message: str) -> None:
        """
        Mark document as FAILED with error details.

        Args:
            document_id: Document ID
            error_message: Human-readable error description (never stored empty)

        Raises:
            DocumentNotFoundError: Document does not exist
        """
        message = (error_message or "").strip() or UNKNOWN_ERROR
        message = message[:MAX_ERROR_LENGTH]

        updated = await self._update(
            document_id,
            status=DocumentStatus.FAILED,
            chunks_count=None,
            error_message=message,
        )
        if not updated:
            raise DocumentNotFoundError(document_id)

        logger.info(
            f"{__name__}:mark_failed - Document marked as FAILED",
            extra={"document_id": document_id, "error_message": message},
        )

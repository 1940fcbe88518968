"""
Document service orchestrator.

Manual processing, status reads and summaries for one document. Upload
and deletion belong to the client application and are not handled here.

Dependencies: agency_rag.boundary.db, agency_rag.core
System role: Document operations orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from agency_rag.boundary.db.document_crud import document_crud
from agency_rag.core.answering import DocumentSummarizer
from agency_rag.core.document_processing.entrypoint import DocumentPipeline
from agency_rag.core.document_processing.models import PipelineResult, ProcessingStatus
from agency_rag.core.exceptions import DocumentNotFoundError, DocumentNotReadyError
from agency_rag.models.document import DocumentStatusResponse

logger = logging.getLogger(__name__)


class DocumentService:
    """Document processing, status and summary operations."""

    def __init__(
        self,
        db: AsyncSession,
        pipeline: DocumentPipeline,
        summarizer: DocumentSummarizer,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document reads
            pipeline: Ingestion pipeline
            summarizer: Document summarizer
        """
        self.db = db
        self._pipeline = pipeline
        self._summarizer = summarizer

    async def process_document(self, document_id: str, force: bool = False) -> PipelineResult:
        """
        Run the ingestion pipeline on demand.

        Args:
            document_id: Document ID
            force: Reprocess even if another run holds the document

        Returns:
            PipelineResult: Completed run summary

        Raises:
            DocumentNotFoundError: No such document
            ConcurrentProcessingError: Another run holds the document
            DocumentProcessingError: A stage failed (document is marked failed)
        """
        return await self._pipeline.process(document_id, force=force)

    async def get_status(self, document_id: str) -> DocumentStatusResponse:
        """
        Read a document's processing status.

        Raises:
            DocumentNotFoundError: No such document
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        status = ProcessingStatus.from_document(document)
        return DocumentStatusResponse(
            document_id=document.id,
            status=status.status,
            completed=status.completed,
            chunks_count=status.chunks_count,
            error=status.error,
            has_extracted_text=bool(document.extracted_text),
        )

    async def summarize(self, document_id: str, length: str = "medium") -> str:
        """
        Summarize a document's extracted text.

        Raises:
            DocumentNotFoundError: No such document
            DocumentNotReadyError: Text extraction has not completed
            AnswerGenerationError: Chat model failed
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        if not document.extracted_text:
            raise DocumentNotReadyError(document_id)

        logger.info(
            f"{__name__}:summarize - Summarizing document",
            extra={"document_id": document_id, "length": length},
        )
        return await self._summarizer.summarize(document.extracted_text, length)

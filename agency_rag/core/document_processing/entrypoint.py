"""
Document pipeline orchestrator.

Coordinates storage fetch, extraction, chunking, embedding and vector
index writes for one document, and owns its status transitions:
processing -> completed, or processing -> failed with the error message.

Every blocking SDK call runs in a worker thread under a per-stage
timeout; a timeout fails the stage like any other error.

Dependencies: All task modules, agency_rag.boundary, agency_rag.configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
from typing import Any, Callable

from sqlalchemy.ext.asyncio import async_sessionmaker

from agency_rag.boundary.db.document_model import DocumentModel, DocumentStatus
from agency_rag.boundary.storage.s3_client import S3DocumentClient
from agency_rag.boundary.vdb.vector_index_factory import get_vector_index
from agency_rag.configs.pipeline import DocumentPipelineSettings
from agency_rag.configs.settings import Settings
from agency_rag.core.exceptions import (
    DocumentNotFoundError,
    EmbeddingError,
    ExtractionError,
    IndexUnavailableError,
    StorageFetchError,
    UnsupportedFileTypeError,
)

from .database import DocumentStatusUpdater
from .models import Chunk, PipelineResult
from .tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    VectorStoreTask,
    build_embeddings,
)

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: fetch -> extract -> chunk -> embed+upsert -> verify."""

    def __init__(
        self,
        settings: DocumentPipelineSettings,
        status_updater: DocumentStatusUpdater,
        storage,
        embedding_task: EmbeddingTask,
        vector_store_task: VectorStoreTask,
        extraction_task: ExtractionTask | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            settings: Pipeline settings (chunk window, timeouts, parallelism)
            status_updater: Document status persistence
            storage: Object exposing fetch_bytes(file_path) -> bytes
            embedding_task: Embedder shared with the query path
            vector_store_task: Vector index adapter
            extraction_task: Extractor (defaults to the standard MIME table)
            chunking_task: Chunker (defaults to the configured window)

        Raises:
            ChunkerConfigurationError: Invalid chunk window
        """
        self._settings = settings
        self._status = status_updater
        self._storage = storage
        self._embedding_task = embedding_task
        self._vector_store_task = vector_store_task
        self._extraction_task = extraction_task or ExtractionTask()
        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session_factory: async_sessionmaker,
        embedding_task: EmbeddingTask | None = None,
        vector_index=None,
    ) -> "DocumentPipeline":
        """
        Build the production pipeline from application settings.

        Args:
            settings: Application settings
            session_factory: Session factory for the document database
            embedding_task: Shared embedder (built from settings if None)
            vector_index: Shared vector index (built from settings if None)

        Returns:
            DocumentPipeline: Configured pipeline
        """
        pipeline_settings = settings.pipeline
        if embedding_task is None:
            embedding_task = EmbeddingTask(
                build_embeddings(pipeline_settings.embedding_model, pipeline_settings.embedding_dimension)
            )
        if vector_index is None:
            vector_index = get_vector_index(settings.vector_store)

        return cls(
            settings=pipeline_settings,
            status_updater=DocumentStatusUpdater(session_factory),
            storage=S3DocumentClient(bucket=settings.storage.bucket, region=settings.storage.region),
            embedding_task=embedding_task,
            vector_store_task=VectorStoreTask(vector_index),
        )

    async def _run_stage(
        self,
        func: Callable[..., Any],
        *args: Any,
        timeout: float,
        on_timeout: Callable[[], Exception],
    ) -> Any:
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise on_timeout() from e

    async def process(self, document_id: str, force: bool = False) -> PipelineResult:
        """
        Process one document through the full pipeline.

        Args:
            document_id: ID of an existing document record
            force: Reprocess even if another run holds the document

        Returns:
            PipelineResult: Completed run summary

        Raises:
            DocumentNotFoundError: No such document (nothing is written)
            ConcurrentProcessingError: Another run holds the document (nothing is written)
            DocumentProcessingError: A stage failed; the document is marked failed first
        """
        start_time = time.perf_counter()

        document = await self._status.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        logger.info(
            f"{__name__}:process - Processing document",
            extra={
                "document_id": document_id,
                "project_id": document.project_id,
                "file_type": document.file_type,
                "force": force,
            },
        )

        try:
            self._extraction_task.handler_for(document.file_type)
        except UnsupportedFileTypeError as e:
            await self._fail(document_id, e)
            raise

        await self._status.claim(document_id, force=force)

        try:
            chunk_count = await self._run(document)
            await self._status.mark_completed(document_id, chunk_count)
        except Exception as e:
            await self._fail(document_id, e)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:process - Document processed successfully",
            extra={
                "document_id": document_id,
                "chunk_count": chunk_count,
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )
        return PipelineResult(
            document_id=document_id,
            status=DocumentStatus.COMPLETED,
            chunk_count=chunk_count,
            processing_time_ms=elapsed_ms,
        )

    async def _fail(self, document_id: str, error: Exception) -> None:
        message = str(error) or type(error).__name__
        logger.error(
            f"{__name__}:process - {type(error).__name__}: {message}",
            extra={"document_id": document_id},
        )
        try:
            await self._status.mark_failed(document_id, message)
        except Exception as status_error:
            logger.exception(
                f"{__name__}:process - Failed to update status to FAILED",
                extra={"document_id": document_id, "error_type": type(status_error).__name__},
            )

    async def _run(self, document: DocumentModel) -> int:
        """Run every stage after the claim; returns the number of indexed chunks."""
        settings = self._settings
        document_id = document.id

        data = await self._run_stage(
            self._storage.fetch_bytes,
            document.file_path,
            timeout=settings.fetch_timeout_seconds,
            on_timeout=lambda: StorageFetchError(
                f"Timed out fetching file after {settings.fetch_timeout_seconds}s", document.file_path
            ),
        )

        text = await self._run_stage(
            self._extraction_task.extract,
            data,
            document.file_type,
            timeout=settings.extraction_timeout_seconds,
            on_timeout=lambda: ExtractionError(
                f"Timed out extracting text after {settings.extraction_timeout_seconds}s",
                document.file_type,
            ),
        )
        await self._status.save_extracted_text(document_id, text)

        chunks = [
            Chunk(
                document_id=document_id,
                project_id=document.project_id,
                organization_id=document.organization_id,
                index=i,
                text=chunk_text,
            )
            for i, chunk_text in enumerate(self._chunking_task.split(text))
        ]
        logger.info(
            f"{__name__}:_run - Text extracted and chunked",
            extra={"document_id": document_id, "text_length": len(text), "chunk_count": len(chunks)},
        )

        # Keys beyond the new chunk count would otherwise survive from an earlier run.
        await self._run_stage(
            self._vector_store_task.purge,
            document_id,
            document.vector_key_count or 0,
            timeout=settings.index_timeout_seconds,
            on_timeout=lambda: IndexUnavailableError(
                f"Timed out purging chunk vectors after {settings.index_timeout_seconds}s",
                operation="delete",
            ),
        )
        await self._status.set_vector_key_count(document_id, len(chunks))

        await self._index_chunks(chunks)

        await self._run_stage(
            self._vector_store_task.verify,
            document_id,
            len(chunks),
            timeout=settings.index_timeout_seconds,
            on_timeout=lambda: IndexUnavailableError(
                f"Timed out verifying chunk vectors after {settings.index_timeout_seconds}s",
                operation="get",
            ),
        )
        return len(chunks)

    async def _index_chunks(self, chunks: list[Chunk]) -> None:
        """Embed and upsert every chunk with bounded parallelism."""
        if not chunks:
            return

        settings = self._settings
        semaphore = asyncio.Semaphore(settings.max_concurrent_chunks)

        async def index_one(chunk: Chunk) -> str:
            async with semaphore:
                vector = await self._run_stage(
                    self._embedding_task.embed_chunk,
                    chunk.text,
                    timeout=settings.embedding_timeout_seconds,
                    on_timeout=lambda: EmbeddingError(
                        f"Timed out embedding chunk {chunk.index} after {settings.embedding_timeout_seconds}s"
                    ),
                )
                return await self._run_stage(
                    self._vector_store_task.upsert_chunk,
                    chunk,
                    vector,
                    timeout=settings.index_timeout_seconds,
                    on_timeout=lambda: IndexUnavailableError(
                        f"Timed out upserting chunk {chunk.index} after {settings.index_timeout_seconds}s",
                        operation="upsert",
                    ),
                )

        outcomes = await asyncio.gather(*(index_one(chunk) for chunk in chunks), return_exceptions=True)
        failures = [
            (chunk.index, outcome)
            for chunk, outcome in zip(chunks, outcomes)
            if isinstance(outcome, BaseException)
        ]

        if failures:
            logger.warning(
                f"{__name__}:_index_chunks - Chunk indexing incomplete",
                extra={
                    "document_id": chunks[0].document_id,
                    "succeeded": len(chunks) - len(failures),
                    "failed": len(failures),
                    "failed_indices": [index for index, _ in failures][:20],
                },
            )
            raise failures[0][1]

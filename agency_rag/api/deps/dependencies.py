"""
Dependency injection container.

Builds the embedder, vector index, pipeline and LLM clients once per
process from the shared settings and hands them to request-scoped
services.

Dependencies: agency_rag.configs, agency_rag.application, agency_rag.boundary, agency_rag.core
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agency_rag.application.services import DocumentService, QueryService
from agency_rag.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_factory = None
        self._engine = None
        self._vector_index = None
        self._embedding_task = None
        self._document_pipeline = None
        self._retriever = None
        self._answer_generator = None
        self._summarizer = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_factory(self) -> async_sessionmaker:
        """Get cached session factory for the document database."""
        if self._session_factory is None:
            from agency_rag.boundary.db.connection import get_async_engine, get_async_session_factory

            self._engine = get_async_engine(self.settings.database)
            self._session_factory = get_async_session_factory(self._engine)
        return self._session_factory

    @property
    def vector_index(self):
        """Get cached vector index."""
        if self._vector_index is None:
            from agency_rag.boundary.vdb.vector_index_factory import get_vector_index

            self._vector_index = get_vector_index(self.settings.vector_store)
        return self._vector_index

    @property
    def embedding_task(self):
        """Get cached embedder, shared by ingestion and retrieval."""
        if self._embedding_task is None:
            from agency_rag.core.document_processing.tasks import EmbeddingTask, build_embeddings

            pipeline_settings = self.settings.pipeline
            self._embedding_task = EmbeddingTask(
                build_embeddings(pipeline_settings.embedding_model, pipeline_settings.embedding_dimension)
            )
        return self._embedding_task

    @property
    def document_pipeline(self):
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            from agency_rag.core.document_processing.entrypoint import DocumentPipeline

            self._document_pipeline = DocumentPipeline.from_settings(
                self.settings,
                self.session_factory,
                embedding_task=self.embedding_task,
                vector_index=self.vector_index,
            )
        return self._document_pipeline

    @property
    def retriever(self):
        """Get cached retriever."""
        if self._retriever is None:
            from agency_rag.core.retriever import Retriever

            self._retriever = Retriever(
                embedding_task=self.embedding_task,
                vector_index=self.vector_index,
                default_top_k=self.settings.vector_store.top_k,
                timeout_seconds=self.settings.pipeline.index_timeout_seconds,
            )
        return self._retriever

    @property
    def answer_generator(self):
        """Get cached answer generator."""
        if self._answer_generator is None:
            from agency_rag.core.answering import AnswerGenerator, build_chat_model

            llm_settings = self.settings.llm
            self._answer_generator = AnswerGenerator(
                build_chat_model(llm_settings, llm_settings.answer_temperature),
                timeout_seconds=llm_settings.timeout_seconds,
            )
        return self._answer_generator

    @property
    def summarizer(self):
        """Get cached document summarizer."""
        if self._summarizer is None:
            from agency_rag.core.answering import DocumentSummarizer, build_chat_model

            llm_settings = self.settings.llm
            self._summarizer = DocumentSummarizer(
                build_chat_model(llm_settings, llm_settings.summary_temperature),
                max_input_chars=llm_settings.summary_max_input_chars,
                timeout_seconds=llm_settings.timeout_seconds,
            )
        return self._summarizer

    async def aclose(self) -> None:
        """Dispose the database engine and clear all cached instances."""
        if self._engine is not None:
            await self._engine.dispose()
        self.clear()


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session from the cached session factory.

    Yields:
        AsyncSession: Session closed when the request finishes
    """
    async with get_service_cache().session_factory() as session:
        yield session


def get_document_service(db: AsyncSession = Depends(get_db_session)) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        DocumentService: Document service with the cached pipeline and summarizer
    """
    cache = get_service_cache()
    return DocumentService(
        db=db,
        pipeline=cache.document_pipeline,
        summarizer=cache.summarizer,
    )


def get_query_service() -> QueryService:
    """
    Get query service instance.

    Returns:
        QueryService: Query service with the cached retriever and answer generator
    """
    cache = get_service_cache()
    return QueryService(retriever=cache.retriever, answer_generator=cache.answer_generator)

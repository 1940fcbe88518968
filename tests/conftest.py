"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory document database, keyword embeddings, fake storage,
an in-process vector index and a fully wired DocumentPipeline.
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import Embeddings
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agency_rag.boundary.db.base import Base
from agency_rag.boundary.db.document_crud import document_crud
from agency_rag.boundary.vdb.memory_index import InMemoryVectorIndex
from agency_rag.configs.pipeline import DocumentPipelineSettings
from agency_rag.core.document_processing.database import DocumentStatusUpdater
from agency_rag.core.document_processing.entrypoint import DocumentPipeline
from agency_rag.core.document_processing.tasks import EmbeddingTask, ExtractionTask, VectorStoreTask

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class KeywordEmbeddings(Embeddings):
    """
    Deterministic 4-dimensional embeddings keyed on a few words.

    Texts about the same topic land on the same axis, so similarity
    ordering in tests is predictable.
    """

    AXES = ("coffee", "sneakers", "banking", "travel")

    def _embed(self, text: str) -> list[float]:
        lowered = text.lower()
        vector = [float(lowered.count(word)) for word in self.AXES]
        if not any(vector):
            vector = [0.1, 0.1, 0.1, 0.1]
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


class FakeStorage:
    """Object storage stand-in keyed by file path."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files = dict(files or {})
        self.fetched: list[str] = []

    def fetch_bytes(self, file_path: str) -> bytes:
        self.fetched.append(file_path)
        return self.files[file_path]


@pytest.fixture
async def session_factory():
    """
    In-memory SQLite document database.

    Yields:
        async_sessionmaker: Factory bound to a fresh schema
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def create_document(session_factory):
    """Insert a document record and return its ID."""

    async def _create(
        document_id: str = "doc-1",
        project_id: str = "project-a",
        organization_id: str = "org-1",
        file_type: str | None = DOCX_MIME,
        file_path: str = "uploads/doc-1.docx",
        **fields,
    ) -> str:
        fields.setdefault("name", f"{document_id}.bin")
        async with session_factory() as session:
            await document_crud.create(
                session,
                id=document_id,
                project_id=project_id,
                organization_id=organization_id,
                file_type=file_type,
                file_path=file_path,
                **fields,
            )
            await session.commit()
        return document_id

    return _create


@pytest.fixture
def pipeline_settings():
    return DocumentPipelineSettings(
        chunk_size=1000,
        chunk_overlap=200,
        fetch_timeout_seconds=5,
        extraction_timeout_seconds=5,
        embedding_timeout_seconds=5,
        index_timeout_seconds=5,
        max_concurrent_chunks=2,
    )


@pytest.fixture
def vector_index():
    return InMemoryVectorIndex()


@pytest.fixture
def embedding_task():
    return EmbeddingTask(KeywordEmbeddings())


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def status_updater(session_factory):
    return DocumentStatusUpdater(session_factory)


@pytest.fixture
def extraction_task():
    """Extractor with a plain-text handler for the Word MIME type."""
    extractors = {DOCX_MIME: lambda data: data.decode("utf-8")}
    return ExtractionTask(extractors=extractors)


@pytest.fixture
def pipeline(pipeline_settings, status_updater, storage, embedding_task, vector_index, extraction_task):
    """DocumentPipeline wired to in-process collaborators."""
    return DocumentPipeline(
        settings=pipeline_settings,
        status_updater=status_updater,
        storage=storage,
        embedding_task=embedding_task,
        vector_store_task=VectorStoreTask(vector_index),
        extraction_task=extraction_task,
    )


@pytest.fixture
def mock_document_service():
    """
    Create mock DocumentService for testing.

    Returns:
        MagicMock: Mocked DocumentService with async methods
    """
    service = MagicMock()
    service.process_document = AsyncMock()
    service.get_status = AsyncMock()
    service.summarize = AsyncMock()
    return service

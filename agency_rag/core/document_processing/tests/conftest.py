"""Fixtures for document processing tests: an in-memory document table."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from agency_rag.boundary.db.base import Base
from agency_rag.boundary.db.document_model import DocumentModel
from agency_rag.core.document_processing.database import DocumentStatusUpdater


@pytest.fixture
async def session_factory():
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
def updater(session_factory):
    return DocumentStatusUpdater(session_factory)


@pytest.fixture
async def document_id(session_factory):
    """Seed one document with NULL status."""
    async with session_factory() as session:
        session.add(
            DocumentModel(
                id="doc-1",
                project_id="project-a",
                organization_id="org-1",
                name="brief.pdf",
                file_type="application/pdf",
                file_path="uploads/brief.pdf",
            )
        )
        await session.commit()
    return "doc-1"

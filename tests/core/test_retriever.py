"""Tests for project-scoped retrieval."""

from unittest.mock import MagicMock

import pytest

from agency_rag.boundary.vdb.vector_schemas import ChunkVectorMetadata, VectorSearchResult
from agency_rag.core.exceptions import EmbeddingError
from agency_rag.core.retriever import RetrievedChunk, Retriever, build_context

pytestmark = pytest.mark.asyncio


def _store(index, embedding_task, key, document_id, project_id, text):
    index.upsert(
        key,
        embedding_task.embed_chunk(text),
        ChunkVectorMetadata(
            document_id=document_id,
            project_id=project_id,
            organization_id="org-1",
            chunk_index=0,
            text=text,
        ),
    )


async def test_retrieve_returns_only_project_chunks(embedding_task, vector_index):
    _store(vector_index, embedding_task, "x-chunk-0", "x", "project-a", "coffee coffee launch plan")
    _store(vector_index, embedding_task, "y-chunk-0", "y", "project-b", "coffee coffee coffee only")
    retriever = Retriever(embedding_task, vector_index)

    chunks = await retriever.retrieve("coffee", "project-a")

    assert [c.document_id for c in chunks] == ["x"]
    assert chunks[0].text == "coffee coffee launch plan"


async def test_retrieve_orders_by_similarity(embedding_task, vector_index):
    _store(vector_index, embedding_task, "a-chunk-0", "a", "p", "travel itinerary")
    _store(vector_index, embedding_task, "b-chunk-0", "b", "p", "banking app launch")
    _store(vector_index, embedding_task, "c-chunk-0", "c", "p", "banking and travel")
    retriever = Retriever(embedding_task, vector_index)

    chunks = await retriever.retrieve("banking", "p", top_k=2)

    assert [c.document_id for c in chunks] == ["b", "c"]
    assert chunks[0].score >= chunks[1].score


async def test_retrieve_discards_foreign_project_results(embedding_task):
    index = MagicMock()
    index.query.return_value = [
        VectorSearchResult(
            key="y-chunk-0",
            score=0.99,
            metadata=ChunkVectorMetadata(
                document_id="y", project_id="project-b", organization_id="o", chunk_index=0, text="leak"
            ),
        )
    ]
    retriever = Retriever(embedding_task, index)

    assert await retriever.retrieve("coffee", "project-a") == []


async def test_retrieve_uses_default_top_k(embedding_task):
    index = MagicMock()
    index.query.return_value = []
    retriever = Retriever(embedding_task, index, default_top_k=7)

    await retriever.retrieve("coffee", "project-a")

    assert index.query.call_args.args[2] == 7


async def test_retrieve_requires_project(embedding_task, vector_index):
    with pytest.raises(ValueError):
        await Retriever(embedding_task, vector_index).retrieve("coffee", "")


async def test_embedding_failure_propagates(vector_index):
    embedding_task = MagicMock()
    embedding_task.embed_query.side_effect = EmbeddingError("quota exceeded")

    with pytest.raises(EmbeddingError):
        await Retriever(embedding_task, vector_index).retrieve("coffee", "p")


async def test_build_context_joins_with_blank_line():
    chunks = [
        RetrievedChunk(document_id="a", text="first", score=0.9),
        RetrievedChunk(document_id="b", text="second", score=0.8),
    ]

    assert build_context(chunks) == "first\n\nsecond"

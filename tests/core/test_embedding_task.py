"""Tests for EmbeddingTask and the fixed-dimension Gemini embeddings."""

from unittest.mock import MagicMock, patch

import pytest

from agency_rag.core.document_processing.tasks import EmbeddingTask, FixedDimensionEmbeddings
from agency_rag.core.exceptions import EmbeddingError


def test_embed_chunk_returns_single_vector(embedding_task):
    vector = embedding_task.embed_chunk("coffee launch for travel retail")

    assert vector == [1.0, 0.0, 0.0, 1.0]
    assert vector == embedding_task.embed_chunk("coffee launch for travel retail")


def test_query_and_chunk_use_same_model(embedding_task):
    assert embedding_task.embed_query("sneakers brand voice") == embedding_task.embed_chunk("sneakers brand voice")


def test_provider_failure_raises_embedding_error():
    embeddings = MagicMock()
    embeddings.embed_documents.side_effect = RuntimeError("quota exceeded")
    embeddings.embed_query.side_effect = RuntimeError("quota exceeded")
    task = EmbeddingTask(embeddings)

    with pytest.raises(EmbeddingError, match="quota exceeded"):
        task.embed_chunk("text")
    with pytest.raises(EmbeddingError, match="quota exceeded"):
        task.embed_query("text")


@pytest.mark.parametrize("returned", [[], [[]]])
def test_empty_vector_raises_embedding_error(returned):
    embeddings = MagicMock()
    embeddings.embed_documents.return_value = returned
    task = EmbeddingTask(embeddings)

    with pytest.raises(EmbeddingError, match="empty vector"):
        task.embed_chunk("text")


def test_fixed_dimension_passes_output_dimensionality():
    embeddings = FixedDimensionEmbeddings(
        model="models/gemini-embedding-001",
        output_dimensionality=256,
        google_api_key="test-key",
    )

    with patch(
        "langchain_google_genai.GoogleGenerativeAIEmbeddings.embed_documents",
        return_value=[[0.1] * 256],
    ) as base_embed:
        embeddings.embed_documents(["hello"])

    assert base_embed.call_args.kwargs["output_dimensionality"] == 256

    with patch(
        "langchain_google_genai.GoogleGenerativeAIEmbeddings.embed_query",
        return_value=[0.1] * 256,
    ) as base_query:
        embeddings.embed_query("hello")

    assert base_query.call_args.kwargs["output_dimensionality"] == 256

"""
Embedding generation task.

Wraps one LangChain Embeddings instance so ingestion and query embed
with the same model. Production uses Google Gemini embeddings with a
fixed output dimensionality matching the vector index.

Dependencies: langchain_core, langchain_google_genai
System role: Third stage of document ingestion pipeline, and query embedding
"""

import logging
from typing import List

from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from agency_rag.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings with a fixed output dimensionality.

    The base class does not apply output_dimensionality from the
    constructor, so every embed call passes it explicitly. The vector
    index rejects vectors of any other dimension.
    """

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=output_dimensionality or self._output_dimensionality,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=output_dimensionality or self._output_dimensionality,
        )


class EmbeddingTask:
    """Generate embeddings for chunks and queries."""

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: LangChain embeddings model shared by ingestion and query
        """
        self._embeddings = embeddings

    def embed_chunk(self, text: str) -> list[float]:
        """
        Embed one chunk's text.

        Raises:
            EmbeddingError: Provider failure or empty vector
        """
        try:
            vectors = self._embeddings.embed_documents([text])
        except Exception as e:
            raise EmbeddingError(f"Failed to generate embedding: {e}") from e
        if not vectors or not vectors[0]:
            raise EmbeddingError("Embedding provider returned an empty vector")
        return list(vectors[0])

    def embed_query(self, text: str) -> list[float]:
        """
        Embed a question for retrieval.

        Raises:
            EmbeddingError: Provider failure or empty vector
        """
        try:
            vector = self._embeddings.embed_query(text)
        except Exception as e:
            raise EmbeddingError(f"Failed to generate query embedding: {e}") from e
        if not vector:
            raise EmbeddingError("Embedding provider returned an empty vector")
        return list(vector)


def build_embeddings(model: str, dimension: int) -> Embeddings:
    """
    Build the production embeddings model.

    Args:
        model: Google embedding model ID
        dimension: Output dimensionality

    Returns:
        Embeddings: FixedDimensionEmbeddings instance
    """
    logger.info(
        f"{__name__}:build_embeddings - Creating FixedDimensionEmbeddings",
        extra={"model": model, "dimension": dimension},
    )
    return FixedDimensionEmbeddings(model=model, output_dimensionality=dimension)

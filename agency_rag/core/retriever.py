"""
Project-scoped retrieval.

Embeds a question once with the ingestion embedder, queries the vector
index filtered by project and returns chunk texts in rank order. Results
are re-checked against the project ID so a foreign-project chunk is never
returned even if the index filter misbehaves.

Dependencies: agency_rag.core.document_processing.tasks, agency_rag.boundary.vdb
System role: RAG retrieval business logic
"""

import asyncio
import logging

from pydantic import BaseModel, Field

from agency_rag.core.document_processing.tasks.embedding_task import EmbeddingTask
from agency_rag.core.exceptions import EmbeddingError, IndexUnavailableError

logger = logging.getLogger(__name__)


class RetrievedChunk(BaseModel):
    """One retrieved chunk, as handed to answer generation and callers."""

    document_id: str = Field(description="Source document ID")
    text: str = Field(description="Chunk text")
    score: float = Field(description="Similarity score, higher is closer")


def build_context(chunks: list[RetrievedChunk]) -> str:
    """Concatenate chunk texts separated by a blank line."""
    return "\n\n".join(chunk.text for chunk in chunks)


class Retriever:
    """Retrieve the nearest chunks of one project for a question."""

    def __init__(
        self,
        embedding_task: EmbeddingTask,
        vector_index,
        default_top_k: int = 5,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize retriever.

        Args:
            embedding_task: Embedder shared with ingestion
            vector_index: Vector index (InMemoryVectorIndex or S3VectorsIndex)
            default_top_k: Result count when the caller gives none
            timeout_seconds: Timeout for each embedding and index call
        """
        self._embedding_task = embedding_task
        self._index = vector_index
        self._default_top_k = default_top_k
        self._timeout = timeout_seconds

    async def retrieve(
        self,
        question: str,
        project_id: str,
        top_k: int | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve relevant chunks for a question.

        Args:
            question: User question
            project_id: Project scope (required)
            top_k: Maximum number of chunks

        Returns:
            list[RetrievedChunk]: Chunks ordered by descending similarity

        Raises:
            ValueError: Empty project ID
            EmbeddingError: Question could not be embedded
            IndexUnavailableError: Index query failed
        """
        if not project_id:
            raise ValueError("project_id is required for retrieval")
        k = top_k or self._default_top_k

        try:
            vector = await asyncio.wait_for(
                asyncio.to_thread(self._embedding_task.embed_query, question),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingError(f"Timed out embedding question after {self._timeout}s") from e

        try:
            results = await asyncio.wait_for(
                asyncio.to_thread(self._index.query, vector, project_id, k),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise IndexUnavailableError(
                f"Timed out querying index after {self._timeout}s", operation="query"
            ) from e

        chunks = [
            RetrievedChunk(
                document_id=result.metadata.document_id,
                text=result.metadata.text,
                score=result.score,
            )
            for result in results
            if result.metadata.project_id == project_id
        ]
        chunks.sort(key=lambda c: c.score, reverse=True)

        logger.info(
            f"{__name__}:retrieve - Found {len(chunks)} results",
            extra={"project_id": project_id, "top_k": k},
        )
        return chunks[:k]

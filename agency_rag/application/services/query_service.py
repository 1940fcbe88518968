"""
Project query service.

Retrieves the nearest chunks of a project for a question and asks the
chat model for an answer grounded in them.

Dependencies: agency_rag.core.retriever, agency_rag.core.answering
System role: Question answering orchestration layer
"""

import logging

from agency_rag.core.answering import AnswerGenerator
from agency_rag.core.retriever import Retriever
from agency_rag.models.query import QueryResponse, SourceChunk

logger = logging.getLogger(__name__)


class QueryService:
    """Answer questions over one project's indexed documents."""

    def __init__(self, retriever: Retriever, answer_generator: AnswerGenerator) -> None:
        self._retriever = retriever
        self._answer_generator = answer_generator

    async def query(self, project_id: str, question: str, max_results: int = 5) -> QueryResponse:
        """
        Answer a question from the project's documents.

        Args:
            project_id: Project scope
            question: User question
            max_results: Maximum number of chunks to retrieve

        Returns:
            QueryResponse: Answer and the chunks it was based on

        Raises:
            EmbeddingError: Question could not be embedded
            IndexUnavailableError: Index query failed
            AnswerGenerationError: Chat model failed
        """
        chunks = await self._retriever.retrieve(question, project_id, max_results)
        answer = await self._answer_generator.answer(question, chunks)

        logger.info(
            f"{__name__}:query - Answered project question",
            extra={"project_id": project_id, "source_count": len(chunks)},
        )
        return QueryResponse(
            answer=answer,
            sources=[
                SourceChunk(document_id=chunk.document_id, text=chunk.text, score=chunk.score)
                for chunk in chunks
            ],
        )

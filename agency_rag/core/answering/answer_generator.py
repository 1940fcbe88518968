"""
Answer generation and document summarization.

Both run a ChatPromptTemplate | chat model | StrOutputParser chain. The
production chat model is Gemini via langchain_google_genai; tests inject
a fake chat model.

Dependencies: langchain_core, langchain_google_genai
System role: LLM answer and summary generation
"""

import asyncio
import logging
from typing import Literal

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI

from agency_rag.configs.llm import LLMSettings
from agency_rag.core.answering.prompts import (
    ANSWER_PROMPT,
    NOT_ENOUGH_INFORMATION,
    SUMMARY_INSTRUCTIONS,
    SUMMARY_PROMPT,
)
from agency_rag.core.exceptions import AnswerGenerationError
from agency_rag.core.retriever import RetrievedChunk

logger = logging.getLogger(__name__)

SummaryLength = Literal["short", "medium", "long"]


def format_context(chunks: list[RetrievedChunk]) -> str:
    """Render chunks with their document IDs so the model can cite them."""
    return "\n\n".join(f"[{chunk.document_id}]\n{chunk.text}" for chunk in chunks)


class AnswerGenerator:
    """Answer a project question from retrieved chunks."""

    def __init__(self, llm: BaseChatModel, timeout_seconds: float = 60.0) -> None:
        """
        Initialize answer generator.

        Args:
            llm: Chat model
            timeout_seconds: Chat completion timeout
        """
        self._chain = ANSWER_PROMPT | llm | StrOutputParser()
        self._timeout = timeout_seconds

    async def answer(self, question: str, chunks: list[RetrievedChunk]) -> str:
        """
        Generate an answer grounded in the retrieved chunks.

        Returns the fixed not-enough-information answer without calling
        the model when no chunks were retrieved.

        Raises:
            AnswerGenerationError: Model call failed or timed out
        """
        if not chunks:
            return NOT_ENOUGH_INFORMATION

        try:
            answer = await asyncio.wait_for(
                self._chain.ainvoke({"context": format_context(chunks), "question": question}),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise AnswerGenerationError(f"Answer generation timed out after {self._timeout}s") from e
        except Exception as e:
            logger.error(f"{__name__}:answer - {type(e).__name__}: {e}")
            raise AnswerGenerationError(f"Answer generation failed: {e}") from e

        return answer.strip() or NOT_ENOUGH_INFORMATION


class DocumentSummarizer:
    """Summarize a document's extracted text for advertising strategy work."""

    def __init__(
        self,
        llm: BaseChatModel,
        max_input_chars: int = 15000,
        timeout_seconds: float = 60.0,
    ) -> None:
        """
        Initialize summarizer.

        Args:
            llm: Chat model
            max_input_chars: Extracted text is truncated to this length
            timeout_seconds: Chat completion timeout
        """
        self._chain = SUMMARY_PROMPT | llm | StrOutputParser()
        self._max_input_chars = max_input_chars
        self._timeout = timeout_seconds

    async def summarize(self, text: str, length: SummaryLength = "medium") -> str:
        """
        Summarize text.

        Args:
            text: Extracted document text
            length: short (2-3 sentences), medium (3-5 paragraphs) or long (all major points)

        Returns:
            str: Summary text

        Raises:
            AnswerGenerationError: Model call failed or timed out
        """
        instructions = SUMMARY_INSTRUCTIONS.get(length, SUMMARY_INSTRUCTIONS["long"])
        try:
            summary = await asyncio.wait_for(
                self._chain.ainvoke({"instructions": instructions, "text": text[: self._max_input_chars]}),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise AnswerGenerationError(f"Summary generation timed out after {self._timeout}s") from e
        except Exception as e:
            logger.error(f"{__name__}:summarize - {type(e).__name__}: {e}")
            raise AnswerGenerationError(f"Summary generation failed: {e}") from e
        return summary.strip()


def build_chat_model(settings: LLMSettings, temperature: float) -> BaseChatModel:
    """Build the production Gemini chat model."""
    return ChatGoogleGenerativeAI(model=settings.model, temperature=temperature)

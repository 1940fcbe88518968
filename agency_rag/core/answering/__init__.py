"""Question answering and document summarization over retrieved context."""

from agency_rag.core.answering.answer_generator import (
    AnswerGenerator,
    DocumentSummarizer,
    build_chat_model,
)
from agency_rag.core.answering.prompts import NOT_ENOUGH_INFORMATION

__all__ = ["AnswerGenerator", "DocumentSummarizer", "NOT_ENOUGH_INFORMATION", "build_chat_model"]

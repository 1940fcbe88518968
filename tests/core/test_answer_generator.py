"""Tests for answer generation and document summaries."""

import asyncio

import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from agency_rag.core.answering import NOT_ENOUGH_INFORMATION, AnswerGenerator, DocumentSummarizer
from agency_rag.core.answering.answer_generator import format_context
from agency_rag.core.answering.prompts import ANSWER_PROMPT, SUMMARY_INSTRUCTIONS
from agency_rag.core.exceptions import AnswerGenerationError
from agency_rag.core.retriever import RetrievedChunk

pytestmark = pytest.mark.asyncio

CHUNKS = [
    RetrievedChunk(document_id="brief-1", text="The launch targets urban commuters.", score=0.92),
    RetrievedChunk(document_id="brief-2", text="Budget is split 60/40 social and search.", score=0.81),
]


def _failing(prompt):
    raise RuntimeError("model unavailable")


async def test_answer_uses_model_output():
    llm = FakeListChatModel(responses=["  Urban commuters [brief-1]  "])

    answer = await AnswerGenerator(llm).answer("Who is the audience?", CHUNKS)

    assert answer == "Urban commuters [brief-1]"


async def test_no_chunks_skips_model():
    llm = FakeListChatModel(responses=["should not be used"])

    answer = await AnswerGenerator(llm).answer("Who is the audience?", [])

    assert answer == NOT_ENOUGH_INFORMATION
    assert llm.i == 0


async def test_empty_model_output_falls_back():
    llm = FakeListChatModel(responses=["   "])

    assert await AnswerGenerator(llm).answer("q", CHUNKS) == NOT_ENOUGH_INFORMATION


async def test_model_failure_raises_answer_generation_error():
    with pytest.raises(AnswerGenerationError, match="model unavailable"):
        await AnswerGenerator(RunnableLambda(_failing)).answer("q", CHUNKS)


async def test_model_timeout_raises_answer_generation_error():
    async def slow(prompt):
        await asyncio.sleep(1)
        return "late"

    with pytest.raises(AnswerGenerationError, match="timed out"):
        await AnswerGenerator(RunnableLambda(slow), timeout_seconds=0.01).answer("q", CHUNKS)


async def test_prompt_carries_context_and_question():
    messages = ANSWER_PROMPT.format_messages(context=format_context(CHUNKS), question="Who is the audience?")

    assert NOT_ENOUGH_INFORMATION in messages[0].content
    assert "[brief-1]\nThe launch targets urban commuters." in messages[1].content
    assert "Question: Who is the audience?" in messages[1].content


async def test_summary_truncates_input_and_applies_length():
    captured = []

    def capture(prompt):
        captured.append(prompt.to_string())
        return "A short summary."

    summarizer = DocumentSummarizer(RunnableLambda(capture), max_input_chars=10)

    summary = await summarizer.summarize("0123456789ABCDEF", length="short")

    assert summary == "A short summary."
    assert "0123456789" in captured[0]
    assert "ABCDEF" not in captured[0]
    assert SUMMARY_INSTRUCTIONS["short"] in captured[0]


async def test_summary_failure_raises_answer_generation_error():
    with pytest.raises(AnswerGenerationError):
        await DocumentSummarizer(RunnableLambda(_failing)).summarize("text")

"""
Prompt templates for project question answering and document summaries.

Dependencies: langchain_core.prompts
System role: Prompt templates for LLM answer generation
"""

from langchain_core.prompts import ChatPromptTemplate

NOT_ENOUGH_INFORMATION = "I don't have enough information to answer that question."

ANSWER_SYSTEM_PROMPT = f"""You are an expert advertising strategist answering questions about a client project.

## Instructions
1. Use ONLY the provided context to answer the question
2. If the context does not contain the answer, reply exactly: "{NOT_ENOUGH_INFORMATION}"
3. Cite the document IDs your answer relies on, in square brackets
4. Be concise but thorough"""

ANSWER_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", ANSWER_SYSTEM_PROMPT),
        (
            "human",
            """Context:
{context}

Question: {question}""",
        ),
    ]
)

SUMMARY_INSTRUCTIONS = {
    "short": "Create a very concise summary in 2-3 sentences.",
    "medium": "Create a comprehensive summary in about 3-5 paragraphs.",
    "long": "Create a detailed summary covering all major points in the document.",
}

SUMMARY_PROMPT = ChatPromptTemplate.from_messages(
    [
        (
            "system",
            "You are an expert at summarizing documents for advertising agencies. "
            "{instructions} Focus on information that would be most relevant for "
            "advertising strategy development.",
        ),
        ("human", "Please summarize the following document:\n\n{text}"),
    ]
)

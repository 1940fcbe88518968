"""
Text chunking task using a fixed-size sliding window.

Splits extracted text into overlapping character windows. Window i
starts at i * (chunk_size - chunk_overlap) and spans chunk_size
characters; the last window may be shorter. Windowing stops at the
first window that reaches the end of the text, so no window is wholly
contained in the previous one.

Dependencies: agency_rag.core.exceptions
System role: Second stage of document ingestion pipeline
"""

import math

from agency_rag.core.exceptions import ChunkerConfigurationError


class ChunkingTask:
    """Split text into overlapping fixed-size windows."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Window size in characters
            chunk_overlap: Characters shared by consecutive windows

        Raises:
            ChunkerConfigurationError: size <= 0, overlap < 0 or overlap >= size
        """
        if chunk_size <= 0 or chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ChunkerConfigurationError(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @property
    def step(self) -> int:
        return self.chunk_size - self.chunk_overlap

    def window_count(self, length: int) -> int:
        """Number of windows produced for a text of the given length."""
        if length <= 0:
            return 0
        if length <= self.chunk_size:
            return 1
        return math.ceil((length - self.chunk_overlap) / self.step)

    def split(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Windows are raw slices. Whitespace-only windows are dropped and the
        survivors are returned in order.

        Args:
            text: Extracted document text

        Returns:
            list[str]: Chunks in document order (empty for empty text)
        """
        chunks = []
        for i in range(self.window_count(len(text))):
            start = i * self.step
            window = text[start : start + self.chunk_size]
            if window.strip():
                chunks.append(window)
        return chunks

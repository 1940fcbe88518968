"""
Configuration settings for the document ingestion pipeline.

Chunk window, embedding model, per-stage timeouts and per-document
parallelism. The chunk window is validated here so a bad configuration
fails at startup instead of on the first document.

Dependencies: pydantic, pydantic_settings, agency_rag.core.exceptions
System role: Centralized pipeline configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agency_rag.core.exceptions import ChunkerConfigurationError


class DocumentPipelineSettings(BaseSettings):
    """Settings for the document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Window size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Characters shared by consecutive windows",
    )

    # Embedding settings
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID, shared by ingestion and query",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Output dimensionality requested from the embedding model",
    )

    # Stage timeouts
    fetch_timeout_seconds: float = Field(default=60.0, description="Raw file download timeout")
    extraction_timeout_seconds: float = Field(default=120.0, description="Text extraction timeout")
    embedding_timeout_seconds: float = Field(default=30.0, description="Per-chunk embedding timeout")
    index_timeout_seconds: float = Field(default=30.0, description="Per-call vector index timeout")

    max_concurrent_chunks: int = Field(
        default=4,
        ge=1,
        description="Chunks embedded and upserted concurrently for one document",
    )

    @model_validator(mode="after")
    def _check_chunk_window(self) -> "DocumentPipelineSettings":
        if self.chunk_size <= 0 or self.chunk_overlap < 0 or self.chunk_overlap >= self.chunk_size:
            raise ChunkerConfigurationError(self.chunk_size, self.chunk_overlap)
        return self

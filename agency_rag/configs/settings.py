"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Built once per process and injected into every component.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from agency_rag.configs.base import BaseSettings
from agency_rag.configs.database import DatabaseSettings
from agency_rag.configs.llm import LLMSettings
from agency_rag.configs.pipeline import DocumentPipelineSettings
from agency_rag.configs.storage import DocumentStorageSettings
from agency_rag.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: DocumentStorageSettings = Field(default_factory=DocumentStorageSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; later calls return the same
    instance.

    Returns:
        Settings: Application settings instance

    Usage:
        from agency_rag.configs import get_settings
        settings = get_settings()
    """
    return Settings()

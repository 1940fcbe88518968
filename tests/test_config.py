"""Tests for environment-driven settings."""

import pytest

from agency_rag.configs import Settings
from agency_rag.configs.database import DatabaseSettings
from agency_rag.configs.pipeline import DocumentPipelineSettings
from agency_rag.core.exceptions import ChunkerConfigurationError


def test_pipeline_defaults():
    settings = DocumentPipelineSettings()

    assert settings.chunk_size == 1000
    assert settings.chunk_overlap == 200


def test_pipeline_reads_environment(monkeypatch):
    monkeypatch.setenv("DOC_PIPELINE_CHUNK_SIZE", "500")
    monkeypatch.setenv("DOC_PIPELINE_CHUNK_OVERLAP", "50")

    settings = DocumentPipelineSettings()

    assert settings.chunk_size == 500
    assert settings.chunk_overlap == 50


@pytest.mark.parametrize("size,overlap", [(0, 0), (100, 100), (100, -1)])
def test_invalid_chunk_window_fails_at_startup(size, overlap):
    with pytest.raises(ChunkerConfigurationError):
        DocumentPipelineSettings(chunk_size=size, chunk_overlap=overlap)


def test_async_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/agency")

    settings = DatabaseSettings()

    assert settings.async_database_url.startswith("postgresql+asyncpg://")


def test_settings_aggregate_sections():
    settings = Settings()

    assert settings.vector_store.index_name
    assert settings.llm.summary_max_input_chars == 15000


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        Settings()

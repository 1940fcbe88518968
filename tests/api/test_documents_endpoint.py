"""
Test suite for document API endpoints.

Services are replaced through FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from agency_rag.api.deps import get_document_service
from agency_rag.api.main import create_app
from agency_rag.boundary.db.document_model import DocumentStatus
from agency_rag.core.document_processing.models import PipelineResult
from agency_rag.core.exceptions import (
    AnswerGenerationError,
    ConcurrentProcessingError,
    DocumentNotFoundError,
    DocumentNotReadyError,
    EmbeddingError,
)
from agency_rag.models.document import DocumentStatusResponse


@pytest.fixture
def client(mock_document_service):
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    return TestClient(app)


class TestProcessDocument:
    def test_returns_chunk_count(self, client, mock_document_service):
        mock_document_service.process_document.return_value = PipelineResult(
            document_id="doc-1",
            status=DocumentStatus.COMPLETED,
            chunk_count=3,
            processing_time_ms=10.0,
        )

        response = client.post("/api/v1/documents/doc-1/process")

        assert response.status_code == 200
        assert response.json() == {"success": True, "chunksCount": 3}
        mock_document_service.process_document.assert_awaited_once_with("doc-1", force=False)

    def test_force_flag_is_forwarded(self, client, mock_document_service):
        mock_document_service.process_document.return_value = PipelineResult(
            document_id="doc-1",
            status=DocumentStatus.COMPLETED,
            chunk_count=0,
            processing_time_ms=1.0,
        )

        client.post("/api/v1/documents/doc-1/process?force=true")

        mock_document_service.process_document.assert_awaited_once_with("doc-1", force=True)

    def test_not_found(self, client, mock_document_service):
        mock_document_service.process_document.side_effect = DocumentNotFoundError("doc-1")

        response = client.post("/api/v1/documents/doc-1/process")

        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "DocumentNotFoundError"

    def test_concurrent_processing_conflict(self, client, mock_document_service):
        mock_document_service.process_document.side_effect = ConcurrentProcessingError("doc-1")

        response = client.post("/api/v1/documents/doc-1/process")

        assert response.status_code == 409

    def test_stage_failure_returns_error_message(self, client, mock_document_service):
        mock_document_service.process_document.side_effect = EmbeddingError("quota exceeded")

        response = client.post("/api/v1/documents/doc-1/process")

        assert response.status_code == 500
        assert response.json()["detail"] == {"error": "EmbeddingError", "message": "quota exceeded"}


class TestDocumentStatus:
    def test_returns_camel_case_status(self, client, mock_document_service):
        mock_document_service.get_status.return_value = DocumentStatusResponse(
            document_id="doc-1",
            status=DocumentStatus.COMPLETED,
            completed=True,
            chunks_count=5,
            error=None,
            has_extracted_text=True,
        )

        response = client.get("/api/v1/documents/doc-1/status")

        assert response.status_code == 200
        assert response.json() == {
            "documentId": "doc-1",
            "status": "completed",
            "completed": True,
            "chunksCount": 5,
            "error": None,
            "hasExtractedText": True,
        }

    def test_not_found(self, client, mock_document_service):
        mock_document_service.get_status.side_effect = DocumentNotFoundError("missing")

        assert client.get("/api/v1/documents/missing/status").status_code == 404


class TestSummary:
    def test_returns_summary(self, client, mock_document_service):
        mock_document_service.summarize.return_value = "Campaign overview."

        response = client.post("/api/v1/documents/doc-1/summary", json={"length": "short"})

        assert response.status_code == 200
        assert response.json() == {"summary": "Campaign overview."}
        mock_document_service.summarize.assert_awaited_once_with("doc-1", "short")

    def test_default_length_is_medium(self, client, mock_document_service):
        mock_document_service.summarize.return_value = "Overview."

        client.post("/api/v1/documents/doc-1/summary", json={})

        mock_document_service.summarize.assert_awaited_once_with("doc-1", "medium")

    def test_invalid_length_rejected(self, client):
        response = client.post("/api/v1/documents/doc-1/summary", json={"length": "epic"})

        assert response.status_code == 422

    def test_text_not_ready_conflict(self, client, mock_document_service):
        mock_document_service.summarize.side_effect = DocumentNotReadyError("doc-1")

        response = client.post("/api/v1/documents/doc-1/summary", json={})

        assert response.status_code == 409
        assert response.json()["detail"]["message"] == "Document text extraction not completed or failed"

    def test_model_failure_is_bad_gateway(self, client, mock_document_service):
        mock_document_service.summarize.side_effect = AnswerGenerationError("model down")

        assert client.post("/api/v1/documents/doc-1/summary", json={}).status_code == 502

"""Tests for the SQS Lambda handler."""

import json
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agency_rag.boundary.db.document_model import DocumentStatus
from agency_rag.core.document_processing import lambda_handler
from agency_rag.core.document_processing.models import PipelineResult
from agency_rag.core.exceptions import (
    ConcurrentProcessingError,
    DocumentNotFoundError,
    ExtractionError,
)
from agency_rag.observability.correlation import get_correlation_id


def _record(message_id: str, document_id: str = "doc-1", **extra) -> dict:
    return {"messageId": message_id, "body": json.dumps({"document_id": document_id, **extra})}


@pytest.fixture
def pipeline():
    mock = MagicMock()
    mock.process = AsyncMock(
        return_value=PipelineResult(
            document_id="doc-1",
            status=DocumentStatus.COMPLETED,
            chunk_count=4,
            processing_time_ms=12.5,
        )
    )
    return mock


class TestProcessRecord:
    @pytest.mark.asyncio
    async def test_success(self, pipeline):
        result = await lambda_handler._process_record(pipeline, _record("m1", force=True))

        assert result["status"] == "success"
        assert result["chunk_count"] == 4
        pipeline.process.assert_awaited_once_with("doc-1", force=True)
        assert get_correlation_id() is None

    @pytest.mark.asyncio
    async def test_document_id_is_correlation_id_while_processing(self, pipeline):
        seen = []

        async def process(document_id, force):
            seen.append(get_correlation_id())
            return pipeline.process.return_value

        pipeline.process.side_effect = process

        await lambda_handler._process_record(pipeline, _record("m1", document_id="doc-9"))

        assert seen == ["doc-9"]

    @pytest.mark.asyncio
    async def test_invalid_body_is_failed_without_processing(self, pipeline):
        result = await lambda_handler._process_record(pipeline, {"messageId": "m1", "body": "{"})

        assert result["status"] == "failed"
        assert result["error"] == "Invalid message format"
        pipeline.process.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_run_is_skipped(self, pipeline):
        pipeline.process.side_effect = ConcurrentProcessingError("doc-1")

        result = await lambda_handler._process_record(pipeline, _record("m1"))

        assert result["status"] == "skipped"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [DocumentNotFoundError("doc-1"), ExtractionError("bad file", "application/pdf")],
    )
    async def test_document_failures_are_reported_not_retried(self, pipeline, error):
        pipeline.process.side_effect = error

        result = await lambda_handler._process_record(pipeline, _record("m1"))

        assert result["status"] == "failed"
        assert result["error"] == type(error).__name__
        assert "retry" not in result

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_retried(self, pipeline):
        pipeline.process.side_effect = ConnectionError("database unreachable")

        result = await lambda_handler._process_record(pipeline, _record("m1"))

        assert result["status"] == "error"
        assert result["retry"] is True


class TestHandler:
    def _invoke(self, results):
        with patch.object(lambda_handler, "_configure_secrets"), patch.object(
            lambda_handler, "configure_logging"
        ), patch.object(lambda_handler, "_process_records", AsyncMock(return_value=results)):
            return lambda_handler.handler({"Records": [{}] * len(results)}, None)

    def test_all_success_returns_200(self):
        response = self._invoke([{"messageId": "m1", "status": "success"}])

        assert response["statusCode"] == 200
        assert response["batchItemFailures"] == []
        body = json.loads(response["body"])
        assert body["processed"] == 1
        assert body["failed"] == 0

    def test_partial_failure_returns_206_and_retries_only_errors(self):
        response = self._invoke(
            [
                {"messageId": "m1", "status": "success"},
                {"messageId": "m2", "status": "failed", "error": "ExtractionError"},
                {"messageId": "m3", "status": "error", "retry": True},
                {"messageId": "m4", "status": "skipped"},
            ]
        )

        assert response["statusCode"] == 206
        assert response["batchItemFailures"] == [{"itemIdentifier": "m3"}]
        body = json.loads(response["body"])
        assert body["processed"] == 4
        assert body["failed"] == 2
        assert all("retry" not in r for r in body["results"])

    def test_empty_event(self):
        response = self._invoke([])

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["processed"] == 0


def test_configure_secrets_sets_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_SECRET_ARN", "arn:aws:secretsmanager:db")
    monkeypatch.delenv("DATABASE_PASSWORD", raising=False)
    monkeypatch.delenv("GOOGLE_SECRET_ARN", raising=False)

    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": json.dumps({"password": "s3cret"})}
    with patch.object(lambda_handler.boto3.session, "Session") as session:
        session.return_value.client.return_value = client
        lambda_handler._configure_secrets()

    assert os.environ["DATABASE_PASSWORD"] == "s3cret"
    monkeypatch.delenv("DATABASE_PASSWORD")

"""
Lambda handler for SQS-triggered document processing.

Each SQS record carries a DocumentCreatedEvent for a document record the
upload flow has already created. Records are processed independently:
a failed document is recorded on the document itself (status FAILED) and
reported in the response, never raised. Only infrastructure errors are
returned as batchItemFailures so SQS redelivers those records.

Environment variables (besides the settings prefixes):
- DATABASE_SECRET_ARN: Secrets Manager secret holding the DB password
- GOOGLE_SECRET_ARN: Secrets Manager secret holding the Gemini API key

Dependencies: boto3, sqlalchemy, agency_rag.configs, entrypoint
System role: Lambda entry point for async document ingestion
"""

import asyncio
import json
import logging
import os
from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv
from pydantic import ValidationError

from agency_rag.boundary.db.connection import get_async_engine, get_async_session_factory
from agency_rag.boundary.vdb.vector_index_factory import get_vector_index
from agency_rag.configs import get_settings
from agency_rag.core.exceptions import (
    ConcurrentProcessingError,
    DocumentNotFoundError,
    DocumentProcessingError,
)
from agency_rag.observability.correlation import correlation_scope
from agency_rag.observability.logger import configure_logging

from .entrypoint import DocumentPipeline
from .models import DocumentCreatedEvent
from .tasks import EmbeddingTask, build_embeddings

load_dotenv()

logger = logging.getLogger(__name__)


class MessageParseError(Exception):
    """Raised when an SQS message body is not a valid DocumentCreatedEvent."""

    pass


def parse_sqs_record(record: Dict[str, Any]) -> DocumentCreatedEvent:
    """
    Parse and validate an SQS record body.

    Args:
        record: Single SQS record from event['Records']

    Returns:
        DocumentCreatedEvent: Validated event

    Raises:
        MessageParseError: Empty body, invalid JSON or schema mismatch
    """
    body = record.get("body")
    if not body:
        raise MessageParseError("Empty message body")

    try:
        return DocumentCreatedEvent.model_validate_json(body)
    except ValidationError as e:
        raise MessageParseError(f"Invalid message schema: {e}") from e


def _configure_secrets() -> None:
    """
    Resolve secrets from Secrets Manager into the environment.

    Sets DATABASE_PASSWORD from DATABASE_SECRET_ARN and GOOGLE_API_KEY
    from GOOGLE_SECRET_ARN when those ARNs are configured.
    """
    targets = {
        "DATABASE_SECRET_ARN": ("password", "DATABASE_PASSWORD"),
        "GOOGLE_SECRET_ARN": ("api_key", "GOOGLE_API_KEY"),
    }
    if not any(os.getenv(arn_var) for arn_var in targets):
        return

    client = boto3.session.Session().client("secretsmanager")
    for arn_var, (secret_field, env_var) in targets.items():
        secret_arn = os.getenv(arn_var)
        if not secret_arn or os.getenv(env_var):
            continue
        try:
            response = client.get_secret_value(SecretId=secret_arn)
            value = json.loads(response.get("SecretString", "{}")).get(secret_field)
        except (ClientError, BotoCoreError, json.JSONDecodeError) as e:
            logger.error(f"{__name__}:_configure_secrets - Failed to read {arn_var}: {type(e).__name__}: {e}")
            continue
        if value:
            os.environ[env_var] = value
            logger.info(f"{__name__}:_configure_secrets - Set {env_var} from secret")
        else:
            logger.warning(f"{__name__}:_configure_secrets - Secret {arn_var} has no '{secret_field}' field")


_shared: Dict[str, Any] = {}


def _shared_components() -> tuple[EmbeddingTask, Any]:
    """Embedder and vector index, built once per container and reused across invocations."""
    if not _shared:
        settings = get_settings()
        _shared["embedding_task"] = EmbeddingTask(
            build_embeddings(settings.pipeline.embedding_model, settings.pipeline.embedding_dimension)
        )
        _shared["vector_index"] = get_vector_index(settings.vector_store)
    return _shared["embedding_task"], _shared["vector_index"]


async def _process_record(pipeline: DocumentPipeline, record: Dict[str, Any]) -> Dict[str, Any]:
    """Process one record; returns its result entry (never raises for document failures)."""
    message_id = record.get("messageId")

    try:
        message = parse_sqs_record(record)
    except MessageParseError as e:
        logger.warning(f"{__name__}:handler - MessageParseError: {e}", extra={"message_id": message_id})
        return {"messageId": message_id, "status": "failed", "error": "Invalid message format", "details": str(e)}

    with correlation_scope(message.document_id):
        return await _run_document(pipeline, message, message_id)


async def _run_document(
    pipeline: DocumentPipeline,
    message: DocumentCreatedEvent,
    message_id: str | None,
) -> Dict[str, Any]:
    document_id = message.document_id
    try:
        result = await pipeline.process(document_id, force=message.force)
        return {
            "messageId": message_id,
            "status": "success",
            "document_id": document_id,
            "chunk_count": result.chunk_count,
            "processing_time_ms": result.processing_time_ms,
        }
    except ConcurrentProcessingError as e:
        logger.warning(f"{__name__}:handler - {e}", extra={"document_id": document_id})
        return {"messageId": message_id, "status": "skipped", "document_id": document_id, "details": str(e)}
    except (DocumentNotFoundError, DocumentProcessingError) as e:
        return {
            "messageId": message_id,
            "status": "failed",
            "document_id": document_id,
            "error": type(e).__name__,
            "details": str(e),
        }
    except Exception as e:
        logger.exception(
            f"{__name__}:handler - Unexpected error",
            extra={"document_id": document_id, "error_type": type(e).__name__},
        )
        return {
            "messageId": message_id,
            "status": "error",
            "document_id": document_id,
            "error": "Unexpected error",
            "details": str(e),
            "retry": True,
        }


async def _process_records(records: list[Dict[str, Any]]) -> list[Dict[str, Any]]:
    settings = get_settings()
    embedding_task, vector_index = _shared_components()

    # The engine's connection pool is bound to this invocation's event loop.
    engine = get_async_engine(settings.database)
    try:
        pipeline = DocumentPipeline.from_settings(
            settings,
            get_async_session_factory(engine),
            embedding_task=embedding_task,
            vector_index=vector_index,
        )
        return [await _process_record(pipeline, record) for record in records]
    finally:
        await engine.dispose()


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for SQS document processing events.

    Args:
        event: SQS event with Records array
        context: Lambda context object

    Returns:
        Dict with statusCode (200, or 206 when any record failed), a JSON
        body of per-record results and batchItemFailures for records SQS
        should redeliver
    """
    _configure_secrets()
    configure_logging(get_settings().log_level)

    records = event.get("Records", [])
    logger.info(f"{__name__}:handler - Received SQS event", extra={"record_count": len(records)})

    results = asyncio.run(_process_records(records))

    failed_count = sum(1 for r in results if r["status"] in ("failed", "error"))
    batch_item_failures = [
        {"itemIdentifier": r["messageId"]} for r in results if r.pop("retry", False) and r["messageId"]
    ]

    logger.info(
        f"{__name__}:handler - Processing complete",
        extra={"success_count": len(results) - failed_count, "failed_count": failed_count},
    )

    return {
        "statusCode": 200 if failed_count == 0 else 206,
        "body": json.dumps({"processed": len(results), "failed": failed_count, "results": results}),
        "batchItemFailures": batch_item_failures,
    }

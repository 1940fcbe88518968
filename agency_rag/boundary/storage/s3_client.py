"""
S3 client for the raw document bucket.

Reads uploaded file bytes for the ingestion pipeline. Uploads happen
through the client-side upload flow and are not handled here.

Dependencies: boto3, botocore
System role: Raw document source for the ingestion pipeline
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from agency_rag.core.exceptions import StorageFetchError

logger = logging.getLogger(__name__)


class S3DocumentClient:
    """S3 client for document bucket reads."""

    def __init__(self, bucket: str, region: str = "us-east-1", client=None) -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            client: Optional pre-built boto3 S3 client
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = client or boto3.client("s3", region_name=region)

    def fetch_bytes(self, file_path: str) -> bytes:
        """
        Read a document's raw bytes.

        Args:
            file_path: S3 object key stored on the document record

        Returns:
            bytes: Object body

        Raises:
            StorageFetchError: Missing key, missing object or S3 failure
        """
        if not file_path:
            raise StorageFetchError("Document has no file path", file_path)

        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=file_path)
            data = response["Body"].read()
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise StorageFetchError(f"File not found in storage: {file_path}", file_path) from e
            raise StorageFetchError(f"Failed to fetch file from storage: {e}", file_path) from e
        except BotoCoreError as e:
            raise StorageFetchError(f"Failed to fetch file from storage: {e}", file_path) from e

        logger.info(
            f"{__name__}:fetch_bytes - Fetched document bytes",
            extra={"bucket": self._bucket, "file_path": file_path, "size_bytes": len(data)},
        )
        return data

"""Object storage boundary for raw uploaded documents."""

from agency_rag.boundary.storage.s3_client import S3DocumentClient

__all__ = ["S3DocumentClient"]

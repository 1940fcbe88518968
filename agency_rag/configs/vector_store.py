"""
Vector store configuration settings.

Selects the vector index backend (S3 Vectors or in-process) and holds
the retrieval defaults used by the query path.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector index configuration (memory for dev/tests, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="s3",
        description="Vector index type: 'memory' for local dev, 's3' for production",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    vectors_bucket: str = Field(
        default="agency-strategy-dev-vectors",
        description="S3 Vectors bucket name",
    )
    index_name: str = Field(default="documents", description="S3 Vectors index name")

    top_k: int = Field(default=5, description="Default number of chunks to retrieve")

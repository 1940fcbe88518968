"""
Document storage bucket configuration.

Settings for the object-storage bucket holding raw uploaded files.

Dependencies: pydantic_settings
System role: Raw document storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentStorageSettings(BaseSettings):
    """Settings for the raw document bucket."""

    model_config = SettingsConfigDict(
        env_prefix="DOCUMENT_STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="agency-strategy-dev-documents",
        description="S3 bucket for raw document storage",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for the document bucket",
    )

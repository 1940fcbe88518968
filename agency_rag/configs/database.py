"""
Database configuration settings.

Manages the document-record database connection for SQLAlchemy.
PostgreSQL (asyncpg) in deployed environments; an explicit URL
overrides the assembled one for local runs.

Dependencies: pydantic, pydantic_settings
System role: Document-record store configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from agency_rag.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Document database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full async SQLAlchemy URL; overrides host/port/user settings",
    )
    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    name: str = Field(default="agency_strategy", description="PostgreSQL database name")
    ssl: bool = Field(default=False, description="Require SSL for the connection")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Construct async connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.url:
            url = self.url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        ssl_param = "?ssl=require" if self.ssl else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}{ssl_param}"
        )

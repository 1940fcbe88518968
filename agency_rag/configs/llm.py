"""
LLM configuration settings.

Chat model used for question answering and document summaries.

Dependencies: pydantic_settings
System role: Answer generation configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(default="gemini-2.5-flash", description="Google chat model ID")
    answer_temperature: float = Field(
        default=0.3,
        description="Temperature for project question answering",
    )
    summary_temperature: float = Field(
        default=0.3,
        description="Temperature for document summaries",
    )
    summary_max_input_chars: int = Field(
        default=15000,
        description="Extracted text is truncated to this many characters before summarizing",
    )
    timeout_seconds: float = Field(default=60.0, description="Chat completion timeout")

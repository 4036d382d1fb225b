"""Configuration management using Pydantic Settings."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API configuration
    crossref_base_url: str = Field(
        "https://api.crossref.org/works",
        description="Crossref works endpoint; the encoded DOI is appended to it",
    )
    request_timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Request timeout in seconds (unset keeps the httpx default)",
    )

    # Logging
    log_level: str = Field("INFO")
    log_format: str = Field("json", pattern="^(json|text)$")


# Instantiate global settings
settings = Settings()

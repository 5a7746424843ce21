"""Configuration management for CommentRadar."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # YouTube Data API
    youtube_api_key: str = Field("", description="YouTube Data API v3 key")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Fetch settings
    max_fetch_comments: int = Field(100, description="Comment threads requested per video")
    top_comment_limit: int = Field(30, description="Comments kept for analysis and display")
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()

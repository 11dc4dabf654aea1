"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Podcast Snippet API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV", "environment"),
    )
    debug: bool = Field(default=False, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3001, alias="API_PORT")
    api_reload: bool = Field(default=False, alias="API_RELOAD")

    # Screenshot uploads (staged, deleted after each request)
    upload_dir: str = Field(default="/tmp/podcast_snippet_uploads", alias="UPLOAD_DIR")
    upload_field_name: str = Field(default="screenshots", alias="UPLOAD_FIELD_NAME")
    max_upload_size_mb: int = Field(default=10, alias="MAX_UPLOAD_SIZE_MB")
    max_upload_files: int = Field(default=5, alias="MAX_UPLOAD_FILES")
    # Leftovers older than this are swept at startup (crash recovery)
    upload_retention_seconds: int = Field(
        default=3600, alias="UPLOAD_RETENTION_SECONDS"
    )

    # Logging
    log_level: str = Field(default="", alias="LOG_LEVEL")
    # "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    # AssemblyAI (transcription collaborator)
    assemblyai_api_key: str = Field(default="", alias="ASSEMBLYAI_API_KEY")
    assemblyai_base_url: str = Field(
        default="https://api.assemblyai.com/v2", alias="ASSEMBLYAI_BASE_URL"
    )
    assemblyai_language: str = Field(default="en", alias="ASSEMBLYAI_LANGUAGE")
    assemblyai_poll_interval: float = Field(
        default=2.0, alias="ASSEMBLYAI_POLL_INTERVAL"
    )  # seconds
    assemblyai_max_poll_attempts: int = Field(
        default=60, alias="ASSEMBLYAI_MAX_POLL_ATTEMPTS"
    )

    # Default window around the timestamp when no timeRange is given (seconds)
    transcript_window_before: float = Field(
        default=15.0, alias="TRANSCRIPT_WINDOW_BEFORE"
    )
    transcript_window_after: float = Field(
        default=15.0, alias="TRANSCRIPT_WINDOW_AFTER"
    )

    # iTunes lookup (podcast directory collaborator)
    itunes_lookup_url: str = Field(
        default="https://itunes.apple.com/lookup", alias="ITUNES_LOOKUP_URL"
    )
    itunes_episode_limit: int = Field(default=200, alias="ITUNES_EPISODE_LIMIT")

    # Google Cloud Vision (OCR collaborator)
    google_vision_api_key: str = Field(default="", alias="GOOGLE_VISION_API_KEY")
    google_vision_url: str = Field(
        default="https://vision.googleapis.com/v1/images:annotate",
        alias="GOOGLE_VISION_URL",
    )

    # Client wrapper
    api_url: str = Field(default="http://localhost:3001/api", alias="API_URL")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()

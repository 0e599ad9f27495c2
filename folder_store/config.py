"""Configuration management for the Folder Store."""

from pathlib import Path
from typing import List
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SAMPLE_DATA_FILE = Path(__file__).parent / "data" / "sample.json"
DEFAULT_ORG_ID = UUID("c1556e17-b7c0-45a3-a6ae-9546248fb17a")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    app_name: str = "Folder Store API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Data settings
    data_file: Path = SAMPLE_DATA_FILE
    default_org_id: UUID = DEFAULT_ORG_ID

    # Pagination settings
    page_size: int = Field(default=2, ge=1)

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_methods: List[str] = ["GET", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="FOLDER_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings

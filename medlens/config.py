"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "MedLens"
    API_V1_PREFIX: str = "/api/v1"
    PORT: int = 8002

    # CORS - allow the dashboard frontends
    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000", "http://localhost:3001"]'

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Extraction normalization
    EXTRACTION_CONFIDENCE: float = 0.92  # Not derived from the model response
    DEFAULT_DOCUMENT_TITLE: str = "Medical Document"

    # Trend classification: changes within this fraction of the previous value are "stable"
    STABILITY_THRESHOLD: float = 0.05

    # Seed the in-memory record store with the demo lab reports on startup
    SEED_DEMO_DATA: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string."""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except json.JSONDecodeError:
            return ["http://localhost:3000"]


settings = Settings()

"""
Catalog Service configuration
"""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the catalog service directory path
CATALOG_SERVICE_DIR = Path(__file__).parent.parent.parent
ENV_FILE = CATALOG_SERVICE_DIR / ".env"


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Catalog Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Service specific
    SERVICE_NAME: str = "catalog-service"

    # In-memory storage
    SEED_SAMPLE_DATA: bool = True

    # Logging
    ENABLE_FILE_LOGGING: bool = False
    LOG_DIR: Optional[str] = None

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = False
    CORS_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_HEADERS: List[str] = ["*"]


# Create a singleton instance
_settings_instance = None


def get_settings() -> CatalogSettings:
    """Get settings singleton instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = CatalogSettings()
    return _settings_instance

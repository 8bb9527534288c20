from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Rendering and application settings managed by Pydantic.
    Reads from environment variables and/or .env file.
    """
    # Project Info
    APP_TITLE: str = "Hypermodel"
    ENVIRONMENT: str = "development"
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Rendering
    DEFAULT_MEDIA_TYPE: str = "application/hal+json"
    HAL_SINGLE_LINKS_AS_ARRAY: bool = False
    RENDER_INDENT: Optional[int] = 2

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()

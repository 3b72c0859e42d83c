"""
Translator configuration.

Loads settings from environment variables and .env file.
Variables are prefixed with ERRORBRIDGE_ (e.g. ERRORBRIDGE_LOG_LEVEL=DEBUG).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Translator settings loaded from environment.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        json_content_type: Content-Type sent with every translated response.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRORBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    json_content_type: str = "application/json"


settings = Settings()

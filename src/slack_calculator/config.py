"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when required configuration is absent or malformed."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Encrypted signing secret location
    storage_bucket_name: str
    slack_signing_secret_path: str
    crypto_key_path: str

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings.

    Raises ConfigurationError naming every missing or invalid variable. Failures
    are not cached, so a corrected environment is picked up on the next call.
    """
    try:
        return Settings()
    except ValidationError as exc:
        fields = sorted(
            str(error["loc"][0]).upper() for error in exc.errors() if error.get("loc")
        )
        raise ConfigurationError(
            f"Required environment variables not set: {', '.join(fields)}"
        ) from exc

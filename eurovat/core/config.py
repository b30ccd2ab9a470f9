"""Library configuration using pydantic-settings."""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (or a local .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field("local", validation_alias="EUROVAT_ENV")
    app_name: str = "eurovat"
    log_level: str = Field("INFO", validation_alias="EUROVAT_LOG_LEVEL")
    log_format: str = Field(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        validation_alias="EUROVAT_LOG_FORMAT",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Uppercase the level and reject names the logging module doesn't know."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level


settings = Settings()

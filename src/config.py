"""
Environment configuration for the upload/health service.

Settings are read once at startup from the process environment, with an
environment-specific dotenv file (.env.dev or .env.prod) filling in anything
the environment does not set. The resulting object is frozen and handed to
the app factory and the server bootstrap explicitly.
"""
import os
from typing import Optional

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "development"
DEV_ENV_FILE = ".env.dev"
PROD_ENV_FILE = ".env.prod"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(RuntimeError):
    """Raised when the environment does not describe a runnable service."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__("Invalid environment variables: " + "; ".join(errors))


class Settings(BaseSettings):
    PORT: str = Field(..., min_length=2)
    NODE_ENV: str = Field(..., min_length=3)

    HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def port(self) -> int:
        return int(self.PORT)

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == DEVELOPMENT


def env_file_for(mode: Optional[str]) -> str:
    return DEV_ENV_FILE if mode == DEVELOPMENT else PROD_ENV_FILE


def _describe(exc: ValidationError) -> list:
    errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error.get("loc", []))
        errors.append(f"{location}: {error.get('msg', 'invalid value')}")
    return errors


def load_settings() -> Settings:
    """
    Build and validate the service settings.

    The env file is picked from NODE_ENV as found in the process environment
    before any file is read. Raises ConfigurationError listing every failing
    field.
    """
    env_file = env_file_for(os.environ.get("NODE_ENV"))
    try:
        settings = Settings(_env_file=env_file)
    except ValidationError as exc:
        errors = _describe(exc)
        logger.error("Invalid environment variables: {}", ", ".join(errors))
        raise ConfigurationError(errors) from exc

    logger.debug("Loaded settings for mode {} (env file {})", settings.NODE_ENV, env_file)
    return settings

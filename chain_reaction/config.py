import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App config
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    DEBUG: bool = False

    # Game defaults
    DEFAULT_CAPACITY: int = 4
    EXPLODE_ON_CONVERSION_AT_THRESHOLD: bool = False

    # In-memory game store
    MAX_ACTIVE_GAMES: int = 16

    @field_validator("DEFAULT_CAPACITY")
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        if v < 2:
            raise ValueError("DEFAULT_CAPACITY must be at least 2")
        return v

    @field_validator("MAX_ACTIVE_GAMES")
    @classmethod
    def validate_max_games(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_ACTIVE_GAMES must be at least 1")
        return v


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug(
        "Game defaults: capacity=%d, explode_on_conversion_at_threshold=%s, max_games=%d",
        settings.DEFAULT_CAPACITY,
        settings.EXPLODE_ON_CONVERSION_AT_THRESHOLD,
        settings.MAX_ACTIVE_GAMES,
    )
    return settings

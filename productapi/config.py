# productapi/config.py
import logging
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler


class Settings(BaseSettings):
    """Settings that come from environment variables (or a local .env file)."""

    # Shared secret; when unset every request is rejected by the gate
    api_key: Optional[str] = Field(default=None)
    api_key_header: str = Field(default="x-api-key")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    # CORSMiddleware is only installed when this is non-empty
    cors_origins: List[str] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


def configure_logging(level: str = "INFO", name: str = "productapi") -> None:
    """Attach a RichHandler to the package logger; records still propagate."""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(rich_tracebacks=True, show_path=False))

"""Application configuration."""
import logging
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReplacePolicy(str, Enum):
    """How replace operations treat inputs that are not yet members."""
    UPSERT = "upsert"
    EXISTING_ONLY = "existing_only"


class Settings(BaseSettings):
    """Library settings."""

    # Bulk operations
    default_delimiter: str = ","
    replace_policy: ReplacePolicy = ReplacePolicy.UPSERT

    # Plate maps and tables
    output_delimiter: str = "\t"
    missing_token: str = "Null"

    # JSON
    json_indent: int = 2

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="MICROPLATE_", env_file=".env")


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic handler at the configured level."""
    logging.basicConfig(level=(level or settings.log_level).upper())

"""
Shared application settings for the store client and API.

Centralizes common configuration so every settings class reads the same
.env file and ignores variables that belong to other components.
"""
from typing import Optional

from pydantic_settings import BaseSettings


class CommonSettings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Pydantic v2 configuration: accept extra env vars and set env file
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


__all__ = ["CommonSettings"]

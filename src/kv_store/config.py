"""
Configuration module for the Upstash Redis store.

Uses pydantic-settings for environment variable loading. Both values may
also come from a .env file. Presence is checked by load_store_config rather
than by the settings model, so a missing value surfaces as
MissingConfiguration naming the variable.
"""
import logging
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from src.config import CommonSettings

from .constants import TOKEN_ENV_VAR, URL_ENV_VAR
from .errors import MissingConfiguration

logger = logging.getLogger(__name__)


class StoreSettings(CommonSettings):
    """Store settings loaded from environment variables."""

    upstash_redis_url: Optional[str] = None
    upstash_redis_token: Optional[str] = None


class StoreConfig(BaseModel):
    """Validated connection parameters for the store."""

    url: str
    token: str = Field(repr=False)

    model_config = {"frozen": True}

    @property
    def host(self) -> str:
        """Host part of the URL, safe to log."""
        return urlparse(self.url).hostname or self.url


def load_store_config(settings: Optional[StoreSettings] = None) -> StoreConfig:
    """Read and validate the store URL and token.

    Args:
        settings: Pre-loaded settings. Loaded from the environment when omitted.

    Returns:
        The validated StoreConfig.

    Raises:
        MissingConfiguration: If either value is unset or empty.
    """
    if settings is None:
        settings = StoreSettings()

    missing: List[str] = []
    if not settings.upstash_redis_url:
        missing.append(URL_ENV_VAR)
    if not settings.upstash_redis_token:
        missing.append(TOKEN_ENV_VAR)
    if missing:
        logger.error("Store configuration incomplete, missing %s", ", ".join(missing))
        raise MissingConfiguration(missing)

    return StoreConfig(url=settings.upstash_redis_url, token=settings.upstash_redis_token)

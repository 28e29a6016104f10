"""
Redis client module for kv-store.

Builds the Upstash Redis client handle shared by the rest of the
application. Construction performs no network I/O; connection handling,
timeouts and retries belong to upstash-redis.
"""
import logging
from typing import Optional

from upstash_redis import Redis

from .config import StoreConfig, StoreSettings, load_store_config

logger = logging.getLogger(__name__)


def create_redis(config: StoreConfig) -> Redis:
    """Construct a client bound to the given URL and token."""
    logger.info("Creating Upstash Redis client for %s", config.host)
    return Redis(url=config.url, token=config.token)


def init_redis(settings: Optional[StoreSettings] = None) -> Redis:
    """Load the store configuration and build the client.

    Intended to be called once by the application's startup routine.

    Raises:
        MissingConfiguration: If UPSTASH_REDIS_URL or UPSTASH_REDIS_TOKEN is missing.
    """
    return create_redis(load_store_config(settings))


def check_connection(redis: Redis) -> bool:
    """Return True if the store answers PING."""
    try:
        redis.ping()
    except Exception:
        logger.exception("Upstash Redis ping failed")
        return False
    return True

"""
kv-store - Upstash Redis client bootstrap.

Reads the store URL and token from the environment, fails fast when either
is missing, and builds the client handle shared by the application.
"""
from .config import StoreConfig, StoreSettings, load_store_config
from .errors import MissingConfiguration
from .redis_client import check_connection, create_redis, init_redis

__all__ = [
    "MissingConfiguration",
    "StoreConfig",
    "StoreSettings",
    "check_connection",
    "create_redis",
    "init_redis",
    "load_store_config",
]

"""
Constants used throughout the kv-store package.
"""

# Environment variables
URL_ENV_VAR: str = "UPSTASH_REDIS_URL"
TOKEN_ENV_VAR: str = "UPSTASH_REDIS_TOKEN"

APP_VERSION: str = "1.0.0"

# Logging
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_MAX_BYTES: int = 1024 * 1024
LOG_BACKUP_COUNT: int = 3

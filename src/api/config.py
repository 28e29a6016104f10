"""
API configuration module.

Extends the common settings with API-specific configuration.
"""
from src.config import CommonSettings


class APISettings(CommonSettings):
    """API-specific settings loaded from environment variables."""

    # API Server settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Inherit model_config from CommonSettings; no extra Config class needed


api_settings = APISettings()

"""
Pydantic schemas for API request/response models.
"""
from pydantic import BaseModel

from src.kv_store.constants import APP_VERSION


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = APP_VERSION
    store: str = "ok"

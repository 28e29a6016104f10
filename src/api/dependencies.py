"""
Dependencies for the API.

Hands the shared store client to route handlers through FastAPI
dependency injection.
"""
from fastapi import Request
from upstash_redis import Redis


def get_redis(request: Request) -> Redis:
    """
    Dependency that provides the Upstash Redis client.

    The client is created once by the application lifespan and stored on
    ``app.state.redis``.

    Usage:
        @app.get("/items")
        def get_items(redis: Redis = Depends(get_redis)):
            ...
    """
    return request.app.state.redis

from fastapi import Request

from services.cache import TTLCache


def get_cache(request: Request) -> TTLCache:
    """Provide the cache instance created at application startup."""
    return request.app.state.cache

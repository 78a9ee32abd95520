"""
Services module for the NeuRazor Scoring Engine.
"""

from neurazor.services.cache import get_cache, reset_cache
from neurazor.services.redis_cache import RedisCache


def get_scoring_service():
    """Lazy import to avoid circular dependency."""
    from neurazor.core.dependencies import get_scoring_service as _get
    return _get()


__all__ = [
    "get_cache",
    "reset_cache",
    "RedisCache",
    "get_scoring_service",
]

"""
Cache Service Singleton - NeuRazor Scoring Engine
neurazor/services/cache.py

Provides a singleton Redis cache instance, key helpers and TTL constants.
Gracefully handles Redis unavailability.
"""
import redis
from typing import Optional
from neurazor.services.redis_cache import RedisCache
from neurazor.config import settings
from neurazor.models.enumerations import GameKind

# TTL constants (in seconds)
TTL_ACTIVE_VERSION = settings.CACHE_TTL_ACTIVE_VERSION

ACTIVE_VERSION_KEY = "scoring:active:{game_kind}"

# Singleton instance
_cache: Optional[RedisCache] = None


def active_version_key(game_kind: GameKind) -> str:
    return ACTIVE_VERSION_KEY.format(game_kind=GameKind(game_kind).value)


def get_cache() -> Optional[RedisCache]:
    """
    Get or create Redis cache instance.

    Returns:
        RedisCache instance if Redis is enabled and available, None otherwise.

    Note:
        Returns None if Redis is unavailable, allowing the engine to keep
        working without caching (graceful degradation).
    """
    global _cache
    if not settings.CACHE_ENABLED:
        return None
    if _cache is None:
        try:
            _cache = RedisCache()
            _cache.ping()
        except (redis.RedisError, ConnectionError):
            _cache = None
    return _cache


def reset_cache() -> None:
    """
    Reset the cache singleton.

    Useful for testing or when Redis connection needs to be re-established.
    """
    global _cache
    _cache = None

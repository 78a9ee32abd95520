"""
Redis Cache - NeuRazor Scoring Engine
neurazor/services/redis_cache.py

Thin typed wrapper over a Redis client. Values are pydantic models stored as
JSON (camelCase aliases, same shape as persisted config documents) under
``{namespace}:{key}``.
"""
import redis
from typing import Optional, TypeVar, Type
from pydantic import BaseModel
from neurazor.config import settings

T = TypeVar("T", bound=BaseModel)

KEY_NAMESPACE = "neurazor"


class RedisCache:
    def __init__(self, url: Optional[str] = None, namespace: str = KEY_NAMESPACE):
        self.namespace = namespace
        self.client = redis.from_url(
            url or settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
        )

    def key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def ping(self) -> bool:
        """Raises redis.RedisError when the server cannot be reached."""
        return bool(self.client.ping())

    def get(self, key: str, model: Type[T]) -> Optional[T]:
        """Cached model, or None on a miss."""
        data = self.client.get(self.key(key))
        if data:
            return model.model_validate_json(data)
        return None

    def set(self, key: str, value: BaseModel, ttl_seconds: int) -> None:
        """Store a model for ``ttl_seconds``."""
        self.client.setex(
            self.key(key),
            ttl_seconds,
            value.model_dump_json(by_alias=True),
        )

    def delete(self, key: str) -> None:
        """Invalidate a single entry."""
        self.client.delete(self.key(key))

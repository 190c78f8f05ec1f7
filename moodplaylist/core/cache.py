# ============================================================================
# FILE: moodplaylist/core/cache.py
# ============================================================================
import redis
import json
from typing import Optional, Any
from moodplaylist.config import settings
import logging

logger = logging.getLogger(__name__)

MOODS_CACHE_KEY = "moods:all"

class RedisCache:
    """Redis cache helper class.

    Caching is disabled (every call is a no-op) when Redis cannot be reached
    at startup or when constructed with ``url=None``.
    """

    def __init__(self, url: Optional[str] = settings.REDIS_URL):
        self.redis_client = None
        if not url:
            return
        try:
            self.redis_client = redis.from_url(url, decode_responses=True, socket_connect_timeout=1)
            self.redis_client.ping()
            logger.info("Redis connection established")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self.redis_client = None

    def set_cache(self, key: str, value: Any, expire: int = None) -> bool:
        """Set a cache value with optional expiration"""
        if not self.redis_client:
            return False

        try:
            serialized = json.dumps(value, default=str)
            if expire:
                self.redis_client.setex(key, expire, serialized)
            else:
                self.redis_client.set(key, serialized)
            return True
        except redis.RedisError as e:
            logger.error(f"Cache set error: {e}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        """Get a cache value"""
        if not self.redis_client:
            return None

        try:
            value = self.redis_client.get(key)
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, ValueError) as e:
            logger.error(f"Cache get error: {e}")
            return None

# Singleton instance
cache = RedisCache()

"""
Redis Repository Implementation Module Initialization
"""

from kv_gateway.repositories.redis.kv_store_repo import RedisKeyValueRepository

__all__ = [
    "RedisKeyValueRepository",
]

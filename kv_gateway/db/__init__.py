"""
Store Connection Module Initialization
"""

from kv_gateway.db.redis import close_redis, create_redis

__all__ = [
    "close_redis",
    "create_redis",
]

"""
Key-Value Store Repository Redis Implementation

Provides concrete Redis operation implementation for the gateway.
Uses Redis native TTL for key expiration.
"""

import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from kv_gateway.common.errors import StoreError
from kv_gateway.repositories.kv_store_repo import KeyValueRepository

logger = logging.getLogger(__name__)


class RedisKeyValueRepository(KeyValueRepository):
    """
    Key-Value Store Repository Redis Implementation

    Translates repository calls into single Redis commands and converts
    client failures into StoreError.
    """

    def __init__(self, client: Redis):
        """
        Initialize Repository

        Args:
            client: Async Redis client instance (created with decode_responses=True)
        """
        self.client = client

    @staticmethod
    def _status_reply(reply: Any) -> Any:
        """redis-py turns the OK status reply into True; report it as the store sent it"""
        if reply is True:
            return "OK"
        return reply

    @staticmethod
    def _store_error(command: str, exc: RedisError) -> StoreError:
        logger.warning(f"Redis {command} failed: {exc}")
        return StoreError(message=str(exc), details={"command": command})

    async def keys(self, pattern: str) -> list[str]:
        """List keys matching pattern with KEYS"""
        try:
            return list(await self.client.keys(pattern))
        except RedisError as e:
            raise self._store_error("KEYS", e) from e

    async def delete(self, key: str) -> int:
        """Delete a key with DEL"""
        try:
            return int(await self.client.delete(key))
        except RedisError as e:
            raise self._store_error("DEL", e) from e

    async def set(self, key: str, value: str) -> str:
        """Set a key-value pair with SET"""
        try:
            return self._status_reply(await self.client.set(key, value))
        except RedisError as e:
            raise self._store_error("SET", e) from e

    async def set_with_expiration(self, key: str, value: str, expiration: Any) -> str:
        """Set a key-value pair with SETEX"""
        try:
            return self._status_reply(await self.client.setex(key, expiration, value))
        except RedisError as e:
            raise self._store_error("SETEX", e) from e

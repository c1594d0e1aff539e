"""
Key-Value Store Repository Interface

Defines the data access interface the gateway service works against.
"""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueRepository(ABC):
    """Key-Value Store Repository Interface"""

    @abstractmethod
    async def keys(self, pattern: str) -> list[str]:
        """
        List keys matching a glob-style pattern

        The full result set is returned, without pagination.

        Args:
            pattern: Glob pattern such as "*user*" or "*"

        Returns:
            list[str]: Matching keys

        Raises:
            StoreError: The store operation failed
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        """
        Delete a key

        Args:
            key: The key to delete

        Returns:
            int: Number of keys removed (0 if the key didn't exist)

        Raises:
            StoreError: The store operation failed
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> str:
        """
        Set a key-value pair, overwriting any existing value

        Args:
            key: The key to set
            value: The value to store

        Returns:
            str: Store reply ("OK")

        Raises:
            StoreError: The store operation failed
        """
        pass

    @abstractmethod
    async def set_with_expiration(self, key: str, value: str, expiration: Any) -> str:
        """
        Set a key-value pair that expires after the given number of seconds

        Args:
            key: The key to set
            value: The value to store
            expiration: Time to live in seconds; values the store cannot
                read as a positive integer raise StoreError

        Returns:
            str: Store reply ("OK")

        Raises:
            StoreError: The store operation failed
        """
        pass

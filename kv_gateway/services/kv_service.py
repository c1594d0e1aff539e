"""
Key-Value Service Module

Validates request bodies and forwards them to the key-value repository.
Bulk operations run sequentially in input order with no atomicity: a store
failure aborts the remaining entries and leaves earlier writes in place.
"""

import logging
from typing import Any, Optional

from kv_gateway.common.errors import ValidationError
from kv_gateway.domain.kv_store import (
    KeyDeleteResult,
    KeyValuePair,
    PairSetResult,
    SetExResult,
    SetResult,
)
from kv_gateway.repositories.kv_store_repo import KeyValueRepository

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    """
    Whether a body field counts as not provided.

    Absent and null fields are missing; so are an empty string, zero and false,
    which the service has always rejected alongside absent fields.
    Empty lists and objects count as provided.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _parse_expiration(value: Any) -> int:
    """Expiration as whole seconds; booleans and fractional numbers are rejected"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Expiration is not a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("Expiration is not a number")
        return int(value)
    return value


def _coerce_expiration(value: Any) -> Any:
    """
    Whole seconds for a single /setex when the value reads as an integer
    (60, 60.0, "60"). Anything else is passed through for the store to reject.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value


def build_pattern(pattern: Optional[str]) -> str:
    """Wrap a search substring in wildcards; no substring matches every key"""
    if pattern:
        return f"*{pattern}*"
    return "*"


class KeyValueService:
    """
    Key-Value Service

    Owns request-shape validation for every route. All checks for a request
    complete before its first store call.
    """

    def __init__(self, repo: KeyValueRepository):
        """
        Initialize Service

        Args:
            repo: Key-value repository
        """
        self.repo = repo

    # ============ Validation ============

    @staticmethod
    def _validate_keys(body: dict[str, Any]) -> list[str]:
        keys = body.get("keys")
        if _is_missing(keys):
            raise ValidationError("No keys provided")
        if not isinstance(keys, list):
            raise ValidationError("Keys is not an array")
        if len(keys) == 0:
            raise ValidationError("Keys array is empty")
        for key in keys:
            if not isinstance(key, str):
                raise ValidationError("Key is not a string")
        return keys

    @staticmethod
    def _validate_pairs(body: dict[str, Any], with_expiration: bool) -> list[KeyValuePair]:
        pairs = body.get("pairs")
        if _is_missing(pairs):
            raise ValidationError("No pairs provided")
        if not isinstance(pairs, list):
            raise ValidationError("Pairs is not an array")
        if len(pairs) == 0:
            raise ValidationError("Pairs array is empty")

        validated = []
        for pair in pairs:
            # A JSON array is an object without key/value fields
            if isinstance(pair, list):
                pair = {}
            if not isinstance(pair, dict):
                raise ValidationError("Pair is not an object")

            key = pair.get("key")
            value = pair.get("value")
            expiration = pair.get("expiration")

            if with_expiration:
                if _is_missing(key) or _is_missing(value) or _is_missing(expiration):
                    raise ValidationError("Pair is missing key, value, or expiration")
            elif _is_missing(key) or _is_missing(value):
                raise ValidationError("Pair is missing key or value")

            if not isinstance(key, str):
                raise ValidationError("Key is not a string")
            if not isinstance(value, str):
                raise ValidationError("Value is not a string")

            if with_expiration:
                expiration = _parse_expiration(expiration)

            # Plain sets never expire; the pair's expiration is only echoed back
            validated.append(KeyValuePair(key=key, value=value, expiration=expiration))
        return validated

    # ============ Operations ============

    async def search(self, pattern: Optional[str] = None) -> list[str]:
        """
        List keys containing the given substring

        Args:
            pattern: Substring to search for; None or empty matches all keys

        Returns:
            list[str]: Matching keys
        """
        glob = build_pattern(pattern)
        logger.info(f"Pattern: {glob}")
        return await self.repo.keys(glob)

    async def delete(self, key: str) -> int:
        """Delete one key, returning the removed count"""
        if not key:
            raise ValidationError("No key provided")
        count = await self.repo.delete(key)
        logger.info(f"Deleted: {key} - {count}")
        return count

    async def delete_many(self, body: dict[str, Any]) -> list[KeyDeleteResult]:
        """
        Delete a list of keys one at a time

        Body: {"keys": ["key1", "key2"]}

        Raises:
            ValidationError: keys missing, not a list, empty, or holding a non-string
            StoreError: A delete failed; remaining keys are not attempted
        """
        keys = self._validate_keys(body)

        results = []
        for key in keys:
            count = await self.repo.delete(key)
            logger.info(f"Deleted: {key} - {count}")
            results.append(KeyDeleteResult(key=key, value=count))
        return results

    async def set(self, body: dict[str, Any]) -> SetResult:
        """
        Set one key-value pair

        Body: {"key": "key1", "value": "value1"}
        """
        key = body.get("key")
        value = body.get("value")
        if _is_missing(key) or _is_missing(value):
            raise ValidationError("No key or value provided")
        if not isinstance(key, str):
            raise ValidationError("Key is not a string")
        if not isinstance(value, str):
            raise ValidationError("Value is not a string")

        results = await self.repo.set(key, value)
        return SetResult(key=key, value=value, results=results)

    async def set_with_expiration(self, body: dict[str, Any]) -> SetExResult:
        """
        Set one key-value pair with an expiration in seconds

        Body: {"key": "key1", "value": "value1", "expiration": 60}
        """
        key = body.get("key")
        value = body.get("value")
        expiration = body.get("expiration")
        if _is_missing(key) or _is_missing(value) or _is_missing(expiration):
            raise ValidationError("No key, value, or expiration provided")
        if not isinstance(key, str):
            raise ValidationError("Key is not a string")
        if not isinstance(value, str):
            raise ValidationError("Value is not a string")

        # Not type-checked here: values Redis cannot read as seconds fail as store errors
        results = await self.repo.set_with_expiration(key, value, _coerce_expiration(expiration))
        return SetExResult(key=key, value=value, expiration=expiration, results=results)

    async def set_many(self, body: dict[str, Any]) -> list[PairSetResult]:
        """
        Set a list of key-value pairs one at a time

        Body: {"pairs": [{"key": "key1", "value": "value1"}, ...]}
        """
        pairs = self._validate_pairs(body, with_expiration=False)

        results = []
        for pair in pairs:
            result = await self.repo.set(pair.key, pair.value)
            results.append(
                PairSetResult(key=pair.key, value=pair.value, expiration=pair.expiration, result=result)
            )
        return results

    async def set_many_with_expiration(self, body: dict[str, Any]) -> list[PairSetResult]:
        """
        Set a list of key-value pairs with expirations one at a time

        Body: {"pairs": [{"key": "key1", "value": "value1", "expiration": 60}, ...]}
        """
        pairs = self._validate_pairs(body, with_expiration=True)

        results = []
        for pair in pairs:
            result = await self.repo.set_with_expiration(pair.key, pair.value, pair.expiration)
            results.append(
                PairSetResult(key=pair.key, value=pair.value, expiration=pair.expiration, result=result)
            )
        return results

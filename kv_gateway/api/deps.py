"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
The Redis client lives on app.state; repositories and services are built per request around it.
"""

import json
from typing import Annotated, Any

from fastapi import Depends, Request
from redis.asyncio import Redis

from kv_gateway.common.errors import ValidationError
from kv_gateway.repositories.kv_store_repo import KeyValueRepository
from kv_gateway.repositories.redis import RedisKeyValueRepository
from kv_gateway.services import KeyValueService


def get_redis_client(request: Request) -> Redis:
    """
    Get the application's Redis client

    Raises:
        RuntimeError: If the client was not created during startup
    """
    client = getattr(request.app.state, "redis", None)
    if client is None:
        raise RuntimeError("Redis client not initialized. Ensure the application lifespan has run.")
    return client


def get_kv_repo(client: Annotated[Redis, Depends(get_redis_client)]) -> KeyValueRepository:
    """Get key-value Repository"""
    return RedisKeyValueRepository(client)


def get_kv_service(repo: Annotated[KeyValueRepository, Depends(get_kv_repo)]) -> KeyValueService:
    """Get key-value service"""
    return KeyValueService(repo)


async def get_json_body(request: Request) -> dict[str, Any]:
    """
    Read the request body as a JSON object

    An empty body, or JSON that is not an object, reads as {} so that each
    route reports its own "not provided" error.

    Raises:
        ValidationError: Body is not valid JSON
    """
    if not (await request.body()).strip():
        return {}
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("Invalid JSON body", code="invalid_json") from e
    if not isinstance(data, dict):
        return {}
    return data


# Dependency type aliases
KeyValueServiceDep = Annotated[KeyValueService, Depends(get_kv_service)]
JsonBody = Annotated[dict[str, Any], Depends(get_json_body)]

"""
Key-Value API

Routes mapping directly onto store primitives: pattern search, delete,
bulk delete, set, set with expiration, and their bulk variants.
Errors raised here are rendered by the application's AppError handler.
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from kv_gateway.api.deps import JsonBody, KeyValueServiceDep
from kv_gateway.domain.kv_store import KeyDeleteResult, PairSetResult, SetExResult, SetResult

router = APIRouter(tags=["Keys"])


@router.post("/", response_model=list[KeyDeleteResult])
async def delete_keys(body: JsonBody, service: KeyValueServiceDep):
    """
    Delete a list of keys

    Body: {"keys": ["key1", "key2"]}. Keys are deleted in order; each result
    reports how many keys were removed (0 when the key did not exist).
    """
    return await service.delete_many(body)


@router.post("/set", response_model=SetResult)
async def set_key(body: JsonBody, service: KeyValueServiceDep):
    """
    Set a key-value pair

    Overwrites an existing value.
    """
    return await service.set(body)


@router.post("/setex", response_model=SetExResult)
async def set_key_with_expiration(body: JsonBody, service: KeyValueServiceDep):
    """
    Set a key-value pair that expires after `expiration` seconds
    """
    return await service.set_with_expiration(body)


@router.post("/mset", response_model=list[PairSetResult])
async def set_pairs(body: JsonBody, service: KeyValueServiceDep):
    """
    Set a list of key-value pairs

    Pairs are written in order. A store failure stops the loop; pairs
    written before it are kept.
    """
    return await service.set_many(body)


@router.post("/msetex", response_model=list[PairSetResult])
async def set_pairs_with_expiration(body: JsonBody, service: KeyValueServiceDep):
    """
    Set a list of key-value pairs, each with its own expiration
    """
    return await service.set_many_with_expiration(body)


@router.get("/", response_model=list[str], operation_id="search_all_keys")
@router.get("/{pattern:path}", response_model=list[str], operation_id="search_keys")
async def search_keys(service: KeyValueServiceDep, pattern: Optional[str] = None):
    """
    List keys containing `pattern`

    Without a pattern every key is returned.
    """
    return await service.search(pattern)


@router.delete("/{key:path}", response_class=PlainTextResponse)
async def delete_key(key: str, service: KeyValueServiceDep):
    """
    Delete one key

    Returns "Deleted: <key> - <count>" where count is 0 or 1.
    """
    count = await service.delete(key)
    return f"Deleted: {key} - {count}"

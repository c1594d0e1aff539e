"""
Repository Layer Module Initialization
"""

from kv_gateway.repositories.kv_store_repo import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]

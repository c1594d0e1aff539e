"""
API Router Module Initialization
"""

from kv_gateway.api.deps import get_kv_repo, get_kv_service
from kv_gateway.api.keys import router as keys_router

__all__ = [
    "get_kv_repo",
    "get_kv_service",
    "keys_router",
]

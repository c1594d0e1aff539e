"""
Service Layer Module Initialization
"""

from kv_gateway.services.kv_service import KeyValueService

__all__ = [
    "KeyValueService",
]

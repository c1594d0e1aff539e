"""
Domain Model Module Initialization
"""

from kv_gateway.domain.kv_store import (
    KeyDeleteResult,
    KeyValuePair,
    PairSetResult,
    SetExResult,
    SetResult,
)

__all__ = [
    "KeyDeleteResult",
    "KeyValuePair",
    "PairSetResult",
    "SetExResult",
    "SetResult",
]

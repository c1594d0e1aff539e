"""
Key-Value Store Domain Model

Defines validated request items and response DTOs for the gateway routes.
"""

from typing import Any

from pydantic import BaseModel, Field


class KeyValuePair(BaseModel):
    """A validated key/value pair, optionally carrying an expiration in seconds"""

    key: str = Field(..., description="Key")
    value: str = Field(..., description="Value")
    expiration: Any = Field(None, description="Expiration (seconds), as given by the client")


class KeyDeleteResult(BaseModel):
    """Result of deleting one key in a bulk delete"""

    key: str = Field(..., description="Key")
    value: int = Field(..., description="Number of keys removed (0 or 1)")


class SetResult(BaseModel):
    """Result of POST /set"""

    key: str = Field(..., description="Key")
    value: str = Field(..., description="Value")
    results: Any = Field(None, description="Store reply")


class SetExResult(BaseModel):
    """Result of POST /setex"""

    key: str = Field(..., description="Key")
    value: str = Field(..., description="Value")
    expiration: Any = Field(..., description="Expiration (seconds), as given by the client")
    results: Any = Field(None, description="Store reply")


class PairSetResult(BaseModel):
    """Result of setting one pair in POST /mset or POST /msetex"""

    key: str = Field(..., description="Key")
    value: str = Field(..., description="Value")
    expiration: Any = Field(None, description="Expiration as given in the pair, null when not given")
    result: Any = Field(None, description="Store reply")

"""
KV Gateway

REST interface over a Redis-compatible key-value store.
"""

__version__ = "0.1.0"

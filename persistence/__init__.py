from __future__ import annotations

from .async_store import AsyncStore
from .database import Database, DatabaseSnapshot
from .errors import (
    DeserializationError,
    KeyNotFoundError,
    SerializationError,
    StoreError,
    StoreIOError,
)
from .interfaces import KeyValueStore
from .store import Store

__all__ = [
    "AsyncStore",
    "Database",
    "DatabaseSnapshot",
    "KeyValueStore",
    "Store",
    "StoreError",
    "StoreIOError",
    "SerializationError",
    "DeserializationError",
    "KeyNotFoundError",
]

from __future__ import annotations


class StoreError(Exception):
    """Base class for every error raised by the store."""


class StoreIOError(StoreError):
    """Filesystem failure on load/save, or an unusable (poisoned) lock."""


class SerializationError(StoreError):
    pass


class DeserializationError(StoreError):
    pass


class KeyNotFoundError(StoreError):
    def __init__(self, key: str):
        super().__init__(f"Key '{key}' not found")
        self.key = key

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .codec import decode_value, encode_value
from .disk_store import atomic_write_bytes, read_bytes
from .errors import DeserializationError, KeyNotFoundError, StoreIOError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DatabaseSnapshot(BaseModel):
    """
    Mirrors the on-disk snapshot exactly:
      { "data": { "<key>": "<base64 of the JSON-encoded value>" } }

    Keys are written sorted. There is no version field; changing this shape
    invalidates existing files.
    """

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    data: dict[str, bytes] = Field(default_factory=dict)


class Database:
    """
    In-memory key -> encoded-bytes map with whole-snapshot load/save.

    Not thread-safe: callers provide exclusive access for mutations and at
    least shared access for reads (see Store).
    """

    def __init__(self, data: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(data or {})

    @classmethod
    def load(cls, path: Path) -> "Database":
        """
        Load the snapshot at `path`.

        A missing file yields an empty database that is saved immediately,
        creating parent directories as needed. Corrupt contents raise
        DeserializationError; they are not regenerated.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            raw = read_bytes(path)
        except OSError as e:
            raise StoreIOError(f"failed to read {path}: {e}") from e

        if raw is None:
            logger.debug("STORE LOAD: %s missing, creating empty database", path)
            db = cls()
            db.save(path)
            return db

        try:
            snapshot = DatabaseSnapshot.model_validate_json(raw)
        except ValidationError as e:
            raise DeserializationError(f"{path} is not a valid database snapshot: {e}") from e

        logger.debug("STORE LOAD: %s (%d keys)", path, len(snapshot.data))
        return cls(snapshot.data)

    def save(self, path: Path) -> None:
        snapshot = DatabaseSnapshot(data=dict(sorted(self._data.items())))
        payload = snapshot.model_dump_json().encode("utf-8")
        try:
            atomic_write_bytes(path, payload)
        except OSError as e:
            logger.warning("STORE SAVE: failed to write %s: %r", path, e)
            raise StoreIOError(f"failed to write {path}: {e}") from e
        logger.debug("STORE SAVE: wrote %d keys (%d bytes) to %s", len(self._data), len(payload), path)

    def set(self, key: str, value: Any) -> None:
        # A failed encode leaves the map untouched.
        self._data[key] = encode_value(value)

    def get(self, key: str, type_: type[T]) -> T:
        raw = self._data.get(key)
        if raw is None:
            raise KeyNotFoundError(key)
        return decode_value(raw, type_)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

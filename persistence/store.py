from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from .database import Database
from .interfaces import KeyValueStore
from .locks import ReadWriteLock

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store(KeyValueStore):
    """
    Thread-safe, file-backed key-value store.

    Every mutation re-serializes the whole database to `path` while still
    holding exclusive access, so the file always matches the map as of the
    last successful save. If a save fails, the in-memory map is already
    mutated and the error is raised to the caller.

    Values are encoded as JSON without type information: read a key back
    with the same type it was written with.
    """

    def __init__(self, db: Database, path: Path):
        self._db = db
        self._path = path
        self._lock = ReadWriteLock()

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> "Store":
        """
        Open the store at `path`, creating it (and missing parent
        directories) when absent.
        """
        p = Path(path)
        db = Database.load(p)
        logger.info("STORE OPEN: %s (%d keys)", p, len(db))
        return cls(db, p)

    @property
    def path(self) -> Path:
        return self._path

    def set(self, key: str, value: Any) -> None:
        with self._lock.write():
            self._db.set(key, value)
            self._db.save(self._path)

    def get(self, key: str, type_: type[T]) -> T:
        with self._lock.read():
            return self._db.get(key, type_)

    def remove(self, key: str) -> None:
        """Remove `key`. Removing an absent key is not an error, but still saves."""
        with self._lock.write():
            self._db.remove(key)
            self._db.save(self._path)

    def keys(self) -> list[str]:
        with self._lock.read():
            return self._db.keys()

    def __repr__(self) -> str:
        return f"Store(path={str(self._path)!r})"

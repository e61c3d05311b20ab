from __future__ import annotations

import asyncio
import os
from typing import Any, TypeVar

from .store import Store

T = TypeVar("T")


class AsyncStore:
    """
    Async wrapper around Store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @classmethod
    async def open(cls, path: str | os.PathLike[str]) -> "AsyncStore":
        store = await asyncio.to_thread(Store.open, path)
        return cls(store)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._store.set, key, value)

    async def get(self, key: str, type_: type[T]) -> T:
        return await asyncio.to_thread(self._store.get, key, type_)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._store.remove, key)

    async def keys(self) -> list[str]:
        return await asyncio.to_thread(self._store.keys)

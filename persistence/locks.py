from __future__ import annotations

import contextlib
import threading
from pathlib import Path
from typing import Iterator

from .errors import StoreError, StoreIOError


class ReadWriteLock:
    """
    Many concurrent readers or a single writer.

    Waiting writers block new readers from entering. A non-StoreError
    exception escaping a write section poisons the lock: every later
    acquisition raises StoreIOError instead of touching possibly
    half-mutated state.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        with self._cond:
            return self._poisoned

    def _check_poisoned(self) -> None:
        if self._poisoned:
            raise StoreIOError("Lock poisoned")

    @contextlib.contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            self._check_poisoned()
            while self._writer or self._waiting_writers:
                self._cond.wait()
                self._check_poisoned()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextlib.contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._check_poisoned()
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                    self._check_poisoned()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        except StoreError:
            raise
        except BaseException:
            with self._cond:
                self._poisoned = True
            raise
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class PathLockRegistry:
    """
    Provides a stable lock per normalized file path so independent Store
    instances over the same file never interleave their snapshot writes.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = str(path.resolve())
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock


GLOBAL_PATH_LOCKS = PathLockRegistry()

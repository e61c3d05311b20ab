from __future__ import annotations

import os
from pathlib import Path

from .locks import GLOBAL_PATH_LOCKS


def read_bytes(path: Path) -> bytes | None:
    """
    Read a whole file from disk.

    Returns None when the file does not exist. Any other OSError propagates.
    """
    try:
        with path.open("rb") as f:
            return f.read()
    except FileNotFoundError:
        return None


def atomic_write_bytes(path: Path, payload: bytes) -> None:
    """
    Atomically write bytes to disk by writing to a temp file, fsyncing it,
    then replacing the target.

    Writers to the same path are serialized, so the shared temp file is
    never written by two threads at once.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with GLOBAL_PATH_LOCKS.lock_for(path):
        try:
            with tmp_path.open("wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

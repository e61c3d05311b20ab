from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    if raw in logging.getLevelNamesMapping():
        return raw
    return default


@dataclass(frozen=True)
class Settings:
    # Where the store (and later, pid/config files) live
    data_dir: Path
    store_file: str

    # Logging; unknown level names fall back to WARNING
    log_level: str

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_file


def get_settings() -> Settings:
    data_dir = Path(os.getenv("SUPERTASK_DATA_DIR", "~/.supertask")).expanduser()
    store_file = os.getenv("SUPERTASK_STORE_FILE", "store.db").strip() or "store.db"
    log_level = _env_log_level("SUPERTASK_LOG_LEVEL", "WARNING")

    return Settings(
        data_dir=data_dir,
        store_file=store_file,
        log_level=log_level,
    )

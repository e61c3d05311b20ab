from __future__ import annotations

from pathlib import Path

from settings import get_settings


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_data_dir() -> Path:
    return ensure_dir(get_settings().data_dir)


def default_store_path() -> Path:
    settings = get_settings()
    ensure_dir(settings.data_dir)
    return settings.store_path

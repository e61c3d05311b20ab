from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A store path whose parent directory does not exist yet."""
    return tmp_path / "db" / "test.db"


@pytest.fixture
def store(db_path: Path):
    from persistence import Store

    return Store.open(db_path)


@pytest.fixture
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point SUPERTASK_* settings at a temp directory so tests never touch ~/.supertask.
    """
    data_dir = tmp_path / "home" / ".supertask"
    monkeypatch.setenv("SUPERTASK_DATA_DIR", str(data_dir))
    monkeypatch.delenv("SUPERTASK_STORE_FILE", raising=False)
    monkeypatch.delenv("SUPERTASK_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    return data_dir

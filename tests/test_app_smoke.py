from __future__ import annotations

import logging


def test_settings_defaults(monkeypatch):
    from settings import get_settings

    monkeypatch.delenv("SUPERTASK_DATA_DIR", raising=False)
    monkeypatch.delenv("SUPERTASK_STORE_FILE", raising=False)
    monkeypatch.delenv("SUPERTASK_LOG_LEVEL", raising=False)

    s = get_settings()
    assert s.data_dir.name == ".supertask"
    assert s.store_file == "store.db"
    assert s.log_level == "WARNING"
    assert s.store_path == s.data_dir / "store.db"


def test_create_store_uses_env(sandbox_env, monkeypatch):
    import app as app_module

    monkeypatch.setenv("SUPERTASK_STORE_FILE", "events.db")
    monkeypatch.setenv("SUPERTASK_LOG_LEVEL", "debug")

    store = app_module.create_store()

    assert store.path == sandbox_env / "events.db"
    assert store.path.exists()
    assert logging.getLogger("persistence").level == logging.DEBUG

    store.set("event:backup", {"interval": "1d"})
    assert app_module.create_store().get("event:backup", dict) == {"interval": "1d"}


def test_create_store_reads_local_env(sandbox_env, tmp_path, monkeypatch):
    import app as app_module

    monkeypatch.delenv("SUPERTASK_DATA_DIR")
    other = tmp_path / "from-dotenv"
    (tmp_path / "local.env").write_text(f"SUPERTASK_DATA_DIR={other}\n", encoding="utf-8")

    store = app_module.create_store()
    assert store.path == other / "store.db"


def test_unknown_log_level_falls_back_to_warning(sandbox_env, monkeypatch):
    import app as app_module
    from settings import get_settings

    monkeypatch.setenv("SUPERTASK_LOG_LEVEL", "chatty")
    assert get_settings().log_level == "WARNING"

    app_module.create_store()
    assert logging.getLogger("persistence").level == logging.WARNING

"""Tests for global configuration and logging setup."""

import json
import logging
from pathlib import Path

from todolists import logging_config
from todolists.config import AppConfig, get_config_dir, get_global_config, save_global_config


def test_defaults(isolated_home):
    config = get_global_config()
    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.log_level == "INFO"
    assert config.cors_origins == ["*"]
    assert config.data_path == isolated_home / "db.json"


def test_config_dir_is_created(isolated_home):
    assert get_config_dir() == isolated_home
    assert isolated_home.is_dir()


def test_save_and_load(isolated_home, tmp_path):
    save_global_config(AppConfig(data_path=tmp_path / "elsewhere.json", port=9000))
    config = get_global_config()
    assert config.port == 9000
    assert config.data_path == tmp_path / "elsewhere.json"


def test_environment_overrides_file(isolated_home, monkeypatch):
    save_global_config(AppConfig(port=9000, host="0.0.0.0"))
    monkeypatch.setenv("TODOLISTS_PORT", "9100")
    monkeypatch.setenv("TODOLISTS_DATA", "/tmp/todolists-test.json")
    config = get_global_config()
    assert config.port == 9100
    assert config.host == "0.0.0.0"
    assert config.data_path == Path("/tmp/todolists-test.json")


def test_invalid_file_falls_back_to_defaults(isolated_home):
    (get_config_dir() / "config.json").write_text("{broken", encoding="utf-8")
    assert get_global_config().port == 8080


def test_invalid_environment_is_ignored(isolated_home, monkeypatch):
    monkeypatch.setenv("TODOLISTS_PORT", "not-a-port")
    assert get_global_config().port == 8080


def test_saved_file_is_json(isolated_home):
    save_global_config(AppConfig(log_level="DEBUG"))
    data = json.loads((isolated_home / "config.json").read_text(encoding="utf-8"))
    assert data["log_level"] == "DEBUG"


def test_configure_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    before = list(root.handlers)
    try:
        logging_config.configure_logging("debug")
        logging_config.configure_logging("warning")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
    finally:
        for handler in root.handlers:
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(logging.WARNING)

# tests/test_config_logging.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskbot.cli.main import build_parser
from taskbot.config import Settings
from taskbot.logging_setup import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "DATA_DIR", "LOG_DIR", "SAVE_PATH"):
        monkeypatch.delenv(f"TASKBOT_{name}", raising=False)

    s = Settings.from_env()
    assert s.app_name == "Barney"
    assert s.log_level == "WARNING"
    assert s.save_path == Path("list.txt")
    assert s.log_dir == s.data_dir


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOT_APP_NAME", "Robin")
    monkeypatch.setenv("TASKBOT_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKBOT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKBOT_SAVE_PATH", str(tmp_path / "mine.txt"))
    monkeypatch.delenv("TASKBOT_LOG_DIR", raising=False)

    s = Settings.from_env()
    assert s.app_name == "Robin"
    assert s.log_level == "DEBUG"
    assert s.save_path == tmp_path / "mine.txt"
    assert s.log_dir == tmp_path


def test_settings_bad_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKBOT_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "WARNING"


def test_cli_save_path_argument(settings) -> None:
    parser = build_parser(settings)
    assert parser.parse_args([]).save_path == str(settings.save_path)
    assert parser.parse_args(["other.txt"]).save_path == "other.txt"


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskbot.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)

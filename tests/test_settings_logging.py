from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from types import SimpleNamespace

import pytest

from dutui.logging import setup_logging
from dutui.settings import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("DUTUI_BAR_WIDTH", "DUTUI_LOG_DIR", "DUTUI_LOG_LEVEL", "DUTUI_LOG_BACKUP_COUNT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def test_settings_defaults():
    s = load_settings()
    assert s.DUTUI_BAR_WIDTH == 30
    assert s.DUTUI_LOG_DIR is None
    assert s.DUTUI_LOG_LEVEL == "WARNING"
    assert s.DUTUI_LOG_BACKUP_COUNT == 7


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DUTUI_BAR_WIDTH", "12")
    monkeypatch.setenv("DUTUI_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.DUTUI_BAR_WIDTH == 12
    assert s.DUTUI_LOG_LEVEL == "debug"


def test_settings_from_dotenv(tmp_path: Path):
    (tmp_path / ".env").write_text("DUTUI_BAR_WIDTH=8\nUNRELATED=1\n", encoding="utf-8")
    assert load_settings().DUTUI_BAR_WIDTH == 8


def test_bar_width_is_clamped(monkeypatch):
    monkeypatch.setenv("DUTUI_BAR_WIDTH", "0")
    assert load_settings().DUTUI_BAR_WIDTH == 1


def test_setup_logging_console_only():
    log_file = setup_logging(SimpleNamespace(DUTUI_LOG_DIR=None, DUTUI_LOG_LEVEL="INFO"))

    root = logging.getLogger()
    assert log_file is None
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_with_file(tmp_path: Path):
    settings = SimpleNamespace(
        DUTUI_LOG_DIR=tmp_path / "logs",
        DUTUI_LOG_LEVEL="WARNING",
        DUTUI_LOG_BACKUP_COUNT=3,
    )

    log_file = setup_logging(settings, level="debug")

    assert log_file == (tmp_path / "logs" / "dutui.log").resolve()
    assert log_file.parent.is_dir()
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 3


def test_setup_logging_is_idempotent():
    settings = SimpleNamespace(DUTUI_LOG_DIR=None, DUTUI_LOG_LEVEL="WARNING")
    setup_logging(settings)
    setup_logging(settings)
    assert len(logging.getLogger().handlers) == 1

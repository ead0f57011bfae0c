"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import logging_setup


def _restore(root: logging.Logger, handlers, level) -> None:
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_init_logging_without_file(monkeypatch) -> None:
    monkeypatch.delenv("SORTVIZ_LOG_FILE", raising=False)
    monkeypatch.setenv("SORTVIZ_LOG_LEVEL", "debug")
    root = logging.getLogger()
    original_handlers, original_level = list(root.handlers), root.level
    root.handlers.clear()
    try:
        assert logging_setup.init_logging() is None
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        logging_setup.init_logging()
        assert len(root.handlers) == 1
    finally:
        _restore(root, original_handlers, original_level)


def test_init_logging_creates_file_handler(monkeypatch, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "sortviz.log"
    monkeypatch.setenv("SORTVIZ_LOG_FILE", str(log_path))
    root = logging.getLogger()
    original_handlers, original_level = list(root.handlers), root.level
    root.handlers.clear()
    try:
        assert logging_setup.init_logging() == log_path
        assert log_path.parent.is_dir()
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    finally:
        _restore(root, original_handlers, original_level)


def test_init_logging_invalid_level_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SORTVIZ_LOG_FILE", raising=False)
    monkeypatch.setenv("SORTVIZ_LOG_LEVEL", "notalevel")
    root = logging.getLogger()
    original_handlers, original_level = list(root.handlers), root.level
    root.handlers.clear()
    try:
        logging_setup.init_logging()
        assert root.level == logging.INFO
    finally:
        _restore(root, original_handlers, original_level)


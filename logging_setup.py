"""Logging setup for the sorting visualizer."""

import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
from typing import Optional


def _log_file_from_env() -> Optional[Path]:
    raw = os.getenv("SORTVIZ_LOG_FILE")
    return Path(raw) if raw else None


def init_logging(app_name: str = "sortviz") -> Optional[Path]:
    """Initialize root logging; return the log file path when file logging is on."""
    level_name = os.getenv("SORTVIZ_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger()
    logger.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"
    )

    if not any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    ):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    log_path = _log_file_from_env()
    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=2_000_000,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError:
            logging.getLogger(app_name).exception("Cannot open log file %s", log_path)
            log_path = None
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
                logger.addHandler(file_handler)

    logging.getLogger(app_name).info(
        "Logging initialized at level %s", logging.getLevelName(level)
    )
    return log_path

"""Application logger with a rotating file handler."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.settings import LOG_PATH

ROOT_LOGGER = "focusly"


def ensure_logger(log_path: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        target = Path(log_path or LOG_PATH)
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(target, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the ``focusly`` logger, e.g. ``focusly.tasks``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def read_log_tail(log_path: Optional[Path] = None, *, lines: int = 50) -> str:
    target = Path(log_path or LOG_PATH)
    if not target.exists():
        return ""
    try:
        content = target.read_text(encoding="utf-8").splitlines()
    except OSError:
        return ""
    return "\n".join(content[-lines:])


__all__ = ["ROOT_LOGGER", "ensure_logger", "get_logger", "read_log_tail"]

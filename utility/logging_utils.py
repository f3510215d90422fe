# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Updated: 2026-01-20
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog

BASE_LOGGER_NAME = "kb_rag"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(log_color)s%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(reset)s %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "y")


def _console_handler() -> logging.Handler:
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT, log_colors=LEVEL_COLORS)
    )
    return handler


def _file_handler() -> Optional[logging.Handler]:
    """Rotating file handler (tailed by the UI Logs tab), or None when KB_LOG_TO_FILE is off."""
    if not _env_flag("KB_LOG_TO_FILE", "1"):
        return None

    log_path = Path(os.getenv("KB_LOG_FILE", "./logs/kbragdev.log"))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=int(os.getenv("KB_LOG_MAX_BYTES", str(5 * 1024 * 1024))),
        backupCount=int(os.getenv("KB_LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _create_logger(full_name: str) -> logging.Logger:
    logger = logging.getLogger(full_name)
    if logger.handlers:
        return logger

    logger.addHandler(_console_handler())
    file_handler = _file_handler()
    if file_handler is not None:
        logger.addHandler(file_handler)

    level_name = os.getenv("KB_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the kb_rag namespace, e.g. kb_rag.health.StoreHealth."""
    return _create_logger(f"{BASE_LOGGER_NAME}.{name}" if name else BASE_LOGGER_NAME)


def get_class_logger(cls: type) -> logging.Logger:
    """Logger named <base>.<module>.<class>, e.g. kb_rag.services.KBQueryService.KBQueryService."""
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    return _create_logger(f"{BASE_LOGGER_NAME}.{module}.{classname}")

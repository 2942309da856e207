from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

from urltop.settings import read_env_file

logger.remove()

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{function}:{line} - {message}"

LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _read_env_value(key: str, default: str = "") -> str:
    v = os.getenv(key)
    if v is not None:
        return v
    return read_env_file(Path.cwd()).get(key, default)


def _normalize_level() -> str:
    level = _read_env_value("LOG_LEVEL", "INFO").upper().strip()
    return level if level in LEVELS else "INFO"


# console output goes to stderr
logger.add(
    sys.stderr,
    format=CONSOLE_FORMAT,
    level=_normalize_level(),
    colorize=True,
    backtrace=False,
    diagnose=False,
)

_log_dir = _read_env_value("URLTOP_LOG_DIR", "").strip()
if _log_dir:
    LOG_DIR = Path(_log_dir)
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(LOG_DIR / "urltop_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="14 days",
        compression="zip",
        level="DEBUG",
        format=FILE_FORMAT,
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )

__all__ = ["logger"]

"""Structured logging configuration with JSON output and rotation."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

from .config import BaseConfig

ROOT_LOGGER_NAME = "budgetflow"


class JSONFormatter(logging.Formatter):
    """One JSON object per line with the source location and any ``extra`` fields."""

    _RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        extra = {key: value for key, value in vars(record).items() if key not in self._RESERVED}
        if extra:
            entry["extra"] = extra
        if record.exc_info and record.exc_info[0] is not None:
            entry["error"] = record.exc_info[0].__name__
            entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(config: BaseConfig) -> logging.Logger:
    """Configure console logging plus a rotating JSON log file.

    Args:
        config: Application configuration with DATA_DIR and DEV_MODE

    Returns:
        Configured package logger
    """
    logs_dir = Path(config.DATA_DIR) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG if config.DEV_MODE else logging.INFO)

    # Remove existing handlers to avoid duplicates when the app is rebuilt
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if config.DEV_MODE else logging.WARNING)

    if config.DEV_MODE:
        console_format = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
    else:
        console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    console_handler.setFormatter(
        logging.Formatter(
            fmt=console_format,
            datefmt="%H:%M:%S" if config.DEV_MODE else "%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    log_file = logs_dir / config.LOG_FILENAME
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(file_handler)

    root_logger.info(
        "Logging initialized",
        extra={
            "dev_mode": config.DEV_MODE,
            "log_file": str(log_file),
        },
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Logger name (usually __name__)
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from budgetflow.config import BaseConfig
from budgetflow.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("BUDGETFLOW_DATA_DIR", str(tmp_path))
    return BaseConfig()


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["source"] == "test_module.test_function:42"
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["error"] == "ValueError"
    assert "ValueError: Test error" in log_data["traceback"]


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(strategy="avalanche", months=31)))
    assert log_data["extra"] == {"strategy": "avalanche", "months": 31}


def test_setup_logging(config, tmp_path):
    """Logging setup attaches console + rotating JSON file handlers."""
    logger = setup_logging(config)

    assert logger.name == "budgetflow"
    assert len(logger.handlers) == 2

    log_file = tmp_path / "logs" / "budgetflow.log"
    assert log_file.exists()

    logger.warning("Test warning message")
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 2
    for line in lines:
        entry = json.loads(line)
        assert {"timestamp", "level", "message"} <= set(entry)


def test_setup_logging_is_idempotent(config):
    setup_logging(config)
    logger = setup_logging(config)
    assert len(logger.handlers) == 2


def test_get_logger():
    assert get_logger("module1").name == "budgetflow.module1"
    assert get_logger("budgetflow.services.debts").name == "budgetflow.services.debts"
    assert get_logger("module1") is not get_logger("module2")


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(config, dev_mode):
    """Console threshold follows dev mode."""
    config.DEV_MODE = dev_mode
    logger = setup_logging(config)

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )

    assert console_handler.level == (logging.INFO if dev_mode else logging.WARNING)

"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from budgetbook.config import BaseConfig
from budgetbook.logging_config import LOGGER_NAME, JSONFormatter, get_logger, setup_logging


@pytest.fixture
def restore_package_logger():
    """Detach whatever handlers setup_logging installs once the test is done."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def _record(**overrides) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=overrides.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=overrides.pop("msg", "Test message"),
        args=(),
        exc_info=overrides.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in overrides.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    """JSONFormatter emits the standard fields."""
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "test.logger"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    """JSONFormatter includes exception details."""
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(
        JSONFormatter().format(_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info))
    )

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_collects_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(record_id="abc", amount=12.5)))

    assert log_data["extra"] == {"record_id": "abc", "amount": 12.5}


def test_setup_logging(restore_package_logger):
    """setup_logging writes JSON lines into the data directory."""
    config = BaseConfig()

    logger = setup_logging(config)

    assert logger.name == "budgetbook"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = config.DATA_DIR / "logs" / "budgetbook.log"
    assert log_file.exists()

    get_logger("services.budget").info("Expense added", extra={"record_id": "r1"})
    for handler in logger.handlers:
        handler.flush()

    entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["message"] == "Expense added"
    assert entries[-1]["logger"] == "budgetbook.services.budget"
    assert entries[-1]["extra"]["record_id"] == "r1"


def test_setup_logging_twice_does_not_duplicate_handlers(restore_package_logger):
    config = BaseConfig()

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    """get_logger returns loggers under the package namespace."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")

    assert logger1.name == "budgetbook.module1"
    assert logger2.name == "budgetbook.module2"
    assert logger1 is not logger2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(monkeypatch, restore_package_logger, dev_mode):
    """Console logging level follows dev mode."""
    monkeypatch.setenv("BUDGETBOOK_DEV_MODE", "1" if dev_mode else "0")

    logger = setup_logging(BaseConfig())

    console_handler = next(
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, logging.handlers.RotatingFileHandler)
    )
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level

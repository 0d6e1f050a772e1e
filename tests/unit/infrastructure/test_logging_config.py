"""Tests for src/infrastructure/logging_config.py."""

import json
import logging
import sys

import pytest

from src.infrastructure.config import Settings
from src.infrastructure.logging_config import JSONFormatter, configure_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("src.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# --- JSONFormatter ---

def test_json_formatter_emits_core_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "src.test"
    assert data["message"] == "hello"
    assert data["timestamp"].endswith("+00:00")


def test_json_formatter_includes_extra_fields():
    data = json.loads(JSONFormatter().format(_record(resource_id="abc", dropped=2)))
    assert data["resource_id"] == "abc"
    assert data["dropped"] == 2


def test_json_formatter_stringifies_unserialisable_extras():
    data = json.loads(JSONFormatter().format(_record(when={1, 2})))
    assert isinstance(data["when"], str)


def test_json_formatter_skips_reserved_attributes():
    data = json.loads(JSONFormatter().format(_record()))
    assert "pathname" not in data
    assert "args" not in data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "src.test", logging.ERROR, __file__, 10, "failed", None, sys.exc_info()
        )
    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in data["exception"]


# --- configure_logging ---

def test_configure_logging_installs_single_handler(restore_root_logger):
    settings = Settings(log_level="DEBUG", log_format="json")
    configure_logging(settings)
    configure_logging(settings)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert root.level == logging.DEBUG


def test_configure_logging_plain_format(restore_root_logger):
    configure_logging(Settings(log_format="plain"))
    assert not isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)


def test_configure_logging_quiets_sqlalchemy(restore_root_logger):
    configure_logging(Settings(log_level="DEBUG"))
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

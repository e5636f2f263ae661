import logging

import pytest

from blogcraft.utils.logging_helper import get_logger, resolve_level, set_level


def test_logger_is_named_after_calling_module(tmp_path):
    log = get_logger(log_dir=tmp_path)
    assert log.name == "blogcraft.test_logging_helper"
    assert get_logger(log_dir=tmp_path) is log
    assert len(log.handlers) == 2
    assert log.propagate is False


def test_resolve_level_from_names_numbers_and_env(monkeypatch):
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    monkeypatch.setenv("BLOGCRAFT_LOG_LEVEL", "error")
    assert resolve_level() == logging.ERROR
    monkeypatch.delenv("BLOGCRAFT_LOG_LEVEL")
    assert resolve_level() == logging.INFO


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_set_level_relevels_existing_loggers_and_handlers(tmp_path, monkeypatch):
    monkeypatch.delenv("BLOGCRAFT_LOG_LEVEL", raising=False)
    log = get_logger(log_dir=tmp_path)
    try:
        set_level("DEBUG")
        assert log.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in log.handlers)
    finally:
        set_level(logging.INFO)
    assert log.level == logging.INFO

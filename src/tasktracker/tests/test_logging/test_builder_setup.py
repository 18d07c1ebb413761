# src/tasktracker/tests/test_logging/test_builder_setup.py
import logging

from tasktracker.config import get_settings
from tasktracker.core.logging.builder import make_dict_config, setup_logging


# Minimal Settings-like object
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # set per test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"
    ENABLE_SQL_LOGGING = False


def test_make_dict_config_with_files(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert set(cfg["filters"]) == {"operation_id", "redact"}
    assert cfg["handlers"]["file"]["filters"] == ["operation_id", "redact"]
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"


def test_make_dict_config_stdout_only(tmp_path):
    settings = DummySettings()
    settings.LOG_TO_STDOUT = True
    settings.LOG_DIR = tmp_path
    settings.ENABLE_SQL_LOGGING = True
    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_text_format_uses_standard_formatter():
    settings = DummySettings()
    settings.LOG_FORMAT = "text"
    settings.LOG_TO_STDOUT = True
    cfg = make_dict_config(settings)
    assert cfg["handlers"]["console"]["formatter"] == "standard"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()
    try:
        setup_logging(settings)
        assert settings.LOG_DIR.exists()
        assert logging.getLogger().handlers
    finally:
        # back to the session-wide configuration
        setup_logging(get_settings())

import logging
import sys

import pytest
from pydantic import ValidationError

from column_comparer.core.config import Settings, get_settings, reset_settings
from column_comparer.utils.logging_setup import setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_DIR", "CSV_SEPARATOR", "DEFAULT_PROVIDER"):
        monkeypatch.delenv(f"COLUMN_COMPARER_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_DIR is None
    assert settings.CSV_SEPARATOR == ","
    assert settings.DEFAULT_PROVIDER == "openpyxl"


def test_environment_overrides(clean_env):
    clean_env.setenv("COLUMN_COMPARER_CSV_SEPARATOR", ";")
    clean_env.setenv("COLUMN_COMPARER_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.CSV_SEPARATOR == ";"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("name, value", [
    ("CSV_SEPARATOR", ";;"),
    ("LOG_LEVEL", "LOUD"),
])
def test_invalid_values(clean_env, name, value):
    clean_env.setenv(f"COLUMN_COMPARER_{name}", value)

    with pytest.raises(ValidationError):
        Settings()


def test_only_runtime_settings_are_declared():
    assert set(Settings.model_fields) == {
        "LOG_LEVEL", "LOG_DIR", "CSV_SEPARATOR", "DEFAULT_PROVIDER",
    }


def test_get_settings_is_cached_until_reset(clean_env):
    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first


def test_console_logging_goes_to_stderr():
    logger = setup_logging(log_level="INFO")

    stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].stream is sys.stderr
    assert stream_handlers[0].level == logging.INFO


def test_file_logging_when_directory_given(tmp_path):
    logger = setup_logging(log_level="WARNING", log_dir=tmp_path / "logs", component="test")

    logging.getLogger("column_comparer.test").debug("detail message")
    for handler in logger.handlers:
        handler.flush()

    log_files = list((tmp_path / "logs").glob("test_*.log"))
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "detail message" in content
    assert "\033[" not in content
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()

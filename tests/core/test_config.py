"""Unit tests for src/core/config.py and src/core/logging_config.py"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from src.core.config import BASE_DIR_ENV_VAR, Settings
from src.core.logging_config import STORAGE_LOGGER_NAME, configure_logging
from src.storage.save_store import SaveFileRepository


@pytest.fixture
def error_log_handler(settings: Settings) -> Generator[logging.Handler, None, None]:
    """Attach the error log handler and make sure it is removed again after the test"""
    handler = configure_logging(settings)
    try:
        yield handler
    finally:
        logging.getLogger(STORAGE_LOGGER_NAME).removeHandler(handler)
        handler.close()


def test_paths_below_base_dir(tmp_path: Path) -> None:
    settings = Settings(base_dir=tmp_path)
    assert settings.saves_dir == tmp_path / "Saves"
    assert settings.statistics_path == tmp_path / "top-scores.json"
    assert settings.error_log_path == tmp_path / "error.log"


def test_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BASE_DIR_ENV_VAR, str(tmp_path))
    assert Settings.from_env().base_dir == tmp_path


def test_from_env_defaults_to_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(BASE_DIR_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert Settings.from_env().base_dir == tmp_path


def test_configure_logging_is_idempotent(
    settings: Settings, error_log_handler: logging.Handler
) -> None:
    assert configure_logging(settings) is error_log_handler
    handlers = logging.getLogger(STORAGE_LOGGER_NAME).handlers
    assert handlers.count(error_log_handler) == 1


def test_skipped_save_lands_in_error_log(
    settings: Settings, error_log_handler: logging.Handler
) -> None:
    """One tab separated line per broken file: timestamp, path, cause, message"""
    settings.saves_dir.mkdir(parents=True)
    broken = settings.saves_dir / "broken.json"
    broken.write_text("{{{", encoding="utf-8")

    assert SaveFileRepository(settings).load_all() == []
    error_log_handler.flush()

    (line,) = settings.error_log_path.read_text(encoding="utf-8").splitlines()
    timestamp, path, cause, message = line.split("\t", 3)
    assert timestamp
    assert path == str(broken)
    assert cause == "JSON_ERROR"
    assert message

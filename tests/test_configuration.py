# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler
from yaml import dump, safe_load

from tsodata.initialize import initialize
from tsodata.repository.configuration import CONFIGURATION_REPO
from tsodata.root_logger import configure_logging, get_logger


def test_missing_file_uses_defaults(config_path: Path) -> None:
    config = CONFIGURATION_REPO.get_config()

    assert config == {
        "base_uri": None,
        "default_format": None,
        "default_top": None,
        "log_level": "WARNING",
    }
    assert not config_path.exists()


def test_missing_keys_are_back_filled(config_path: Path) -> None:
    config_path.write_text(dump({"base_uri": "http://test.com"}))

    config = CONFIGURATION_REPO.get_config()
    CONFIGURATION_REPO.flush()

    assert config["base_uri"] == "http://test.com"
    assert config["log_level"] == "WARNING"
    assert safe_load(config_path.read_text())["default_top"] is None


def test_get_config_returns_copy(config_path: Path) -> None:
    config = CONFIGURATION_REPO.get_config()
    config["base_uri"] = "http://elsewhere"

    assert CONFIGURATION_REPO.get_config()["base_uri"] is None


def test_update_and_flush(config_path: Path) -> None:
    CONFIGURATION_REPO.update_config(default_top=10, log_level="debug")
    CONFIGURATION_REPO.flush()

    saved = safe_load(config_path.read_text())
    assert saved["default_top"] == 10
    assert saved["log_level"] == "DEBUG"

    CONFIGURATION_REPO.update_config(remove_default_top=True)
    CONFIGURATION_REPO.flush()
    assert safe_load(config_path.read_text())["default_top"] is None


def test_initialize_writes_default_file(
    config_path: Path, restore_logger: logging.Logger
) -> None:
    initialize()

    assert safe_load(config_path.read_text())["log_level"] == "WARNING"
    assert restore_logger.level == logging.WARNING


def test_configure_logging_attaches_rich_handler(
    restore_logger: logging.Logger,
) -> None:
    logger = configure_logging("info")

    assert logger is restore_logger
    assert logger.level == logging.INFO
    assert any(isinstance(handler, RichHandler) for handler in logger.handlers)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("chatty")


def test_get_logger_names_children() -> None:
    assert get_logger("tso").name == "tsodata.tso"
    assert get_logger().name == "tsodata"

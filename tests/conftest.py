# SPDX-License-Identifier: MIT

import logging
from collections.abc import Generator
from pathlib import Path

from pytest import MonkeyPatch, fixture

from tsodata import configuration
from tsodata.query.filter import FilterClause, where
from tsodata.repository.configuration import CONFIGURATION_REPO
from tsodata.root_logger import LOGGER_NAME
from tsodata.tso import Tso


@fixture
def query() -> Tso:
    return Tso("http://test.com/Customers")


@fixture
def customer_5() -> FilterClause:
    return where("CustomerId").eq(5)


@fixture
def customer_6() -> FilterClause:
    return where("CustomerId").eq(6)


@fixture
def config_path(tmp_path: Path, monkeypatch: MonkeyPatch) -> Generator[Path, None, None]:
    path = tmp_path / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    CONFIGURATION_REPO.reload()
    yield path
    CONFIGURATION_REPO.reload()


@fixture
def restore_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

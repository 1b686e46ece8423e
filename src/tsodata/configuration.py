# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "tsodata"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    base_uri: Optional[str]
    default_format: Optional[str]
    default_top: Optional[int]
    log_level: str


def default_configuration() -> Configuration:
    return {
        "base_uri": None,
        "default_format": None,
        "default_top": None,
        "log_level": "WARNING",
    }

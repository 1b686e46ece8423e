# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tsodata import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not configuration.APP_CONFIG_PATH.is_file():
            # Config doesn't exist yet, use defaults
            self._config = configuration.default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            self._config = configuration.default_configuration()
            self.is_dirty = True
            return

        # Back-fill keys added after the file was first written
        for key, value in configuration.default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        base_uri: Optional[str] = None,
        remove_base_uri: bool = False,
        default_format: Optional[str] = None,
        remove_default_format: bool = False,
        default_top: Optional[int] = None,
        remove_default_top: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if base_uri is not None:
            self.config["base_uri"] = base_uri
        if remove_base_uri:
            self.config["base_uri"] = None
        if default_format is not None:
            self.config["default_format"] = default_format
        if remove_default_format:
            self.config["default_format"] = None
        if default_top is not None:
            self.config["default_top"] = default_top
        if remove_default_top:
            self.config["default_top"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()

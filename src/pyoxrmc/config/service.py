# -*- encoding: utf-8 -*-
# @File   : service.py
# @Time   : 2024/10/22 01:48:30
# @Author : Kariko Lin

"""
The whole store: every `*.ini` under the layer's app-data folder.

Lookups fall back to the default application
(`OpenXR-MotionCompensation.ini`) when an application does not
set a key itself. Nothing here raises on bad files; see the logs.

Build one instance at startup and hand it to whoever needs it.
"""

import logging
from collections.abc import Mapping
from os import listdir
from os.path import isfile, join, splitext
from typing import Iterator

from ..consts import (
    DEFAULT_APP, INI_SUFFIX, config_file_path, default_app_data_path
)
from .configset import ConfigSet, LoadResult
from .entry import ConfigEntry, ProfileWriter
from .item import ConfigItem

__all__ = ['ConfigService']


class ConfigService(Mapping[str, ConfigSet]):
    def __init__(
        self, root: str | None = None, default_app: str = DEFAULT_APP, *,
        writer: ProfileWriter | None = None
    ) -> None:
        self.root = root if root is not None else default_app_data_path()
        self.default_app = default_app
        self._writer = writer
        self.__sets: dict[str, ConfigSet] = {}
        self.scan_and_parse()

    def __getitem__(self, key: str) -> ConfigSet:
        return self.__sets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__sets))

    def __len__(self) -> int:
        return len(self.__sets)

    def __repr__(self) -> str:
        return '<ConfigService %s { .cnt = %d }>' % (self.root, len(self))

    def scan_and_parse(self) -> LoadResult:
        """Forget everything in memory and read the folder again.

        Unsaved changes are dropped.
        """
        self.__sets.clear()
        try:
            files = sorted(
                i for i in listdir(self.root)
                if splitext(i)[1].lower() == INI_SUFFIX
                and isfile(join(self.root, i)))
        except OSError as e:
            logging.error(f'unable to scan config folder {self.root}: {e}')
            return LoadResult(False, str(e))

        if not files:
            logging.warning(f'no config file found at: {self.root}')
        for i in files:
            application = splitext(i)[0]
            if application in self.__sets:
                # `App.ini` and `App.INI` side by side.
                logging.warning(f'ignoring {i}: {application} already loaded')
                continue
            configset = ConfigSet(
                application, self.root,
                writer=self._writer, filename=join(self.root, i))
            if not configset.load_result.ok:
                logging.error(
                    f'unable to parse config file of {application}: '
                    f'{configset.load_result.error}')
            self.__sets[application] = configset
        return LoadResult(True)

    def list_application_names(self) -> list[str]:
        """All applications but the default one.

        Empty if there is no default, since nothing could
        fall back then.
        """
        if self.default_app not in self.__sets:
            logging.error(f'No default config file found at: {self.root}')
            return []
        return [i for i in self if i != self.default_app]

    def list_application_items(self) -> list[ConfigItem]:
        return [
            ConfigItem(i, self.default_app)
            for i in self.list_application_names()]

    def get_config_set(self, application: str) -> ConfigSet | None:
        return self.__sets.get(application)

    def _lookup(
        self, application: str, section: str, key: str
    ) -> ConfigEntry | None:
        if (configset := self.__sets.get(application)) is None:
            return None
        if (sect := configset.try_get_section(section)) is None:
            return None
        return sect.try_get_entry(key)

    def try_get_entry(
        self, application: str, section: str, key: str
    ) -> ConfigEntry | None:
        """Resolve a value, the application's own first.

        A value found only on the default application comes back
        as a copy with `is_default` set. `None` if neither has it.
        """
        if (entry := self._lookup(application, section, key)) is not None:
            return entry
        if (entry := self._lookup(self.default_app, section, key)) is not None:
            return entry.copy(is_default=True)
        return None

    def set_entry(
        self, application: str, section: str, key: str, value: str
    ) -> None:
        entry = ConfigEntry(application, section, key, value, modified=True)
        self._upsert_set(application).set_entry(entry)

    def _upsert_set(self, application: str) -> ConfigSet:
        if application not in self.__sets:
            # no file yet, so nothing to parse.
            path = config_file_path(self.root, application)
            if any(i.path == path for i in self.__sets.values()):
                # `app` must not take over the file of `App`.
                path = join(self.root, application + INI_SUFFIX)
            self.__sets[application] = ConfigSet(
                application, self.root, parse=False,
                writer=self._writer, filename=path)
        return self.__sets[application]

    def is_modified(self, application: str) -> bool:
        configset = self.__sets.get(application)
        return configset is not None and configset.is_modified()

    def save_config_set(self, application: str) -> bool:
        if (configset := self.__sets.get(application)) is None:
            logging.error(f'unknown application: {application}')
            return False
        return configset.save()

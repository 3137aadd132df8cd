# -*- encoding: utf-8 -*-
# @File   : section.py
# @Time   : 2024/10/22 00:40:26
# @Author : Kariko Lin

import logging
from collections.abc import Iterable, Mapping
from typing import Iterator

from ..ini import IniPair
from .entry import ConfigEntry, ProfileWriter

__all__ = ['ConfigSection']


class ConfigSection(Mapping[str, ConfigEntry]):
    """Entries of one section of one application, iterated by key name.

    Read-only as a mapping; writes go through `set_entry()`.
    """

    def __init__(self, application: str, name: str) -> None:
        self.application = application
        self.name = name
        self.__entries: dict[str, ConfigEntry] = {}

    def __getitem__(self, key: str) -> ConfigEntry:
        return self.__entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__entries))

    def __len__(self) -> int:
        return len(self.__entries)

    def __repr__(self) -> str:
        return '%s: [%s] { .cnt = %d }' % (
            self.application, self.name, len(self))

    def parse(
        self, pairs: Iterable[IniPair | tuple[str, str]]
    ) -> list[ConfigEntry]:
        """Load raw pairs as clean entries.

        The first occurrence of a key wins. Later ones are logged
        and dropped; they are returned for whoever cares.
        """
        rejected = []
        for key, value, *_ in pairs:
            entry = ConfigEntry(self.application, self.name, key, value)
            if key in self.__entries:
                logging.error(f'found duplicate entry: {entry}')
                rejected.append(entry)
                continue
            self.__entries[key] = entry
        return rejected

    def try_get_entry(self, key: str) -> ConfigEntry | None:
        return self.__entries.get(key)

    def set_entry(self, entry: ConfigEntry) -> None:
        if (entry.application, entry.section) != (self.application, self.name):
            raise ValueError(
                f'{entry!r} does not belong to {self.application}: '
                f'[{self.name}]')
        self.__entries[entry.key] = entry

    def is_modified(self) -> bool:
        return any(i.modified for i in self.__entries.values())

    def save(self, file: str, writer: ProfileWriter | None = None) -> bool:
        # no short circuit: every entry gets its chance.
        results = [i.save(file, writer) for i in self.values()]
        return all(results)

# -*- encoding: utf-8 -*-
# @File   : configset.py
# @Time   : 2024/10/22 01:05:44
# @Author : Kariko Lin

"""One application's whole INI file."""

import warnings
from collections.abc import Mapping
from typing import Iterator, NamedTuple

from ..consts import config_file_path
from ..ini import IniParser, InvalidIniRecord
from .entry import ConfigEntry, ProfileWriter
from .section import ConfigSection

__all__ = ['LoadResult', 'ConfigSet']


class LoadResult(NamedTuple):
    """Outcome of reading files from disk. Logging is left to the caller."""
    ok: bool
    error: str | None = None


class ConfigSet(Mapping[str, ConfigSection]):
    def __init__(
        self, application: str, root: str, *,
        parse: bool = True, writer: ProfileWriter | None = None,
        filename: str | None = None
    ) -> None:
        """Init the set of `{root}/{application}.ini`.

        `filename` pins the backing file (as found by a folder scan);
        otherwise it is looked up once, here. With `parse=True` the
        file is read right away; check `self.load_result` for how
        that went.
        """
        self.application = application
        self.root = root
        self.path = filename or config_file_path(root, application)
        self._writer = writer
        self.__sections: dict[str, ConfigSection] = {}
        self.load_result = LoadResult(True)
        if parse:
            self.load_result = self.parse_config_file()

    def __getitem__(self, key: str) -> ConfigSection:
        return self.__sections[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.__sections))

    def __len__(self) -> int:
        return len(self.__sections)

    def __repr__(self) -> str:
        return '<ConfigSet %s { .cnt = %d }>' % (self.application, len(self))

    def parse_config_file(self) -> LoadResult:
        """(Re)load sections from the backing file.

        On failure the set is left empty rather than half filled.
        """
        self.__sections.clear()
        try:
            doc = IniParser(self.path).read()
        except (OSError, InvalidIniRecord) as e:
            return LoadResult(False, f'{type(e).__name__}: {e}')

        if doc.header:
            warnings.warn(
                f'{self.path}: ignoring {len(doc.header)} pair(s) '
                'outside of any section.')
        for name, pairs in doc.items():
            section = self._upsert_section(name)
            section.parse(pairs)
        return LoadResult(True)

    def _upsert_section(self, name: str) -> ConfigSection:
        return self.__sections.setdefault(
            name, ConfigSection(self.application, name))

    def try_get_section(self, name: str) -> ConfigSection | None:
        return self.__sections.get(name)

    def set_entry(self, entry: ConfigEntry) -> None:
        if entry.application != self.application:
            raise ValueError(f'{entry!r} does not belong to {self!r}')
        self._upsert_section(entry.section).set_entry(entry)

    def is_modified(self) -> bool:
        return any(i.is_modified() for i in self.__sections.values())

    def save(self, writer: ProfileWriter | None = None) -> bool:
        writer = writer or self._writer
        results = [i.save(self.path, writer) for i in self.values()]
        return all(results)

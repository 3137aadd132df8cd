# -*- encoding: utf-8 -*-
# @File   : entry.py
# @Time   : 2024/10/22 00:12:51
# @Author : Kariko Lin

import logging
from typing import Callable, TypeAlias

from ..ini import write_profile_string

__all__ = ['ConfigEntry', 'ProfileWriter']

# (section, key, value, filename) -> non-zero on success.
ProfileWriter: TypeAlias = Callable[[str, str, str, str], int]


class ConfigEntry:
    """One `key=value` of one application's section.

    Identity is `(application, section, key)`, which never changes.
    Assigning `value` marks the entry modified until it gets saved.
    """

    def __init__(
        self, application: str, section: str, key: str, value: str, *,
        modified: bool = False, is_default: bool = False
    ) -> None:
        self.__application = application
        self.__section = section
        self.__key = key
        self.__value = value
        self.modified = modified
        # True when the value is inherited from the default application.
        self.is_default = is_default

    @property
    def application(self) -> str:
        return self.__application

    @property
    def section(self) -> str:
        return self.__section

    @property
    def key(self) -> str:
        return self.__key

    @property
    def value(self) -> str:
        return self.__value

    @value.setter
    def value(self, new_value: str) -> None:
        self.set_value(new_value)

    def set_value(self, new_value: str) -> None:
        # re-setting the same value still counts.
        self.__value = new_value
        self.modified = True

    def copy(self, *, is_default: bool | None = None) -> 'ConfigEntry':
        return ConfigEntry(
            self.__application, self.__section, self.__key, self.__value,
            modified=self.modified,
            is_default=self.is_default if is_default is None else is_default)

    def save(self, file: str, writer: ProfileWriter | None = None) -> bool:
        """Write the entry into `file`, its application's INI, if modified.

        Failures are logged and reported as `False`, never raised;
        the entry then stays modified.
        """
        if not self.modified:
            return True
        try:
            ok = (writer or write_profile_string)(
                self.__section, self.__key, self.__value, file)
        except OSError as e:
            logging.debug(f'{self!r}: {e}')
            ok = 0
        if ok:
            self.modified = False
            return True
        logging.error(f'unable to write {self} into file: {file}')
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigEntry):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self) -> int:
        return hash(self._identity)

    @property
    def _identity(self) -> tuple[str, str, str]:
        return self.__application, self.__section, self.__key

    def __str__(self) -> str:
        return (f'{self.__application}: [{self.__section}] '
                f'{self.__key} = {self.__value}')

    def __repr__(self) -> str:
        flags = ''.join([
            '*' if self.modified else '',
            ' (default)' if self.is_default else ''])
        return f'<ConfigEntry {self}{flags}>'

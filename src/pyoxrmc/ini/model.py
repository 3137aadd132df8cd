# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/21 21:31:05
# @Author : Kariko Lin

"""
Raw INI structure, as the reader sees it.

Nothing here is merged or de-duplicated: a section keeps every
`key=value` line it met, in file order, so that the layer above
can decide what a duplicate key means.
"""

from collections.abc import Mapping
from typing import Iterator, NamedTuple


class IniPair(NamedTuple):
    key: str
    value: str
    lineno: int = 0


class IniRawSection(list[IniPair]):
    """小节里的原始键值对列表（含重复键）。"""

    def __init__(self, name: str, pairs: list[IniPair] | None = None) -> None:
        super().__init__(pairs or ())
        self.name = name

    def add(self, key: str, value: str, lineno: int = 0) -> None:
        self.append(IniPair(key, value, lineno))

    def keys(self) -> list[str]:
        return [i.key for i in self]

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self))


class IniDocument(Mapping[str, IniRawSection]):
    """INI 文件表示。重复声明的小节会合并到第一次声明的那个里面。"""

    def __init__(self) -> None:
        # section declaration is impossible to contain ']'.
        self.__header = IniRawSection('; header')
        self.__sections: dict[str, IniRawSection] = {}

    @property
    def header(self) -> IniRawSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return self.__header

    def __getitem__(self, key: str) -> IniRawSection:
        return self.__sections[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def setdefault(self, section: str) -> IniRawSection:
        if section not in self.__sections:
            self.__sections[section] = IniRawSection(section)
        return self.__sections[section]

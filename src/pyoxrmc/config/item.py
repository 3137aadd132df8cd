# -*- encoding: utf-8 -*-
# @File   : item.py
# @Time   : 2024/10/22 02:20:09
# @Author : Kariko Lin

from ..consts import DEFAULT_APP, OPENCOMPOSITE_PREFIX


class ConfigItem:
    """An application as a list shows it. Compares by `name` only."""

    def __init__(self, name: str, default_app: str = DEFAULT_APP) -> None:
        self.name = name
        self.display_name = self.get_display_name(name, default_app)

    @staticmethod
    def get_display_name(name: str, default_app: str = DEFAULT_APP) -> str:
        if name == default_app:
            return 'Default'
        if name.startswith(OPENCOMPOSITE_PREFIX):
            return name[len(OPENCOMPOSITE_PREFIX):] + ' (OC)'
        return name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigItem):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f'ConfigItem({self.name!r})'

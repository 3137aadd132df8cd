# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/21 21:02:37
# @Author : Kariko Lin

import logging

from .config import (
    ConfigEntry, ConfigSection, ConfigSet, ConfigService, ConfigItem,
    LoadResult
)
from .consts import DEFAULT_APP, default_app_data_path
from .ini import IniDocument, IniParser, InvalidIniRecord, write_profile_string

__all__ = [
    'ConfigEntry', 'ConfigSection', 'ConfigSet', 'ConfigService',
    'ConfigItem', 'LoadResult',
    'DEFAULT_APP', 'default_app_data_path',
    'IniDocument', 'IniParser', 'InvalidIniRecord', 'write_profile_string'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

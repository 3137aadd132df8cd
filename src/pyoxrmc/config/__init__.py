# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/22 02:31:55
# @Author : Kariko Lin

from .entry import ConfigEntry, ProfileWriter
from .section import ConfigSection
from .configset import ConfigSet, LoadResult
from .service import ConfigService
from .item import ConfigItem

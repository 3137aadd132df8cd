# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/21 22:40:18
# @Author : Kariko Lin

from .model import IniPair, IniRawSection, IniDocument
from .parser import InvalidIniRecord, IniParser, write_profile_string

# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/21 21:10:40
# @Author : Kariko Lin

from os import environ, listdir
from os.path import expanduser, isfile, join

# the layer's own config file, also the fallback for every application.
DEFAULT_APP = 'OpenXR-MotionCompensation'
OPENCOMPOSITE_PREFIX = 'OpenComposite_'
INI_SUFFIX = '.ini'

CONFIG_DIR_ENV = 'OXRMC_CONFIG_DIR'


def default_app_data_path() -> str:
    """Where the layer keeps its INIs.

    `$OXRMC_CONFIG_DIR` wins when set. Otherwise it is
    `%LOCALAPPDATA%/OpenXR-MotionCompensation` on Windows, and
    `$XDG_DATA_HOME/OpenXR-MotionCompensation` anywhere else.
    """
    if override := environ.get(CONFIG_DIR_ENV):
        return override
    if local := environ.get('LOCALAPPDATA'):
        return join(local, DEFAULT_APP)
    data_home = environ.get('XDG_DATA_HOME') or expanduser('~/.local/share')
    return join(data_home, DEFAULT_APP)


def config_file_path(root: str, application: str) -> str:
    """The INI backing `application` under `root`.

    `{application}.ini` itself wins. Failing that, an existing file
    whose name differs only in case (`App.INI`) is reused, so the
    layer's and ours never drift apart on case-sensitive file systems.
    """
    exact = join(root, application + INI_SUFFIX)
    if isfile(exact):
        return exact
    wanted = (application + INI_SUFFIX).lower()
    try:
        for i in listdir(root):
            if i.lower() == wanted and isfile(join(root, i)):
                return join(root, i)
    except OSError:
        pass  # no root yet; the writer will tell.
    return exact

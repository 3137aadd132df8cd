# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/21 22:14:37
# @Author : Kariko Lin

"""Read INIs into `IniDocument`, and write single keys back in place.

The writer never regenerates a whole file. It behaves like the Win32
`WritePrivateProfileString()` the layer itself relies on:
find the (first) section, then the key, both case-insensitively,
and replace just that line. Anything it does not understand is kept.

Two things follow from copying Win32 rather than the reader:

- the reader keeps `X` and `x` apart, the writer does not. Saving `x`
  rewrites the first of `X=1` / `x=2`, so `X` is gone from the file.
- the reader cuts a value at its first `;` (inline comment), the writer
  stores the value whole. A value containing `;` does not survive
  a save-then-read.
"""

import logging
import os
from codecs import BOM_UTF8
from io import StringIO, TextIOBase
from os import PathLike
from os.path import abspath, dirname, exists
from shutil import copymode
from tempfile import mkstemp

import chardet

from ..abstract import FileHandler
from .model import IniDocument

__all__ = ['InvalidIniRecord', 'IniParser', 'write_profile_string']

_COMMENTS = (';', '#')


class InvalidIniRecord(Exception):
    """To record errors when reading INI files."""
    def __init__(self, msg: str, lineno: int = 0) -> None:
        super().__init__(msg)
        self.msg = msg
        self.lineno = lineno
        self.filename: str | None = None

    def __str__(self) -> str:
        where = ''.join([
            f'{self.filename}:' if self.filename else '',
            f'{self.lineno}:' if self.lineno else ''])
        return f'{where} {self.msg}' if where else self.msg


def _decode(raw: bytes, encoding: str | None = None) -> tuple[str, str]:
    """Decode file content, returning the text and the codec used."""
    if raw.startswith(BOM_UTF8):
        return raw.decode('utf-8-sig'), 'utf-8-sig'
    encoding = encoding or 'utf-8'
    try:
        return raw.decode(encoding), encoding
    except UnicodeDecodeError:
        pass

    codec = chardet.detect(raw)
    if not codec['encoding'] or codec['confidence'] < 0.8:
        codec = {'encoding': 'utf-8'}
    # fallbacks
    try:
        return raw.decode(codec['encoding']), codec['encoding']
    except (UnicodeDecodeError, LookupError):
        # latin-1 maps every byte, so it would never fail.
        return raw.decode('latin-1'), 'latin-1'


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase, ins: IniDocument | None = None
    ) -> IniDocument:
        """读取解码好的字符串流。

        May raise `InvalidIniRecord` on the first line it cannot make
        sense of: an unterminated `[section` or a line without `=`.
        """
        if ins is None:
            ins = IniDocument()
        this_sect = ins.header
        lineno = 0
        while i := buf.readline():
            lineno += 1
            i = i.strip()
            if not i or i[0] in _COMMENTS:
                continue
            if i[0] == '[':
                if ']' not in i:
                    raise InvalidIniRecord(
                        f'unterminated section header "{i}"', lineno)
                this_sect = ins.setdefault(i[1:i.index(']')].strip())
            elif '=' in i:
                key, val = i.split('=', 1)
                key = key.strip()
                if not key:
                    raise InvalidIniRecord('empty key', lineno)
                this_sect.add(key, val.split(';')[0].strip(), lineno)
            else:
                raise InvalidIniRecord(f'unexpected text "{i}"', lineno)
        return ins

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        May raise `OSError` or `InvalidIniRecord`.
        """
        with open(self.filename, 'rb') as fp:
            text, _ = _decode(fp.read(), self._codec)
        try:
            return self.readstream(StringIO(text))
        except InvalidIniRecord as e:
            e.filename = self.filename
            raise

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def _section_of(line: str) -> str | None:
    line = line.strip()
    if line[:1] != '[' or ']' not in line:
        return None
    return line[1:line.index(']')].strip()


def _key_of(line: str) -> str | None:
    line = line.strip()
    if not line or line[0] in _COMMENTS or '=' not in line:
        return None
    return line.split('=', 1)[0].strip()


def _set_line(
    lines: list[str], section: str, key: str, value: str
) -> list[str]:
    newline = '\r\n' if lines and lines[0].endswith('\r\n') else '\n'
    pair = f'{key}={value}{newline}'
    if lines and not lines[-1].endswith(('\n', '\r')):
        lines[-1] += newline

    start, end = None, len(lines)
    for idx, line in enumerate(lines):
        if (name := _section_of(line)) is None:
            continue
        if start is not None:
            end = idx
            break
        if name.lower() == section.lower():
            start = idx

    if start is None:
        lines.extend([f'[{section}]{newline}', pair])
        return lines

    # append after the last pair, not after trailing blanks and comments.
    last = start
    for idx in range(start + 1, end):
        if (name := _key_of(lines[idx])) is None:
            continue
        if name.lower() == key.lower():
            lines[idx] = pair
            return lines
        last = idx
    lines.insert(last + 1, pair)
    return lines


def write_profile_string(
    section: str, key: str, value: str, filename: str | PathLike[str]
) -> int:
    """Set `key=value` in `[section]` of `filename`, keeping everything else.

    The file is replaced atomically. Returns non-zero on success,
    0 on any failure (which is only logged at debug level here;
    reporting is the caller's business).
    """
    filename = os.fspath(filename)
    encoding = 'utf-8'
    lines: list[str] = []
    try:
        if exists(filename):
            with open(filename, 'rb') as fp:
                text, encoding = _decode(fp.read())
            lines = text.splitlines(keepends=True)
        lines = _set_line(lines, section, key, value)
        data = ''.join(lines).encode(encoding)

        fd, tmp = mkstemp(
            prefix='.oxrmc-', suffix='.tmp', dir=dirname(abspath(filename)))
        try:
            with os.fdopen(fd, 'wb') as fp:
                fp.write(data)
            if exists(filename):
                copymode(filename, tmp)
            os.replace(tmp, filename)
        except OSError:
            if exists(tmp):
                os.remove(tmp)
            raise
    except (OSError, UnicodeError) as e:
        logging.debug(f'writing [{section}] {key} into {filename}: {e}')
        return 0
    return 1

"""Byte-level scanners for GitHub-flavoured table syntax.

Each scanner looks at ``data`` starting at ``offset`` and returns the number
of bytes it matched there, or ``0`` when nothing matches. An offset at or
past the end of the data always yields ``0``.
"""

from __future__ import annotations

import re
from typing import Callable, Union

__all__ = [
    "scan_table_start",
    "scan_table_cell",
    "scan_table_cell_end",
    "scan_table_row_end",
]

BytesLike = Union[bytes, bytearray, memoryview]

_SPACE = rb"[ \t\x0b\x0c]"
_NEWLINE = rb"\r?\n"
_MARKER = _SPACE + rb"*:?-+:?" + _SPACE + rb"*"

# Well-formed UTF-8 sequences of two to four bytes.
_UTF8_MULTIBYTE = (
    rb"[\xc2-\xdf][\x80-\xbf]"
    rb"|\xe0[\xa0-\xbf][\x80-\xbf]"
    rb"|[\xe1-\xec\xee\xef][\x80-\xbf]{2}"
    rb"|\xed[\x80-\x9f][\x80-\xbf]"
    rb"|\xf0[\x90-\xbf][\x80-\xbf]{2}"
    rb"|[\xf1-\xf3][\x80-\xbf]{3}"
    rb"|\xf4[\x80-\x8f][\x80-\xbf]{2}"
)

_TABLE_START = re.compile(
    rb"\|?" + _MARKER + rb"(?:\|" + _MARKER + rb")*\|?" + _SPACE + rb"*" + _NEWLINE
)
_TABLE_CELL = re.compile(
    rb"(?:\\\||[\x00-\x09\x0b\x0c\x0e-\x7b\x7d-\x7f]|" + _UTF8_MULTIBYTE + rb")+"
)
_TABLE_CELL_END = re.compile(rb"\|" + _SPACE + rb"*")
_TABLE_ROW_END = re.compile(_SPACE + rb"*" + _NEWLINE)


def _scanner(pattern: re.Pattern[bytes]) -> Callable[[BytesLike, int], int]:
    def scan(data: BytesLike, offset: int = 0) -> int:
        if isinstance(data, str):
            raise TypeError("scanners operate on bytes, not str")
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        buf = bytes(data)
        if offset >= len(buf):
            return 0
        found = pattern.match(buf, offset)
        return found.end() - offset if found else 0

    return scan


_scan_table_start = _scanner(_TABLE_START)
_scan_table_cell = _scanner(_TABLE_CELL)
_scan_table_cell_end = _scanner(_TABLE_CELL_END)
_scan_table_row_end = _scanner(_TABLE_ROW_END)


def scan_table_start(data: BytesLike, offset: int = 0) -> int:
    """Match a delimiter row such as ``| :-- | --: |`` ending in a newline."""
    return _scan_table_start(data, offset)


def scan_table_cell(data: BytesLike, offset: int = 0) -> int:
    """Match non-empty cell content: valid UTF-8 without ``|``, CR or LF.

    An escaped pipe (``\\|``) counts as part of the cell.
    """
    return _scan_table_cell(data, offset)


def scan_table_cell_end(data: BytesLike, offset: int = 0) -> int:
    """Match a cell separator pipe and any spaces after it."""
    return _scan_table_cell_end(data, offset)


def scan_table_row_end(data: BytesLike, offset: int = 0) -> int:
    """Match optional trailing spaces followed by a line ending."""
    return _scan_table_row_end(data, offset)
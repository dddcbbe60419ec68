"""Task list items: ``- [ ]`` and ``- [x]`` markers in list items."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .scanners import _UTF8_MULTIBYTE, _scanner

__all__ = [
    "TaskMarker",
    "scan_tasklist",
    "match_task_item",
    "checkbox_html",
    "commonmark_marker",
    "xml_attr",
]

_SPACE = rb"[ \t\x0b\x0c]"
_ANY_BUT_NEWLINE = rb"(?:[\x00-\x09\x0b-\x7f]|" + _UTF8_MULTIBYTE + rb")"

_TASKLIST = re.compile(
    _SPACE
    + rb"*(?:[*+\-]|[0-9]+"
    + _ANY_BUT_NEWLINE
    + rb")"
    + _SPACE
    + rb"+\[[ xX]\]"
    + _SPACE
    + rb"+"
)

_scan_tasklist = _scanner(_TASKLIST)


def scan_tasklist(data: Union[bytes, bytearray, memoryview], offset: int = 0) -> int:
    """Match a list marker followed by a ``[ ]``, ``[x]`` or ``[X]`` box.

    Returns the number of bytes matched, including the spaces after the
    box, or ``0`` when there is no task marker at ``offset``.
    """
    return _scan_tasklist(data, offset)


@dataclass(frozen=True)
class TaskMarker:
    """A task marker found at the start of a list item line."""

    checked: bool
    length: int


def match_task_item(line: Union[str, bytes, bytearray, memoryview]) -> Optional[TaskMarker]:
    """Recognise a task list item line, or return ``None``.

    An item is checked when ``[x]`` or ``[X]`` appears anywhere in the line.
    """
    data = line.encode("utf-8") if isinstance(line, str) else bytes(line)
    matched = scan_tasklist(data, 0)
    if not matched:
        return None
    return TaskMarker(checked=b"[x]" in data or b"[X]" in data, length=matched)


def checkbox_html(checked: bool) -> str:
    """The HTML checkbox written after ``<li>`` for a task item."""
    if checked:
        return '<input type="checkbox" checked="" disabled="" /> '
    return '<input type="checkbox" disabled="" /> '


def commonmark_marker(checked: bool) -> str:
    """The CommonMark text that starts a task item."""
    box = "x" if checked else " "
    return f"- [{box}] "


def xml_attr(checked: bool) -> str:
    """The XML attribute carrying a task item's state."""
    state = str(bool(checked)).lower()
    return f' completed="{state}"'
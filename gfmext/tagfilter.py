"""Filtering of raw HTML tags that GitHub-flavoured Markdown disallows.

Raw HTML that opens or closes one of the disallowed tags is not passed
through verbatim by the tag filter.
"""

from __future__ import annotations

from typing import Union

__all__ = ["DISALLOWED_TAGS", "is_tag", "allows_tag"]

DISALLOWED_TAGS: tuple[str, ...] = (
    "title",
    "textarea",
    "style",
    "xmp",
    "iframe",
    "noembed",
    "noframes",
    "script",
    "plaintext",
)

_WHITESPACE = frozenset(b" \t\n\x0b\x0c\r")

TagText = Union[str, bytes, bytearray, memoryview]


def _as_bytes(value: TagText) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def is_tag(tag: TagText, tagname: str) -> bool:
    """Tell whether raw HTML ``tag`` opens or closes the element ``tagname``.

    The name is compared case-insensitively (ASCII only) and must be
    followed by whitespace, ``>`` or ``/>``.
    """
    data = _as_bytes(tag)
    name = tagname.encode("ascii")

    if len(data) < 3 or data[0] != ord("<"):
        return False

    start = 2 if data[1] == ord("/") else 1
    end = start + len(name)
    if end >= len(data) or data[start:end].lower() != name:
        return False

    after = data[end]
    if after in _WHITESPACE or after == ord(">"):
        return True
    return after == ord("/") and end + 1 < len(data) and data[end + 1] == ord(">")


def allows_tag(tag: TagText) -> bool:
    """Return ``False`` when ``tag`` is one of the disallowed tags."""
    return not any(is_tag(tag, name) for name in DISALLOWED_TAGS)
"""Extended autolinks: bare ``www.`` hosts, ``http(s)://``/``ftp://`` URLs
and e-mail addresses found in ordinary text.

All functions work on UTF-8 bytes. A ``str`` argument is encoded as UTF-8
first, and every offset, both given and returned, is a byte offset into
that encoding.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import List, Optional, Union

__all__ = [
    "Autolink",
    "is_safe_url",
    "autolink_delim",
    "check_domain",
    "match_www",
    "match_url",
    "find_email_autolinks",
]

Text = Union[str, bytes, bytearray, memoryview]

_SAFE_SCHEMES = (b"http://", b"https://", b"ftp://")
_ASCII_SPACE = frozenset(b" \t\n\x0b\x0c\r")
_WWW_PRECEDERS = frozenset(b"*_~(")
_TRAILING_PUNCTUATION = frozenset(b"?!.,:*_~'\"")
_EMAIL_LOCAL_EXTRA = frozenset(b".+-_")
_ASCII_PUNCTUATION = frozenset(
    list(range(33, 48)) + list(range(58, 65)) + list(range(91, 97)) + list(range(123, 127))
)


@dataclass(frozen=True)
class Autolink:
    """A link recognised in text.

    ``start`` and ``end`` delimit the linked text as byte offsets into the
    UTF-8 form of the input; ``url`` is the link target.
    """

    url: str
    text: str
    start: int
    end: int


def _as_bytes(value: Text) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _isalpha(c: int) -> bool:
    return 65 <= c <= 90 or 97 <= c <= 122


def _isalnum(c: int) -> bool:
    return _isalpha(c) or 48 <= c <= 57


def _isspace(c: int) -> bool:
    return c in _ASCII_SPACE


def _first_char(data: bytes, pos: int) -> Optional[str]:
    """Decode the UTF-8 character starting at ``pos``, or ``None`` if invalid."""
    if pos >= len(data):
        return None
    lead = data[pos]
    if lead < 0x80:
        width = 1
    elif 0xC2 <= lead <= 0xDF:
        width = 2
    elif 0xE0 <= lead <= 0xEF:
        width = 3
    elif 0xF0 <= lead <= 0xF4:
        width = 4
    else:
        return None
    chunk = data[pos : pos + width]
    if len(chunk) < width:
        return None
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _is_space_char(ch: str) -> bool:
    return ch in "\t\n\x0c\r" or unicodedata.category(ch) == "Zs"


def _is_punctuation_char(ch: str) -> bool:
    code = ord(ch)
    if code < 128:
        return code in _ASCII_PUNCTUATION
    return unicodedata.category(ch).startswith("P")


def _is_valid_hostchar(data: bytes, pos: int) -> bool:
    ch = _first_char(data, pos)
    if ch is None:
        return False
    return not _is_space_char(ch) and not _is_punctuation_char(ch)


def is_safe_url(link: Text) -> bool:
    """Tell whether ``link`` starts with http://, https:// or ftp:// and a host character."""
    data = _as_bytes(link)
    for scheme in _SAFE_SCHEMES:
        size = len(scheme)
        if (
            len(data) > size
            and data[:size].lower() == scheme
            and _is_valid_hostchar(data, size)
        ):
            return True
    return False


def autolink_delim(data: Text, link_end: int) -> int:
    """Trim trailing punctuation, unbalanced ``)`` and entities from a link.

    Returns the new end of the link within ``data``; the link is cut at
    the first ``<``.
    """
    buf = _as_bytes(data)
    opening = closing = 0
    for i, c in enumerate(buf[:link_end]):
        if c == ord("<"):
            link_end = i
            break
        if c == ord("("):
            opening += 1
        elif c == ord(")"):
            closing += 1

    while link_end > 0:
        c = buf[link_end - 1]
        if c == ord(")"):
            if closing <= opening:
                return link_end
            closing -= 1
            link_end -= 1
        elif c in _TRAILING_PUNCTUATION:
            link_end -= 1
        elif c == ord(";"):
            new_end = link_end - 2
            while new_end > 0 and _isalpha(buf[new_end]):
                new_end -= 1
            if new_end < link_end - 2 and buf[new_end] == ord("&"):
                link_end = new_end
            else:
                link_end -= 1
        else:
            return link_end
    return link_end


def check_domain(data: Text, allow_short: bool) -> int:
    """Return the length of the host name at the start of ``data``, or 0.

    An underscore in either of the last two segments rejects the domain,
    unless it has more than ten segments. Without ``allow_short`` the
    domain must contain at least one dot.
    """
    buf = _as_bytes(data)
    size = len(buf)
    dots = uscore1 = uscore2 = 0
    i = 1
    while i < size - 1:
        if buf[i] == ord("\\") and i < size - 2:
            i += 1
        c = buf[i]
        if c == ord("_"):
            uscore2 += 1
        elif c == ord("."):
            uscore1 = uscore2
            uscore2 = 0
            dots += 1
        elif not _is_valid_hostchar(buf, i) and c != ord("-"):
            break
        i += 1

    if (uscore1 > 0 or uscore2 > 0) and dots <= 10:
        return 0
    if allow_short:
        return i
    return i if dots else 0


def _extend_link(data: bytes, link_end: int) -> int:
    while link_end < len(data) and not _isspace(data[link_end]) and data[link_end] != ord("<"):
        link_end += 1
    return link_end


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")


def match_www(text: Text, offset: int) -> Optional[Autolink]:
    """Recognise a ``www.`` link starting at ``offset``, or return ``None``.

    The character before it, if any, must be whitespace or one of ``*_~(``.
    """
    _check_offset(offset)
    buf = _as_bytes(text)
    if offset > 0:
        before = buf[offset - 1]
        if before not in _WWW_PRECEDERS and not _isspace(before):
            return None

    data = buf[offset:]
    if len(data) < 4 or not data.startswith(b"www."):
        return None

    link_end = check_domain(data, False)
    if link_end == 0:
        return None
    link_end = autolink_delim(data, _extend_link(data, link_end))
    if link_end == 0:
        return None

    linked = data[:link_end]
    return Autolink(
        url="http://" + _decode(linked),
        text=_decode(linked),
        start=offset,
        end=offset + link_end,
    )


def match_url(text: Text, offset: int) -> Optional[Autolink]:
    """Recognise a URL whose ``://`` begins at ``offset``, or return ``None``.

    The scheme is the run of letters before ``offset`` and must be http,
    https or ftp.
    """
    _check_offset(offset)
    buf = _as_bytes(text)
    data = buf[offset:]
    if len(data) < 4 or data[0] != ord(":") or data[1] != ord("/") or data[2] != ord("/"):
        return None

    rewind = 0
    while rewind < offset and _isalpha(buf[offset - rewind - 1]):
        rewind += 1

    if not is_safe_url(buf[offset - rewind :]):
        return None

    link_end = 3
    domain_len = check_domain(data[link_end:], True)
    if domain_len == 0:
        return None
    link_end = autolink_delim(data, _extend_link(data, link_end + domain_len))
    if link_end == 0:
        return None

    linked = _decode(buf[offset - rewind : offset + link_end])
    return Autolink(url=linked, text=linked, start=offset - rewind, end=offset + link_end)


def _validate_protocol(protocol: bytes, data: bytes, at: int, rewind: int, max_rewind: int) -> bool:
    size = len(protocol)
    room = max_rewind - rewind
    if size > room:
        return False
    end = at - rewind
    if data[end - size : end] != protocol:
        return False
    if size == room:
        return True
    return not _isalnum(data[end - size - 1])


def find_email_autolinks(text: Text) -> List[Autolink]:
    """Find e-mail, ``mailto:`` and ``xmpp:`` addresses in ``text``, in order.

    Bare addresses get a ``mailto:`` URL; addresses written with a
    ``mailto:`` or ``xmpp:`` prefix keep it as written.
    """
    data = _as_bytes(text)
    links: List[Autolink] = []
    start = 0
    offset = 0
    remaining = len(data)

    while offset < remaining:
        at = data.find(b"@", start + offset, start + remaining)
        if at < 0:
            break
        max_rewind = at - (start + offset)
        auto_mailto = True
        is_xmpp = False
        dots = 0
        skip = False

        while True:
            base = start + offset + max_rewind
            rewind = 0
            while rewind < max_rewind:
                c = data[base - rewind - 1]
                if _isalnum(c) or c in _EMAIL_LOCAL_EXTRA:
                    rewind += 1
                    continue
                if c == ord(":"):
                    if _validate_protocol(b"mailto:", data, base, rewind, max_rewind):
                        auto_mailto = False
                        rewind += 1
                        continue
                    if _validate_protocol(b"xmpp:", data, base, rewind, max_rewind):
                        auto_mailto = False
                        is_xmpp = True
                        rewind += 1
                        continue
                break

            if rewind == 0:
                offset += max_rewind + 1
                skip = True
                break

            retry = False
            link_end = 1
            while link_end < remaining - offset - max_rewind:
                c = data[base + link_end]
                if _isalnum(c):
                    pass
                elif c == ord("@"):
                    offset += max_rewind + 1
                    max_rewind = link_end - 1
                    retry = True
                    break
                elif (
                    c == ord(".")
                    and link_end < remaining - offset - max_rewind - 1
                    and _isalnum(data[base + link_end + 1])
                ):
                    dots += 1
                elif c == ord("/") and is_xmpp:
                    pass
                elif c not in b"-_":
                    break
                link_end += 1
            if not retry:
                break

        if skip:
            continue

        last = data[base + link_end - 1]
        if link_end < 2 or dots == 0 or (not _isalpha(last) and last != ord(".")):
            offset += max_rewind + link_end
            continue

        link_end = autolink_delim(data[base:], link_end)
        if link_end == 0:
            offset += max_rewind + 1
            continue

        linked = data[base - rewind : base + link_end]
        prefix = "mailto:" if auto_mailto else ""
        links.append(
            Autolink(
                url=prefix + _decode(linked),
                text=_decode(linked),
                start=base - rewind,
                end=base + link_end,
            )
        )

        consumed = offset + max_rewind + link_end
        start += consumed
        remaining -= consumed
        offset = 0

    return links
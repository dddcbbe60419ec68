"""Strikethrough (``~~text~~``) delimiter rules and markup."""

from __future__ import annotations

from enum import Enum
from typing import Union

__all__ = [
    "MAX_DELIMITER_RUN",
    "OutputFormat",
    "accepts_delimiter_run",
    "delimiters_match",
    "markup",
]

# Longest run of tildes scanned as one delimiter.
MAX_DELIMITER_RUN = 100


class OutputFormat(Enum):
    """Formats that strikethrough text can be written in."""

    COMMONMARK = "commonmark"
    LATEX = "latex"
    MAN = "man"
    HTML = "html"
    PLAINTEXT = "plaintext"


def accepts_delimiter_run(
    length: int, left_flanking: bool, right_flanking: bool, double_tilde_only: bool
) -> bool:
    """Tell whether a run of ``length`` tildes can open or close strikethrough.

    The run must be flanking on at least one side and be two tildes long,
    or a single tilde when single tildes are permitted.
    """
    if not (left_flanking or right_flanking):
        return False
    return length == 2 or (not double_tilde_only and length == 1)


def delimiters_match(opener_length: int, closer_length: int) -> bool:
    """An opener and a closer pair up only when their runs are equally long."""
    return opener_length == closer_length


_MARKUP: dict[OutputFormat, tuple[str, str]] = {
    OutputFormat.COMMONMARK: ("~~", "~~"),
    OutputFormat.LATEX: ("\\sout{", "}"),
    OutputFormat.MAN: ('\n.ST "', '"\n'),
    OutputFormat.HTML: ("<del>", "</del>"),
    OutputFormat.PLAINTEXT: ("~", "~"),
}


def markup(fmt: Union[OutputFormat, str], entering: bool) -> str:
    """Text written when entering or leaving a strikethrough node.

    For the man format, the leading or trailing newline stands for the line
    break the renderer starts before ``.ST`` and after the closing quote.
    LaTeX output needs the ``ulem`` package.
    """
    opening, closing = _MARKUP[OutputFormat(fmt)]
    return opening if entering else closing
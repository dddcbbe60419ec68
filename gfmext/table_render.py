"""Rendering of parsed tables and their column alignments.

Cell contents are written as plain text: HTML output escapes it, and
CommonMark output escapes the pipes in it so the row parses back the same.
"""

from __future__ import annotations

from typing import Iterable, List

from .table import Alignment, Row, Table

__all__ = [
    "commonmark_delimiter_row",
    "latex_column_spec",
    "man_column_spec",
    "html_align_attribute",
    "xml_align_attribute",
    "render_html",
    "render_commonmark",
]

_COMMONMARK_DELIMITERS = {
    Alignment.NONE: " --- |",
    Alignment.LEFT: " :-- |",
    Alignment.CENTER: " :-: |",
    Alignment.RIGHT: " --: |",
}

_LATEX_COLUMNS = {
    Alignment.NONE: "l",
    Alignment.LEFT: "l",
    Alignment.CENTER: "c",
    Alignment.RIGHT: "r",
}

_MAN_COLUMNS = {
    Alignment.NONE: "c",
    Alignment.LEFT: "l",
    Alignment.CENTER: "c",
    Alignment.RIGHT: "r",
}

_ALIGN_NAMES = {
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
}


def commonmark_delimiter_row(alignments: Iterable[Alignment]) -> str:
    """The delimiter row written after a table's header in CommonMark."""
    return "|" + "".join(_COMMONMARK_DELIMITERS[Alignment(a)] for a in alignments)


def latex_column_spec(alignments: Iterable[Alignment]) -> str:
    """Column letters for a ``tabular`` environment; unaligned columns are ``l``."""
    return "".join(_LATEX_COLUMNS[Alignment(a)] for a in alignments)


def man_column_spec(alignments: Iterable[Alignment]) -> str:
    """Column format line for ``tbl``; unaligned columns are centred.

    A non-empty format ends with ``.``.
    """
    letters = "".join(_MAN_COLUMNS[Alignment(a)] for a in alignments)
    return letters + "." if letters else ""


def html_align_attribute(alignment: Alignment, prefer_style: bool = False) -> str:
    """The alignment attribute of a ``<th>`` or ``<td>`` element, or ``""``."""
    name = _ALIGN_NAMES.get(Alignment(alignment))
    if name is None:
        return ""
    if prefer_style:
        return f' style="text-align: {name}"'
    return f' align="{name}"'


def xml_align_attribute(alignment: Alignment) -> str:
    """The alignment attribute of a header cell in XML output, or ``""``."""
    name = _ALIGN_NAMES.get(Alignment(alignment))
    return f' align="{name}"' if name else ""


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


class _Output:
    """Text buffer with the renderer's conditional line break."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def put(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def cr(self) -> None:
        if self._parts and not self._parts[-1].endswith("\n"):
            self._parts.append("\n")

    def __str__(self) -> str:
        return "".join(self._parts)


def _alignment_at(table: Table, index: int) -> Alignment:
    return table.alignments[index] if index < len(table.alignments) else Alignment.NONE


def _html_row(out: _Output, table: Table, row: Row, prefer_style: bool) -> None:
    tag = "th" if row.is_header else "td"
    out.put("<tr>")
    for index, cell in enumerate(row.cells):
        out.cr()
        attribute = html_align_attribute(_alignment_at(table, index), prefer_style)
        out.put(f"<{tag}{attribute}>{_escape_html(cell.text)}</{tag}>")
    out.cr()
    out.put("</tr>")


def render_html(table: Table, prefer_style: bool = False) -> str:
    """Render ``table`` as HTML with ``<thead>`` and, if it has rows, ``<tbody>``."""
    out = _Output()
    out.put("<table>")
    out.cr()
    out.put("<thead>")
    out.cr()
    _html_row(out, table, table.header, prefer_style)
    out.cr()
    out.put("</thead>")
    if table.rows:
        out.cr()
        out.put("<tbody>")
        for row in table.rows:
            out.cr()
            _html_row(out, table, row, prefer_style)
        out.cr()
        out.put("</tbody>")
        out.cr()
    out.cr()
    out.put("</table>")
    out.cr()
    return str(out)


def _commonmark_row(row: Row) -> str:
    return "|" + "".join(f" {cell.text.replace('|', chr(92) + '|')} |" for cell in row.cells)


def render_commonmark(table: Table) -> str:
    """Render ``table`` as CommonMark: header, delimiter row, then body rows."""
    columns = [_alignment_at(table, index) for index in range(table.n_columns)]
    lines = [_commonmark_row(table.header), commonmark_delimiter_row(columns)]
    lines.extend(_commonmark_row(row) for row in table.rows)
    return "\n".join(lines) + "\n"
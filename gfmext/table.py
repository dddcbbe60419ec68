"""GitHub-flavoured tables: parsing header, delimiter and body rows.

Rows are parsed from UTF-8 bytes. A ``str`` argument is encoded first, and
the offsets stored on cells are byte offsets into the parsed row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .scanners import (
    scan_table_cell,
    scan_table_cell_end,
    scan_table_row_end,
    scan_table_start,
)

__all__ = [
    "MAX_AUTOCOMPLETED_CELLS",
    "MAX_COLUMNS",
    "Alignment",
    "Cell",
    "Row",
    "Table",
    "unescape_pipes",
    "parse_row",
    "parse_alignment",
    "open_table",
]

# Limit on cells filled in for short rows, so that hostile input cannot
# make a table grow without bound.
MAX_AUTOCOMPLETED_CELLS = 0x80000

# Most cells a single row may hold.
MAX_COLUMNS = 0xFFFF

_TRIM = b" \t\n\x0b\x0c\r"

Text = Union[str, bytes, bytearray, memoryview]


class Alignment(Enum):
    """Column alignment taken from the delimiter row."""

    NONE = ""
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"


@dataclass
class Cell:
    """One table cell.

    ``start_offset`` is where the cell begins after the preceding pipe,
    ``end_offset`` the last byte of its raw content, and ``internal_offset``
    the number of bytes of padding between the pipe and the content.
    """

    text: str
    start_offset: int = 0
    end_offset: int = 0
    internal_offset: int = 0


@dataclass
class Row:
    """A parsed table row.

    ``paragraph_offset`` is non-zero when lines before the row were text
    rather than part of the row.
    """

    cells: List[Cell] = field(default_factory=list)
    is_header: bool = False
    paragraph_offset: int = 0

    @property
    def texts(self) -> List[str]:
        """The text of every cell, in order."""
        return [cell.text for cell in self.cells]


def _as_bytes(value: Text) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def unescape_pipes(data: Text) -> Union[str, bytes]:
    """Turn every ``\\|`` into ``|``; the result has the type of ``data``."""
    if isinstance(data, str):
        return data.replace("\\|", "|")
    return bytes(data).replace(b"\\|", b"|")


def parse_row(data: Text) -> Optional[Row]:
    """Parse one table row, or return ``None`` if ``data`` is not a row.

    A row is ``pipe? cell (pipe cell)* pipe? newline``; cells may be empty.
    Full lines of text before the row are skipped and reported through
    ``paragraph_offset``.
    """
    buf = _as_bytes(data)
    length = len(buf)
    cells: List[Cell] = []
    paragraph_offset = 0

    offset = scan_table_cell_end(buf, 0)
    expect_more_cells = True

    while offset < length and expect_more_cells:
        cell_matched = scan_table_cell(buf, offset)
        pipe_matched = scan_table_cell_end(buf, offset + cell_matched)

        if cell_matched or pipe_matched:
            if len(cells) >= MAX_COLUMNS:
                return None
            raw = buf[offset : offset + cell_matched]
            text = _decode(bytes(unescape_pipes(raw)).strip(_TRIM))
            start = offset
            internal = 0
            while start > paragraph_offset and buf[start - 1] != ord("|"):
                start -= 1
                internal += 1
            cells.append(
                Cell(
                    text=text,
                    start_offset=start,
                    end_offset=offset + cell_matched - 1,
                    internal_offset=internal,
                )
            )

        offset += cell_matched + pipe_matched

        if pipe_matched:
            expect_more_cells = True
            continue

        row_end = scan_table_row_end(buf, offset)
        offset += row_end
        if row_end and offset != length:
            # What came so far was a line of text before the real row.
            paragraph_offset = offset
            cells = []
            offset += scan_table_cell_end(buf, offset)
            expect_more_cells = True
        else:
            expect_more_cells = False

    if offset != length or not cells:
        return None
    return Row(cells=cells, paragraph_offset=paragraph_offset)


def parse_alignment(cell_text: str) -> Alignment:
    """Alignment of a delimiter cell such as ``:--``, ``--:`` or ``:-:``."""
    if not cell_text:
        return Alignment.NONE
    left = cell_text.startswith(":")
    right = cell_text.endswith(":")
    if left and right:
        return Alignment.CENTER
    if left:
        return Alignment.LEFT
    if right:
        return Alignment.RIGHT
    return Alignment.NONE


def _split_indent(line: bytes) -> tuple[int, bytes]:
    """Return the indentation width in columns and the line without it."""
    column = 0
    pos = 0
    while pos < len(line) and line[pos] in b" \t":
        if line[pos] == ord("\t"):
            column += 4 - column % 4
        else:
            column += 1
        pos += 1
    return column, line[pos:]


def _prepare_line(line: Text) -> Optional[bytes]:
    """Normalise an input line; ``None`` if it is indented as code."""
    buf = _as_bytes(line)
    if not buf.endswith((b"\n", b"\r")):
        buf += b"\n"
    indent, rest = _split_indent(buf)
    if indent >= 4:
        return None
    return rest


def _is_blank(line: bytes) -> bool:
    return not line.strip(_TRIM)


@dataclass
class Table:
    """A table: its column alignments, header row and body rows.

    ``paragraph`` holds the text of lines that preceded the header row in
    the same paragraph, or ``None`` when there were none.
    """

    alignments: List[Alignment]
    header: Row
    rows: List[Row] = field(default_factory=list)
    paragraph: Optional[str] = None
    n_rows: int = field(default=1, repr=False)
    nonempty_cells: int = field(default=0, repr=False)

    @property
    def n_columns(self) -> int:
        """Number of columns, fixed by the header row."""
        return len(self.header.cells)

    @property
    def autocompleted_cells(self) -> int:
        """Number of cells filled in because rows were too short."""
        return self.n_columns * self.n_rows - self.nonempty_cells

    def add_row(self, line: Text) -> Optional[Row]:
        """Parse ``line`` as a body row and append it.

        Returns the new row, padded with empty cells or cut to the table's
        width, or ``None`` when the line ends the table.
        """
        buf = _prepare_line(line)
        if buf is None or _is_blank(buf):
            return None
        if self.autocompleted_cells > MAX_AUTOCOMPLETED_CELLS:
            return None

        parsed = parse_row(buf)
        if parsed is None:
            return None

        cells = parsed.cells[: self.n_columns]
        self.n_rows += 1
        self.nonempty_cells += len(cells)
        cells.extend(Cell(text="") for _ in range(self.n_columns - len(cells)))

        row = Row(cells=cells, is_header=False)
        self.rows.append(row)
        return row


def open_table(paragraph: Text, delimiter_line: Text) -> Optional[Table]:
    """Start a table from a paragraph and the delimiter line that follows it.

    The last line of ``paragraph`` becomes the header row; it must have as
    many cells as the delimiter row. Returns ``None`` when no table starts.
    """
    delimiter = _prepare_line(delimiter_line)
    if delimiter is None or not scan_table_start(delimiter, 0):
        return None

    delimiter_row = parse_row(delimiter)
    if delimiter_row is None:
        return None

    content = _as_bytes(paragraph)
    header_row = parse_row(content)
    if header_row is None or len(header_row.cells) != len(delimiter_row.cells):
        return None

    preceding: Optional[str] = None
    if header_row.paragraph_offset:
        head = bytes(unescape_pipes(content[: header_row.paragraph_offset]))
        preceding = _decode(head.strip(_TRIM))

    header_row.is_header = True
    alignments = [parse_alignment(cell.text) for cell in delimiter_row.cells]
    return Table(
        alignments=alignments,
        header=header_row,
        paragraph=preceding,
        n_rows=1,
        nonempty_cells=len(header_row.cells),
    )
import pytest

from gfmext.scanners import (
    scan_table_cell,
    scan_table_cell_end,
    scan_table_row_end,
    scan_table_start,
)


@pytest.mark.parametrize(
    "line",
    [
        b"|---|---|",
        b"||---|\n",
        b":\n",
        b"| a |\n",
        b"|--- x|\n",
        b" |---|\n",
        b"::-\n",
        b"\n",
    ],
)
def test_table_start_rejects(line):
    assert scan_table_start(line, 0) == 0


def test_table_start_stops_at_first_newline():
    data = b"---|---\nmore text\n"
    assert scan_table_start(data, 0) == data.index(b"\n") + 1


def test_table_start_with_offset():
    data = b"xx| --- |\n"
    assert scan_table_start(data, 2) == len(data) - 2


def test_offset_past_end_returns_zero():
    data = b"|---|\n"
    for scan in (scan_table_start, scan_table_cell, scan_table_cell_end, scan_table_row_end):
        assert scan(data, len(data)) == 0
        assert scan(data, len(data) + 5) == 0


def test_cell_stops_at_pipe():
    data = b"abc|def"
    assert scan_table_cell(data, 0) == data.index(b"|")


def test_cell_includes_escaped_pipe():
    data = rb"a\|b|c"
    assert scan_table_cell(data, 0) == data.rindex(b"|")


def test_cell_trailing_backslash_is_content():
    data = b"ab\\\n"
    assert scan_table_cell(data, 0) == data.index(b"\n")


@pytest.mark.parametrize("stop", [b"\n", b"\r"])
def test_cell_stops_at_line_break(stop):
    data = b"cell text" + stop + b"rest"
    assert scan_table_cell(data, 0) == data.index(stop)


def test_cell_runs_to_end_of_data():
    data = b"only content"
    assert scan_table_cell(data, 0) == len(data)


def test_cell_accepts_valid_utf8():
    data = "caf\u00e9 \u20ac \U0001f600|x".encode("utf-8")
    assert scan_table_cell(data, 0) == data.index(b"|")


@pytest.mark.parametrize("bad", [b"\xff", b"\xe2\x82", b"\xed\xa0\x80", b"\xc0\x80"])
def test_cell_stops_before_invalid_utf8(bad):
    data = b"ab" + bad + b"cd"
    assert scan_table_cell(data, 0) == 2


@pytest.mark.parametrize("data", [b"\xff abc", b"|abc", b"\nabc", b"\xf4\x90\x80\x80"])
def test_cell_empty_or_invalid_start(data):
    assert scan_table_cell(data, 0) == 0


def test_cell_with_offset():
    data = b"| foo | bar |\n"
    start = data.index(b"f")
    assert scan_table_cell(data, start) == data.index(b"|", start) - start


def test_cell_end_consumes_pipe_and_spaces():
    data = b"|  \tx"
    assert scan_table_cell_end(data, 0) == data.index(b"x")


def test_cell_end_single_pipe():
    assert scan_table_cell_end(b"|", 0) == len(b"|")


@pytest.mark.parametrize("data", [b"x|", b" |", b"\n"])
def test_cell_end_requires_pipe(data):
    assert scan_table_cell_end(data, 0) == 0


@pytest.mark.parametrize("data", [b"\n", b"\r\n", b"  \n", b" \t\x0b\x0c\r\n"])
def test_row_end_accepts(data):
    assert scan_table_row_end(data, 0) == len(data)


@pytest.mark.parametrize("data", [b"\r", b" x\n", b"x\n", b"   "])
def test_row_end_rejects(data):
    assert scan_table_row_end(data, 0) == 0


def test_row_end_with_offset():
    data = b"| a |  \nnext"
    start = data.rindex(b"|") + 1
    assert scan_table_row_end(data, start) == data.index(b"\n") + 1 - start


def test_bytearray_and_memoryview_accepted():
    line = b"|---|\n"
    assert scan_table_start(bytearray(line), 0) == len(line)
    assert scan_table_start(memoryview(line), 0) == len(line)


def test_str_input_rejected():
    with pytest.raises(TypeError):
        scan_table_cell("abc", 0)


def test_negative_offset_rejected():
    with pytest.raises(ValueError):
        scan_table_row_end(b"\n", -1)


def test_row_tokenisation_covers_whole_line():
    line = b"| one | two \\| three |\n"
    offset = scan_table_cell_end(line, 0)
    cells = []
    while offset < len(line):
        cell = scan_table_cell(line, offset)
        pipe = scan_table_cell_end(line, offset + cell)
        if cell:
            cells.append(line[offset:offset + cell].strip())
        offset += cell + pipe
        if not pipe:
            offset += scan_table_row_end(line, offset)
            break
    assert offset == len(line)
    assert cells == [b"one", b"two \\| three"]
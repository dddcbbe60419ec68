# gfmext

Building blocks for the GitHub Flavored Markdown extensions: tables,
extended autolinks, strikethrough, task list items and the filter for
disallowed raw HTML tags. Each piece works on `str` or UTF-8 `bytes` and
is meant to be called from a Markdown parser or renderer.

## Install

```
pip install gfmext
```

The package has no runtime dependencies.

## Modules

- `gfmext.scanners`: the table line scanners `scan_table_start`,
  `scan_table_cell`, `scan_table_cell_end` and `scan_table_row_end`. Each
  takes bytes and an offset and returns the number of bytes matched
  there, or 0.
- `gfmext.tagfilter`: `is_tag(tag, tagname)` and `allows_tag(tag)`.
  `allows_tag` returns `False` for tags that open or close any name in
  `DISALLOWED_TAGS`: `title`, `textarea`, `style`, `xmp`, `iframe`,
  `noembed`, `noframes`, `script` and `plaintext`.
- `gfmext.tasklist`: `scan_tasklist`, `match_task_item` (returns a
  `TaskMarker` with `checked` and `length`, or `None`), and the output
  helpers `checkbox_html`, `commonmark_marker` and `xml_attr`.
- `gfmext.strikethrough`: the rules for tilde runs
  (`accepts_delimiter_run`, `delimiters_match`), `MAX_DELIMITER_RUN`, and
  `markup(fmt, entering)`, which gives the opening or closing text for
  each `OutputFormat` (`commonmark`, `latex`, `man`, `html`, `plaintext`).
- `gfmext.autolink`: `match_www`, `match_url` and `find_email_autolinks`,
  which return `Autolink` results (`url`, `text`, and byte offsets
  `start` and `end`), plus the helpers `is_safe_url`, `check_domain` and
  `autolink_delim`.
- `gfmext.table`: `parse_row`, `parse_alignment`, `unescape_pipes` and
  `open_table`, which turns a paragraph and the delimiter line after it
  into a `Table` of `Row`s and `Cell`s with per-column `Alignment`s.
  Body rows go in with `Table.add_row`; short rows are padded with empty
  cells, long ones cut to the header's width.
- `gfmext.table_render`: `render_html` and `render_commonmark` for a
  `Table`, and the alignment helpers `commonmark_delimiter_row`,
  `latex_column_spec`, `man_column_spec`, `html_align_attribute` and
  `xml_align_attribute`.

## Examples

```python
from gfmext.table import open_table
from gfmext.table_render import render_html

table = open_table("| a | b |", "| :- | -: |")
table.add_row("| 1 | 2 |")
print(render_html(table))
```

```python
from gfmext.autolink import find_email_autolinks

for link in find_email_autolinks("write to someone@example.com today"):
    print(link.url)          # mailto:someone@example.com
```

## What it does not do

This is not a Markdown parser and has no command-line tool. It does not
parse block structure or inline markup: table cells are kept and
rendered as plain text, strikethrough support is limited to the
delimiter rules and markup strings, and LaTeX and man output is limited
to the column specifications. Combining the pieces into a full document
renderer is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```